import re

from stats_analyzer.colors import LANGUAGE_COLORS, resolve_color, string_to_color

HEX = re.compile(r'^#[0-9A-Fa-f]{6}$')


def test_known_languages_use_palette():
    assert resolve_color('Python') == '#3572A5'
    assert resolve_color('TypeScript') == '#3178c6'
    assert resolve_color('C#') == '#178600'
    assert len(LANGUAGE_COLORS) == 28


def test_unknown_language_is_stable_hex():
    color = resolve_color('Zig')
    assert HEX.match(color)
    assert len(color) == 7
    assert resolve_color('Zig') == color == string_to_color('Zig')


def test_hash_is_zero_padded():
    # 'A' hashes to 65, 'AB' to 66 + 65 * 31
    assert string_to_color('A') == '#000041'
    assert string_to_color('AB') == '#000821'
    assert string_to_color('') == '#000000'


def test_hash_wraps_at_32_bits():
    long_name = 'Zig' * 50
    assert HEX.match(string_to_color(long_name))


def test_hash_uses_utf16_code_units():
    # U+1F40D is the surrogate pair D83D DC0D
    h = 0
    for unit in (0xD83D, 0xDC0D):
        h = (unit + (h << 5) - h) & 0xFFFFFFFF
    assert string_to_color('\U0001F40D') == f'#{h & 0xFFFFFF:06X}'


def test_different_unknown_names_differ():
    assert string_to_color('Zig') != string_to_color('Nim')
