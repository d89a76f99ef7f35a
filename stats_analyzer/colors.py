"""Language colors, matching GitHub's linguist palette."""

from __future__ import annotations

LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#3178c6",
    "Python": "#3572A5",
    "Vue": "#41b883",
    "React": "#61dafb",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Java": "#b07219",
    "C#": "#178600",
    "C++": "#f34b7d",
    "C": "#555555",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "PHP": "#4F5D95",
    "Ruby": "#701516",
    "Swift": "#ffac45",
    "Kotlin": "#A97BFF",
    "Dart": "#00B4AB",
    "Shell": "#89e051",
    "PowerShell": "#012456",
    "Solidity": "#AA6746",
    "Lua": "#000080",
    "Svelte": "#ff3e00",
    "Elixir": "#6e4a7e",
    "Haskell": "#5e5086",
    "Scala": "#c22d40",
    "Perl": "#0298c3",
    "R": "#198ce7",
}

# Color of the synthetic "Other" bucket
OTHER_COLOR = "#8b949e"


def _utf16_units(text: str):
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def string_to_color(name: str) -> str:
    """
    Derive a stable color for a language missing from the palette.

    Runs a 32-bit wrapping string hash over the UTF-16 code units of the
    name and keeps the low 24 bits as an RGB value.

    Args:
        name: Language name

    Returns:
        Upper-case hex color such as ``#0A1B2C``
    """
    h = 0
    for unit in _utf16_units(name):
        h = (unit + (h << 5) - h) & 0xFFFFFFFF
    return f"#{h & 0xFFFFFF:06X}"


def resolve_color(name: str) -> str:
    """Return the palette color for a language, or its hash-derived color."""
    return LANGUAGE_COLORS.get(name) or string_to_color(name)


__all__ = ["LANGUAGE_COLORS", "OTHER_COLOR", "string_to_color", "resolve_color"]
