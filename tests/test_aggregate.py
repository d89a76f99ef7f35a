import pytest

from stats_analyzer.aggregate import (
    LanguageObservation,
    aggregate,
    observations_from_languages,
    observations_from_repos,
    to_kilobytes,
    total_value,
)
from stats_analyzer.colors import OTHER_COLOR

SEVEN = [
    LanguageObservation('JavaScript', 45000),
    LanguageObservation('Python', 32000),
    LanguageObservation('TypeScript', 28000),
    LanguageObservation('HTML', 12000),
    LanguageObservation('CSS', 8000),
    LanguageObservation('Java', 3000),
    LanguageObservation('Go', 1800),
]


def test_empty_input_gives_empty_stats():
    assert aggregate([]) == []


def test_single_language_is_100_percent():
    stats = aggregate([LanguageObservation('Rust', 10), LanguageObservation('Rust', 5)])
    assert len(stats) == 1
    assert stats[0].value == 15
    assert stats[0].percent == pytest.approx(100)


def test_zero_total_gives_zero_percent():
    stats = aggregate([LanguageObservation('Rust', 0), LanguageObservation('Go', 0)])
    assert [s.percent for s in stats] == [0, 0]


def test_top_five_plus_other():
    stats = aggregate(SEVEN)
    assert [s.name for s in stats] == ['JavaScript', 'Python', 'TypeScript', 'HTML', 'CSS', 'Other']
    other = stats[-1]
    assert other.value == 4800
    assert other.color == OTHER_COLOR
    assert sum(s.percent for s in stats) == pytest.approx(100)
    assert stats[0].percent == pytest.approx(45000 / 129800 * 100)


def test_other_sorts_last_even_when_large():
    obs = [LanguageObservation(name, 10) for name in 'ABCDE'] + [
        LanguageObservation('F', 9),
        LanguageObservation('G', 9),
    ]
    stats = aggregate(obs)
    assert stats[-1].name == 'Other'
    assert stats[-1].value == 18


def test_five_or_fewer_languages_has_no_other():
    stats = aggregate(SEVEN[:5])
    assert len(stats) == 5
    assert 'Other' not in [s.name for s in stats]


def test_ties_keep_encounter_order():
    obs = [LanguageObservation('B', 5), LanguageObservation('A', 5), LanguageObservation('C', 7)]
    assert [s.name for s in aggregate(obs)] == ['C', 'B', 'A']


def test_heuristic_mode_skips_forks_and_missing_language():
    repos = [
        {'language': 'Python', 'size': 10, 'fork': False},
        {'language': None, 'size': 99, 'fork': False},
        {'language': 'Go', 'size': 99, 'fork': True},
        {'language': 'Python', 'size': 5, 'fork': False},
    ]
    stats = aggregate(observations_from_repos(repos))
    assert [(s.name, s.value) for s in stats] == [('Python', 15)]


def test_heuristic_mode_with_no_eligible_repos():
    repos = [{'language': None, 'size': 1, 'fork': False}, {'language': 'Go', 'size': 1, 'fork': True}]
    assert aggregate(observations_from_repos(repos)) == []


def test_exact_mode_kilobytes_and_percent():
    stats = to_kilobytes(aggregate(observations_from_languages({'TypeScript': 102400, 'CSS': 5120})))
    assert [(s.name, s.value) for s in stats] == [('TypeScript', 100), ('CSS', 5)]
    assert [round(s.percent, 1) for s in stats] == [95.2, 4.8]
    assert [s.raw_size for s in stats] == [102400, 5120]
    assert total_value(stats) == 105


def test_exact_mode_other_bucket_in_kilobytes():
    languages = {
        'TypeScript': 20480,
        'Python': 10240,
        'Go': 6144,
        'Rust': 5120,
        'C': 4096,
        'Shell': 8192,
        'HTML': 2048,
        'CSS': 1024,
    }
    stats = to_kilobytes(aggregate(observations_from_languages(languages)))
    assert [s.name for s in stats] == ['TypeScript', 'Python', 'Shell', 'Go', 'Rust', 'Other']
    other = stats[-1]
    assert other.raw_size == 4096 + 2048 + 1024
    assert other.value == 7
    assert round(other.percent, 1) == round(7168 / 57344 * 100, 1)
    assert sum(s.percent for s in stats) == pytest.approx(100)


def test_exact_mode_half_kilobyte_rounds_up():
    stats = to_kilobytes(aggregate(observations_from_languages({'Go': 1536, 'C': 2560})))
    assert [s.value for s in stats] == [3, 2]
