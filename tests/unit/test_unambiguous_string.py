import pytest

from common_value_objects import OffensiveWordSearcher, UnambiguousString, ValidationError
from common_value_objects.domain.value_objects.unambiguous_string import ALLOWED_CHARACTERS, MAX_CHARACTER_COUNT


@pytest.mark.parametrize("character_count", [-1, 0])
def test_invalid_character_counts(character_count):
    with pytest.raises(ValidationError):
        UnambiguousString(character_count)


@pytest.mark.parametrize("character_count", [True, 2.5, "10", None])
def test_character_count_must_be_an_integer(character_count):
    with pytest.raises(ValidationError):
        UnambiguousString(character_count)


@pytest.mark.parametrize("character_count", [1, 2, 3, 10, 50, 100, 1000])
def test_valid_character_counts(character_count):
    code = UnambiguousString(character_count)

    assert len(code) == character_count
    assert len(str(code)) == character_count
    assert not OffensiveWordSearcher().has_offensive_language(code.value)
    assert set(code.value) <= set(ALLOWED_CHARACTERS)


def test_alphabet_has_no_ambiguous_characters():
    assert not set("01IO") & set(ALLOWED_CHARACTERS)
    assert len(ALLOWED_CHARACTERS) == 32


class _RejectFirst:
    """Searcher double that flags the first N candidates."""

    def __init__(self, rejections):
        self.rejections = rejections
        self.seen = []

    def has_offensive_language(self, text):
        self.seen.append(text)
        return len(self.seen) <= self.rejections


def test_regenerates_until_clean():
    searcher = _RejectFirst(rejections=3)

    code = UnambiguousString(8, searcher=searcher)

    assert len(searcher.seen) == 4
    assert code.value == searcher.seen[-1]


def test_value_semantics():
    code = UnambiguousString(12)
    assert code == code
    assert code != code.value
    assert hash(code) == hash(code)
    with pytest.raises(AttributeError):
        code._value = "ABC"


def test_host_application_settings_do_not_break_generation(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("LOG_LEVEL", "warn")

    assert len(UnambiguousString(6)) == 6


def test_character_count_is_capped():
    with pytest.raises(ValidationError) as exc:
        UnambiguousString(MAX_CHARACTER_COUNT + 1)
    assert exc.value.details["character_count"] == MAX_CHARACTER_COUNT + 1


def test_max_character_count_with_bundled_words():
    code = UnambiguousString(MAX_CHARACTER_COUNT)

    assert len(code) == MAX_CHARACTER_COUNT
    assert not OffensiveWordSearcher().has_offensive_language(code.value)
