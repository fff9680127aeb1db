import pytest

from common_value_objects import OffensiveWordSearcher, ResourceError
from common_value_objects.config import ENV_PREFIX
from common_value_objects.domain.services import get_offensive_word_searcher, load_offensive_words


@pytest.mark.parametrize(
    "text, has_offensive_language",
    [
        ("abcdef", False),
        ("abcasDsdef", False),
        ("abcdeflmao", True),
        ("abcassdef", True),
        ("wankxyz", True),
        ("lame", True),
        ("LaMe", True),
        ("", False),
    ],
)
def test_has_offensive_language(text, has_offensive_language):
    assert OffensiveWordSearcher().has_offensive_language(text) is has_offensive_language


def test_bundled_list_is_loaded_once():
    first = OffensiveWordSearcher()
    second = OffensiveWordSearcher()
    assert first.words is second.words
    assert load_offensive_words.cache_info().misses == 1


def test_bundled_list_skips_blank_lines():
    words = OffensiveWordSearcher().words
    assert words
    assert "" not in words
    assert all(w == w.upper() for w in words)


def test_explicit_words():
    searcher = OffensiveWordSearcher(["Boo", "", "  "])
    assert searcher.words == ("BOO",)
    assert searcher.has_offensive_language("xxbOOxx")
    assert not searcher.has_offensive_language("lame")


def test_configured_word_file(tmp_path, monkeypatch):
    words_file = tmp_path / "words.txt"
    words_file.write_text("zzq\n\nqqz\n", encoding="utf-8")
    monkeypatch.setenv(ENV_PREFIX + "OFFENSIVE_WORDS_FILE", str(words_file))

    searcher = OffensiveWordSearcher()

    assert searcher.words == ("ZZQ", "QQZ")
    assert searcher.has_offensive_language("aZzQa")
    assert not searcher.has_offensive_language("lame")


def test_missing_word_file_raises(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_PREFIX + "OFFENSIVE_WORDS_FILE", str(tmp_path / "missing.txt"))

    with pytest.raises(ResourceError) as exc:
        OffensiveWordSearcher()
    assert exc.value.code == "resource_error"


def test_shared_searcher_is_cached():
    assert get_offensive_word_searcher() is get_offensive_word_searcher()


def test_host_application_settings_do_not_break_loading(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("LOG_LEVEL", "warn")
    monkeypatch.setenv("OFFENSIVE_WORDS_FILE", "/nonexistent/words.txt")

    assert OffensiveWordSearcher().has_offensive_language("lame")
