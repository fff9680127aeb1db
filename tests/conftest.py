import pytest

from common_value_objects.config import ENV_PREFIX, get_settings
from common_value_objects.domain.services.offensive_word_searcher import (
    get_offensive_word_searcher,
    load_offensive_words,
)

SETTING_NAMES = ("ENVIRONMENT", "LOG_LEVEL", "LOG_FORMAT", "OFFENSIVE_WORDS_FILE")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in SETTING_NAMES:
        monkeypatch.delenv(key, raising=False)
        monkeypatch.delenv(ENV_PREFIX + key, raising=False)
    get_settings.cache_clear()
    get_offensive_word_searcher.cache_clear()
    load_offensive_words.cache_clear()
    yield
    get_settings.cache_clear()
    get_offensive_word_searcher.cache_clear()
    load_offensive_words.cache_clear()
