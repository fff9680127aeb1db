# src/common_value_objects/domain/services/offensive_word_searcher.py
"""Case-insensitive substring screening against a static word list."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional

from common_value_objects.config import get_settings
from common_value_objects.errors import ResourceError
from common_value_objects.logging import get_logger

logger = get_logger(__name__)

_BUNDLED_WORDS = ("resources", "offensive-words.txt")


def _read_word_data(path: Optional[Path]) -> str:
    try:
        if path is not None:
            return path.read_text(encoding="utf-8")
        package_root = resources.files("common_value_objects")
        resource = package_root.joinpath(_BUNDLED_WORDS[0]).joinpath(_BUNDLED_WORDS[1])
        return resource.read_text(encoding="utf-8")
    except OSError as e:
        raise ResourceError(
            "Unable to retrieve offensive language file.",
            details={"path": str(path) if path is not None else "/".join(_BUNDLED_WORDS)},
        ) from e


@lru_cache(maxsize=None)
def load_offensive_words(path: Optional[Path] = None) -> tuple[str, ...]:
    """
    Load and upper-case the word list once per path.

    Blank lines are ignored. The result is an immutable tuple shared by every
    searcher reading the same file.
    """
    words = tuple(
        line.strip().upper()
        for line in _read_word_data(path).splitlines()
        if line.strip()
    )
    logger.debug("Offensive word list loaded", word_count=len(words), custom_path=path is not None)
    return words


class OffensiveWordSearcher:
    """
    Detects offensive language by substring match.

    Without explicit words, the list configured via COMMON_VALUE_OBJECTS_OFFENSIVE_WORDS_FILE
    (or the bundled list) is used.
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        if words is None:
            self._words = load_offensive_words(get_settings().OFFENSIVE_WORDS_FILE)
        else:
            self._words = tuple(w.strip().upper() for w in words if w.strip())

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def has_offensive_language(self, text: str) -> bool:
        haystack = text.upper()
        return any(word in haystack for word in self._words)


@lru_cache(maxsize=1)
def get_offensive_word_searcher() -> OffensiveWordSearcher:
    """Process-wide searcher over the configured word list."""
    return OffensiveWordSearcher()
