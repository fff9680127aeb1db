"""Domain services."""

from .offensive_word_searcher import (
    OffensiveWordSearcher,
    get_offensive_word_searcher,
    load_offensive_words,
)

__all__ = [
    "OffensiveWordSearcher",
    "get_offensive_word_searcher",
    "load_offensive_words",
]
