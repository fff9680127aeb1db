# src/common_value_objects/domain/value_objects/unambiguous_string.py
"""Random codes that are easy to read aloud and retype."""

from __future__ import annotations

import secrets
from typing import Final, Optional

from common_value_objects.domain.base_value_object import BaseValueObject
from common_value_objects.domain.services.offensive_word_searcher import (
    OffensiveWordSearcher,
    get_offensive_word_searcher,
)
from common_value_objects.errors import ValidationError
from common_value_objects.logging import get_logger

logger = get_logger(__name__)

# No 0/O, 1/I
ALLOWED_CHARACTERS: Final[str] = "23456789ABCDEFGHJKLMNPQRSTUVWXYZ"

# Every extra character adds another chance of an offensive substring; with the
# bundled list, about one in ten 10,000 character candidates is clean.
MAX_CHARACTER_COUNT: Final[int] = 10_000


def generate_unambiguous_string(character_count: int) -> str:
    return "".join(secrets.choice(ALLOWED_CHARACTERS) for _ in range(character_count))


class UnambiguousString(BaseValueObject):
    """
    Random code drawn from ALLOWED_CHARACTERS that contains no offensive words.

    Codes are regenerated until the searcher finds nothing to flag.
    """

    def __init__(
        self,
        character_count: int,
        *,
        searcher: Optional[OffensiveWordSearcher] = None,
    ) -> None:
        is_int = isinstance(character_count, int) and not isinstance(character_count, bool)
        if not is_int or not 1 <= character_count <= MAX_CHARACTER_COUNT:
            raise ValidationError(
                f"Character count must be an integer from 1 to {MAX_CHARACTER_COUNT}, got {character_count!r}",
                details={"character_count": character_count},
            )

        searcher = searcher or get_offensive_word_searcher()

        attempts = 1
        value = generate_unambiguous_string(character_count)
        while searcher.has_offensive_language(value):
            attempts += 1
            value = generate_unambiguous_string(character_count)

        if attempts > 1:
            logger.debug("Unambiguous string regenerated", attempts=attempts, character_count=character_count)

        self._value = value
        self._finalize_init()

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def _get_equality_components(self) -> tuple:
        return (self._value,)
