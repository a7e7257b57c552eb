from __future__ import annotations

from typing import AbstractSet, Optional

# Lowercase only; matching is case-sensitive.
ENGLISH_VOWELS: frozenset[str] = frozenset({"a", "e", "i", "o", "u", "y"})


def _tokens(text: str) -> list[str]:
    return text.strip().split(" ")


def core_destination_name(address_text: str) -> Optional[str]:
    """Return the lower-cased street name of ``number name... type``.

    The house number and street type are dropped and the remaining tokens
    are joined without a separator. ``None`` means the address has fewer
    than two tokens and cannot be scored.
    """
    tokens = _tokens(address_text)
    if len(tokens) < 2:
        return None
    return "".join(tokens[1:-1]).lower()


def core_agent_name(name_text: str) -> str:
    return "".join(_tokens(name_text))


def count_vowels(text: str, vowels: AbstractSet[str] = ENGLISH_VOWELS) -> int:
    return sum(1 for char in text if char in vowels)


def is_odd(length: int) -> bool:
    return length % 2 == 1
