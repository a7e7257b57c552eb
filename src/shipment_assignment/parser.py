from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, List, Optional

from .components import AgentRecord, DestinationRecord
from .normalize import (
    ENGLISH_VOWELS,
    core_agent_name,
    core_destination_name,
    count_vowels,
    is_odd,
)

logger = logging.getLogger(__name__)


def parse_destination(address_text: str) -> Optional[DestinationRecord]:
    if not address_text:
        return None

    original = address_text.strip()
    street_name = core_destination_name(original)
    if street_name is None:
        return None

    return DestinationRecord(
        original_text=original,
        core_length=len(street_name),
        is_odd_length=is_odd(len(street_name)),
    )


def parse_agent(
    name_text: str, vowels: AbstractSet[str] = ENGLISH_VOWELS
) -> Optional[AgentRecord]:
    if not name_text:
        return None

    original = name_text.strip()
    name = core_agent_name(original)
    if not name:
        return None

    return AgentRecord(
        original_text=original,
        vowel_count=count_vowels(name, vowels),
        core_length=len(name),
        is_odd_length=is_odd(len(name)),
    )


def extract_destinations(lines: Iterable[str]) -> List[DestinationRecord]:
    """Turn raw address lines into destination records, in input order.

    Lines with fewer than two space-separated tokens are skipped.
    """
    records: List[DestinationRecord] = []
    for line_number, line in enumerate(lines, start=1):
        record = parse_destination(line)
        if record is None:
            logger.debug("Skipping destination line %d in unexpected format: %r", line_number, line)
            continue
        records.append(record)
    return records


def extract_agents(
    lines: Iterable[str], vowels: AbstractSet[str] = ENGLISH_VOWELS
) -> List[AgentRecord]:
    """Turn raw agent names into agent records, in input order.

    Lines that are empty once spaces are removed are skipped.
    """
    records: List[AgentRecord] = []
    for line_number, line in enumerate(lines, start=1):
        record = parse_agent(line, vowels)
        if record is None:
            logger.debug("Skipping empty agent line %d", line_number)
            continue
        records.append(record)
    return records
