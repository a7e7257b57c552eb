from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional, Sequence

from .components import AgentRecord, DestinationRecord, MatchEntry, MatchResult
from .normalize import ENGLISH_VOWELS
from .parser import extract_agents, extract_destinations
from .scorer import DEFAULT_WEIGHTS, ScoringWeights, score_pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    weights: ScoringWeights = DEFAULT_WEIGHTS
    vowels: AbstractSet[str] = ENGLISH_VOWELS


class ShipmentMatcher:
    """Greedy one-to-one assignment of destinations to agents.

    Destinations are ranked by street-name length and agents by vowel
    count. Even-length destinations take agents first; odd-length ones are
    deferred and served from whatever agents remain, sharing one cursor.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def match(
        self,
        destinations: Sequence[DestinationRecord],
        agents: Sequence[AgentRecord],
    ) -> MatchResult:
        result = MatchResult()
        ranked_destinations = sorted(destinations, key=lambda d: d.core_length, reverse=True)
        ranked_agents = sorted(agents, key=lambda a: a.vowel_count, reverse=True)

        usable = min(len(ranked_destinations), len(ranked_agents))
        odd_queue: List[DestinationRecord] = []
        cursor = 0

        for destination in ranked_destinations[:usable]:
            if destination.is_odd_length:
                odd_queue.append(destination)
                continue
            cursor = self._assign(result, destination, ranked_agents, cursor)

        for destination in odd_queue:
            if cursor >= len(ranked_agents):
                break
            cursor = self._assign(result, destination, ranked_agents, cursor)

        logger.debug(
            "Matched %d of %d destinations to %d agents (%d deferred odd), total=%s",
            len(result.matches),
            len(ranked_destinations),
            len(ranked_agents),
            len(odd_queue),
            result.total,
        )
        return result

    def _assign(
        self,
        result: MatchResult,
        destination: DestinationRecord,
        agents: Sequence[AgentRecord],
        cursor: int,
    ) -> int:
        agent = agents[cursor]
        score = score_pair(destination, agent, self.config.weights)
        result.add_entry(
            MatchEntry(
                destination=destination.original_text,
                agent=agent.original_text,
                score=score,
            )
        )
        return cursor + 1


def assign(
    destination_lines: Iterable[str],
    agent_lines: Iterable[str],
    vowels: Optional[AbstractSet[str]] = None,
    config: EngineConfig | None = None,
) -> MatchResult:
    """Extract features from both line lists and match them.

    ``vowels`` overrides the vowel set of ``config`` when given.
    """
    config = config or EngineConfig()
    if vowels is not None:
        config = EngineConfig(weights=config.weights, vowels=frozenset(vowels))

    destinations = extract_destinations(destination_lines)
    agents = extract_agents(agent_lines, config.vowels)
    return ShipmentMatcher(config).match(destinations, agents)
