from __future__ import annotations

from dataclasses import dataclass

from .components import AgentRecord, DestinationRecord


@dataclass(frozen=True)
class ScoringWeights:
    even_multiplier: float = 1.5
    odd_multiplier: float = 1.0
    match_multiplier: float = 1.5

    def __post_init__(self) -> None:
        for name in ("even_multiplier", "odd_multiplier", "match_multiplier"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


DEFAULT_WEIGHTS = ScoringWeights()


def score_pair(
    destination: DestinationRecord,
    agent: AgentRecord,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Suitability score for routing ``destination`` to ``agent``.

    The agent's vowel count is scaled by the even or odd multiplier of the
    destination's street name length. Equal street-name and agent-name
    lengths earn the match multiplier on top of that.
    """
    if destination.is_odd_length:
        score = agent.vowel_count * weights.odd_multiplier
    else:
        score = agent.vowel_count * weights.even_multiplier

    # Exact length equality, not a shared-factor test.
    if destination.core_length == agent.core_length:
        score *= weights.match_multiplier
    return score
