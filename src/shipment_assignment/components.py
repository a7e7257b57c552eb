from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union


@dataclass(frozen=True)
class DestinationRecord:
    """A delivery destination reduced to its street-name features."""

    original_text: str
    core_length: int = 0
    is_odd_length: bool = False


@dataclass(frozen=True)
class AgentRecord:
    """A delivery agent reduced to its name features."""

    original_text: str
    vowel_count: int = 0
    core_length: int = 0
    is_odd_length: bool = False


@dataclass(frozen=True)
class MatchEntry:
    destination: str
    agent: str
    score: float

    def as_dict(self) -> Dict[str, Union[str, float]]:
        return {
            "destination": self.destination,
            "agent": self.agent,
            "score": self.score,
        }


@dataclass
class MatchResult:
    """Ordered pairings produced by a single matching run."""

    matches: List[MatchEntry] = field(default_factory=list)
    total: float = 0.0

    def add_entry(self, entry: MatchEntry) -> None:
        self.matches.append(entry)
        self.total += entry.score

    def as_dict(self) -> Dict[str, object]:
        return {
            "matches": [entry.as_dict() for entry in self.matches],
            "total": self.total,
        }
