"""Greedy shipment-to-driver assignment with suitability scoring."""

from .components import AgentRecord, DestinationRecord, MatchEntry, MatchResult
from .engine import EngineConfig, ShipmentMatcher, assign
from .normalize import ENGLISH_VOWELS
from .report import render_report
from .scorer import DEFAULT_WEIGHTS, ScoringWeights

__all__ = [
    "assign",
    "ShipmentMatcher",
    "EngineConfig",
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "ENGLISH_VOWELS",
    "AgentRecord",
    "DestinationRecord",
    "MatchEntry",
    "MatchResult",
    "render_report",
]
