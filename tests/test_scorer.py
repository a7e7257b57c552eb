import pytest

from shipment_assignment.components import AgentRecord, DestinationRecord
from shipment_assignment.scorer import ScoringWeights, score_pair


def destination(length: int) -> DestinationRecord:
    return DestinationRecord(original_text="x", core_length=length, is_odd_length=length % 2 == 1)


def agent(vowels: int, length: int) -> AgentRecord:
    return AgentRecord(
        original_text="y", vowel_count=vowels, core_length=length, is_odd_length=length % 2 == 1
    )


def test_even_destination_uses_even_multiplier():
    assert score_pair(destination(4), agent(3, 8)) == 4.5


def test_odd_destination_uses_odd_multiplier():
    assert score_pair(destination(5), agent(3, 8)) == 3.0


def test_equal_lengths_earn_match_bonus():
    assert score_pair(destination(4), agent(2, 4)) == 2 * 1.5 * 1.5
    assert score_pair(destination(3), agent(1, 3)) == 1.5


def test_shared_factor_without_equal_length_gets_no_bonus():
    # 4 and 6 share a factor of 2
    assert score_pair(destination(4), agent(2, 6)) == 3.0


def test_custom_weights():
    weights = ScoringWeights(even_multiplier=2.0, odd_multiplier=0.5, match_multiplier=3.0)
    assert score_pair(destination(4), agent(2, 4), weights) == 12.0
    assert score_pair(destination(3), agent(2, 5), weights) == 1.0


def test_negative_weights_are_rejected():
    with pytest.raises(ValueError):
        ScoringWeights(match_multiplier=-1.0)
