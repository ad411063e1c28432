"""
Tests for accuracy, rule agreement and reorder rate metrics.
"""
import numpy as np
import pytest

from reorder_net.evaluators import (
    classification_accuracy,
    reorder_rate,
    rule_agreement,
    summarize_decisions,
)


def test_classification_accuracy_uses_strict_threshold():
    labels = np.array([1, 0, 1, 0])
    probabilities = np.array([0.9, 0.2, 0.5, 0.7])
    # 0.5 is not above the threshold so the third example is a miss
    assert classification_accuracy(labels, probabilities) == 50.0


def test_classification_accuracy_rounds_to_one_decimal():
    labels = np.array([1, 1, 0])
    probabilities = np.array([0.9, 0.1, 0.1])
    assert classification_accuracy(labels, probabilities) == 66.7


def test_classification_accuracy_empty_raises():
    with pytest.raises(ValueError):
        classification_accuracy(np.array([]), np.array([]))


def test_rule_agreement_all_correct(handmade_records):
    decisions = {1: "Reorder", 2: "Healthy", 3: "Healthy", 4: "Reorder"}
    assert rule_agreement(handmade_records, decisions) == 100.0


def test_rule_agreement_boundary_reorder_counts_as_wrong(handmade_records):
    # record 2 sits exactly on the reorder point, the rule says Healthy
    decisions = {1: "Reorder", 2: "Reorder", 3: "Healthy", 4: "Reorder"}
    assert rule_agreement(handmade_records, decisions) == 75.0


def test_reorder_rate_rounds_half_up():
    decisions = {i: "Healthy" for i in range(1, 9)}
    decisions[1] = "Reorder"
    # 1 / 8 = 12.5%
    assert reorder_rate(decisions) == 13


def test_reorder_rate_simple_cases():
    assert reorder_rate({1: "Reorder", 2: "Healthy", 3: "Healthy"}) == 33
    assert reorder_rate({1: "Reorder", 2: "Reorder"}) == 100
    assert reorder_rate({}) == 0


def test_summarize_decisions():
    summary = summarize_decisions({1: "Reorder", 2: "Healthy", 3: "Healthy"})
    assert summary == {"Reorder": 1, "Healthy": 2, "total": 3}
