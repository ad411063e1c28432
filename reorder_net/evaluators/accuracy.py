#////////////////////////////////////////////////////////////////////////////////#
# File:         accuracy.py                                                      #
# Date:         2025-03-25                                                       #
#////////////////////////////////////////////////////////////////////////////////#

"""
Accuracy metrics for reorder classification. Training accuracy, agreement with
the reorder-point rule and reorder rate.
"""


import math
from typing import Dict, Mapping, Sequence

import numpy as np
from sklearn.metrics import accuracy_score

from reorder_net import config
from reorder_net.sample_generator import InventoryRecord, catalog_features, reorder_label


def classification_accuracy(
    labels: np.ndarray,
    probabilities: np.ndarray,
    threshold: float = config.DECISION_THRESHOLD
) -> float:
    """
    Percentage of outputs on the right side of the threshold, rounded to one decimal.

    An output counts as correct when (probability > threshold) == (label == 1).
    """
    labels = np.asarray(labels).reshape(-1)
    probabilities = np.asarray(probabilities).reshape(-1)
    if len(labels) == 0:
        raise ValueError("cannot compute accuracy of an empty batch")
    predicted = probabilities > threshold
    actual = labels == 1
    return round(float(accuracy_score(actual, predicted)) * 100, 1)


def rule_agreement(records: Sequence[InventoryRecord], decisions: Mapping[int, str]) -> float:
    """
    Percentage of records whose decision matches the reorder-point rule.

    Args:
        records: Catalog records that were scored
        decisions: Mapping of record id to "Reorder" / "Healthy"

    Returns:
        Agreement percentage rounded to one decimal
    """
    if len(records) == 0:
        raise ValueError("cannot compute rule agreement for an empty catalog")

    features = catalog_features(records)
    expected = reorder_label(features[:, 0], features[:, 1], features[:, 2]) == 1
    predicted = np.array([decisions[record.id] == config.REORDER for record in records])
    return round(float(accuracy_score(expected, predicted)) * 100, 1)


def reorder_rate(decisions: Mapping[int, str]) -> int:
    """percent of decisions that are Reorder, rounded half up to an integer"""
    if not decisions:
        return 0
    reorders = sum(1 for decision in decisions.values() if decision == config.REORDER)
    return int(math.floor(reorders / len(decisions) * 100 + 0.5))


def summarize_decisions(decisions: Mapping[int, str]) -> Dict[str, int]:
    """count decisions per label"""
    summary = {config.REORDER: 0, config.HEALTHY: 0}
    for decision in decisions.values():
        summary[decision] = summary.get(decision, 0) + 1
    summary["total"] = len(decisions)
    return summary
