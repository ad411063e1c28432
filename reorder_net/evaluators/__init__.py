#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Date:         2025-05-02                                                       #
# Description:  Evaluators package initialization for classification metrics.  #
#////////////////////////////////////////////////////////////////////////////////#

from .accuracy import (
    classification_accuracy,
    rule_agreement,
    reorder_rate,
    summarize_decisions
)

__all__ = [
    'classification_accuracy',
    'rule_agreement',
    'reorder_rate',
    'summarize_decisions'
]
