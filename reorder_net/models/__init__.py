#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Date:         2025-04-02                                                       #
# Description:  Models package initialization for the reorder classifier.      #
#////////////////////////////////////////////////////////////////////////////////#

"""
Models package for inventory reorder classification.

Exports the network and the engine that trains it and scores catalogs.
"""

from .reorder_mlp import (
    ReorderMLP,
    create_reorder_model
)

from .classifier_engine import (
    ClassifierEngine,
    EngineState,
    TrainingReport,
    probability_to_decision
)

__all__ = [
    'ReorderMLP',
    'create_reorder_model',
    'ClassifierEngine',
    'EngineState',
    'TrainingReport',
    'probability_to_decision'
]
