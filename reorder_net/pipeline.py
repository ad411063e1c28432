#////////////////////////////////////////////////////////////////////////////////#
# File:         pipeline.py                                                      #
# Date:         2025-06-02                                                       #
# Description:  Startup sequence: catalog, training batch, training, inference. #
#////////////////////////////////////////////////////////////////////////////////#
"""
Entry point for consumers of the reorder classifier.

initialize() generates a catalog, trains a fresh engine on a freshly generated
training batch, scores the catalog and returns everything together.
"""

import logging
import time
from typing import Dict, List, NamedTuple, Optional

import numpy as np

from reorder_net import config
from reorder_net.models.classifier_engine import ClassifierEngine, TrainingReport
from reorder_net.sample_generator import InventoryRecord, generate_catalog, generate_training_batch
from reorder_net.utils import CancellationToken

logger = logging.getLogger(__name__)


class InitializationResult(NamedTuple):
    catalog: List[InventoryRecord]
    report: TrainingReport
    decisions: Dict[int, str]


def initialize(
    catalog_size: int = config.CATALOG_SIZE,
    training_size: int = config.TRAINING_BATCH_SIZE,
    learning_rate: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
    cancel_token: Optional[CancellationToken] = None
) -> InitializationResult:
    """
    Generate a catalog, train a classifier and score the catalog.

    Args:
        catalog_size: Number of catalog records to generate and score
        training_size: Number of labeled training examples
        learning_rate: Adam step size, config.DEFAULT_LEARNING_RATE if None
        rng: Optional numpy Generator shared by catalog and batch generation
        cancel_token: Optional token to abort training after the current epoch

    Returns:
        InitializationResult(catalog, report, decisions)

    Raises:
        InvalidArgument: If a size is negative or not an integer
        EmptyBatch: If training_size is zero
        TrainingCancelled: If cancel_token is set during training
    """
    logger.info("Initializing...")
    if rng is None:
        rng = np.random.default_rng()

    catalog = generate_catalog(catalog_size, rng=rng)
    logger.info(f"Fetched {len(catalog)} products from mock database.")

    logger.info("Training Network...")
    batch = generate_training_batch(training_size, rng=rng)
    engine = ClassifierEngine(
        learning_rate=learning_rate if learning_rate is not None else config.DEFAULT_LEARNING_RATE
    )
    report = engine.train(batch, cancel_token=cancel_token)
    logger.info(f"Model Trained. Final Accuracy: {report.accuracy_display}%")

    start_time = time.time()
    decisions = engine.predict(catalog)
    elapsed_ms = (time.time() - start_time) * 1000
    logger.info(f"Processed {len(catalog)} items in {elapsed_ms:.0f}ms")

    logger.info("Ready")
    return InitializationResult(catalog=catalog, report=report, decisions=decisions)
