#////////////////////////////////////////////////////////////////////////////////#
# File:         classifier_engine.py                                             #
# Date:         2025-04-10                                                       #
# Description:  Stateful wrapper that owns the reorder network, trains it once  #
#               and turns catalog records into reorder decisions.               #
#////////////////////////////////////////////////////////////////////////////////#

"""
Classifier engine for reorder decisions.

An engine moves through UNINITIALIZED -> TRAINING -> READY exactly once.
Inference is only allowed in READY. Retraining needs a new engine.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
import torch

from reorder_net import config
from reorder_net.evaluators.accuracy import classification_accuracy
from reorder_net.exceptions import EmptyBatch, PreconditionViolation, TrainingCancelled
from reorder_net.models.reorder_mlp import ReorderMLP, create_reorder_model
from reorder_net.sample_generator import InventoryRecord, TrainingBatch, catalog_features
from reorder_net.training.train_reorder_model import (
    EpochCallback,
    evaluate_reorder_model,
    train_reorder_model,
)
from reorder_net.utils import CancellationToken, setup_torch_device

logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    UNINITIALIZED = "uninitialized"
    TRAINING = "training"
    READY = "ready"


@dataclass(frozen=True)
class TrainingReport:
    """Summary of one training run."""
    accuracy: float  # percent, one decimal
    final_loss: float
    epochs: int
    num_examples: int
    elapsed_seconds: float
    history: Dict[str, List[float]] = field(default_factory=dict, compare=False, repr=False)

    @property
    def accuracy_display(self) -> str:
        return f"{self.accuracy:.1f}"


def probability_to_decision(probability: float, threshold: float = config.DECISION_THRESHOLD) -> str:
    """Strictly above the threshold is Reorder, anything else (including exactly 0.5) is Healthy."""
    return config.REORDER if probability > threshold else config.HEALTHY


class ClassifierEngine:
    """
    Owns the network parameters, trains them once and runs inference.
    """

    def __init__(
        self,
        hidden_dim: int = config.HIDDEN_DIM,
        epochs: int = config.DEFAULT_EPOCHS,
        learning_rate: float = config.DEFAULT_LEARNING_RATE,
        beta1: float = config.ADAM_BETAS[0],
        beta2: float = config.ADAM_BETAS[1],
        epsilon: float = config.ADAM_EPSILON,
        threshold: float = config.DECISION_THRESHOLD,
        device: Optional[Union[str, torch.device]] = None
    ):
        """
        Args:
            hidden_dim: Number of hidden ReLU units
            epochs: Number of full-batch epochs per training run
            learning_rate: Adam step size
            beta1: Adam first moment decay
            beta2: Adam second moment decay
            epsilon: Adam numerical stability term
            threshold: Probability above which a record is marked Reorder
            device: Torch device, cuda when available otherwise cpu
        """
        self.hidden_dim = hidden_dim
        self.epochs = epochs
        self.learning_rate = learning_rate
        self.betas = (beta1, beta2)
        self.epsilon = epsilon
        self.threshold = threshold
        self.device = device if device is not None else setup_torch_device()

        self._state = EngineState.UNINITIALIZED
        self._model: Optional[ReorderMLP] = None
        self._report: Optional[TrainingReport] = None

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is EngineState.READY

    @property
    def report(self) -> Optional[TrainingReport]:
        """Training report, None until training completes."""
        return self._report

    def train(
        self,
        batch: TrainingBatch,
        cancel_token: Optional[CancellationToken] = None,
        on_epoch_end: Optional[EpochCallback] = None
    ) -> TrainingReport:
        """
        Initialize fresh parameters and train them on the batch.

        Args:
            batch: Labeled training examples
            cancel_token: Optional token, when set training stops after the current
                epoch and the engine returns to UNINITIALIZED
            on_epoch_end: Optional callback(epoch, loss, accuracy_percent)

        Returns:
            TrainingReport with the final accuracy over the batch

        Raises:
            PreconditionViolation: If the engine is not UNINITIALIZED
            EmptyBatch: If the batch has no examples
            TrainingCancelled: If cancel_token is set during training
        """
        if self._state is not EngineState.UNINITIALIZED:
            logger.error(f"train() called in state {self._state.value}")
            raise PreconditionViolation(
                f"train() requires an uninitialized engine, current state is {self._state.value}"
            )
        if len(batch) == 0:
            logger.error("train() called with an empty batch")
            raise EmptyBatch("cannot train on a batch with zero examples")

        self._state = EngineState.TRAINING
        model = create_reorder_model(hidden_dim=self.hidden_dim)
        logger.info(f"Training network: {model.count_parameters()} parameters, "
                    f"{len(batch)} examples, {self.epochs} epochs")

        start_time = time.time()
        try:
            history = train_reorder_model(
                model,
                batch.features,
                batch.labels,
                epochs=self.epochs,
                learning_rate=self.learning_rate,
                betas=self.betas,
                eps=self.epsilon,
                threshold=self.threshold,
                cancel_token=cancel_token,
                on_epoch_end=on_epoch_end,
                device=self.device,
            )

            # accuracy of the trained parameters over the same batch
            probabilities = evaluate_reorder_model(model, batch.features, device=self.device)
            accuracy = classification_accuracy(batch.labels, probabilities, threshold=self.threshold)
            report = TrainingReport(
                accuracy=accuracy,
                final_loss=history["loss"][-1] if history["loss"] else float("nan"),
                epochs=self.epochs,
                num_examples=len(batch),
                elapsed_seconds=time.time() - start_time,
                history=history,
            )
        except TrainingCancelled:
            self._state = EngineState.UNINITIALIZED
            raise
        except Exception:
            self._state = EngineState.UNINITIALIZED
            logger.exception("Training failed")
            raise

        self._model = model
        self._report = report
        self._state = EngineState.READY
        logger.info(f"Model trained. Final accuracy: {self._report.accuracy_display}%")
        return self._report

    def _require_ready(self, operation: str) -> None:
        if self._state is not EngineState.READY:
            logger.error(f"{operation}() called in state {self._state.value}")
            raise PreconditionViolation(
                f"{operation}() requires a trained engine, current state is {self._state.value}"
            )

    def predict_proba(self, records: Sequence[InventoryRecord]) -> np.ndarray:
        """
        Reorder probabilities for each record, in input order.

        Raises:
            PreconditionViolation: If the engine has not finished training
        """
        self._require_ready("predict_proba")
        if len(records) == 0:
            return np.empty(0, dtype=np.float32)
        return evaluate_reorder_model(self._model, catalog_features(records), device=self.device)

    def predict(self, records: Sequence[InventoryRecord]) -> Dict[int, str]:
        """
        Decide Reorder / Healthy for every record.

        Args:
            records: Catalog records to score

        Returns:
            Mapping of record id to decision, for all records at once

        Raises:
            PreconditionViolation: If the engine has not finished training
        """
        self._require_ready("predict")
        probabilities = self.predict_proba(records)
        return {
            record.id: probability_to_decision(float(probability), self.threshold)
            for record, probability in zip(records, probabilities)
        }

    def __repr__(self) -> str:
        return (f"ClassifierEngine(state={self._state.value}, hidden_dim={self.hidden_dim}, "
                f"epochs={self.epochs}, learning_rate={self.learning_rate})")
