#////////////////////////////////////////////////////////////////////////////////#
# File:         train_reorder_model.py                                           #
# Date:         2025-05-31                                                       #
# Description:  Full-batch training loop for the reorder network with Adam and  #
#               binary cross-entropy.                                            #
#////////////////////////////////////////////////////////////////////////////////#
"""
Training loop for the reorder classifier.

Every epoch is a single full-batch step: forward pass over all examples,
mean binary cross-entropy, backpropagation, one Adam update.
"""

import logging
import time
from typing import Callable, Dict, List, Optional, Tuple, Union

import numpy as np
import torch
import torch.nn as nn
import torch.optim as optim

from reorder_net import config
from reorder_net.exceptions import TrainingCancelled
from reorder_net.utils import CancellationToken, features_to_tensor, labels_to_tensor, format_time

logger = logging.getLogger(__name__)

EpochCallback = Callable[[int, float, float], None]


def train_reorder_model(
    model: nn.Module,
    features: np.ndarray,
    labels: np.ndarray,
    epochs: int = config.DEFAULT_EPOCHS,
    learning_rate: float = config.DEFAULT_LEARNING_RATE,
    betas: Tuple[float, float] = config.ADAM_BETAS,
    eps: float = config.ADAM_EPSILON,
    threshold: float = config.DECISION_THRESHOLD,
    cancel_token: Optional[CancellationToken] = None,
    on_epoch_end: Optional[EpochCallback] = None,
    device: Union[str, torch.device] = "cpu"
) -> Dict[str, List[float]]:
    """
    Train the reorder network on one full batch.

    Args:
        model: Freshly initialized network to train in place
        features: Raw features of shape (n_samples, 3)
        labels: 0/1 labels of shape (n_samples,)
        epochs: Number of full-batch epochs
        learning_rate: Adam step size
        betas: Adam first and second moment decay rates
        eps: Adam numerical stability term
        threshold: Probability above which an output counts as reorder
        cancel_token: Checked after every epoch, training stops when it is set
        on_epoch_end: Called as on_epoch_end(epoch, loss, accuracy_percent) after each epoch
        device: Device to use for training ("cuda" or "cpu")

    Returns:
        Dictionary with per-epoch training history (loss, accuracy). Accuracy is
        the percentage correct on the outputs of that epoch's forward pass.

    Raises:
        TrainingCancelled: If cancel_token is set during training
    """
    model = model.to(device)
    inputs = features_to_tensor(features, device=device)
    targets = labels_to_tensor(labels, device=device)

    # Adam keeps per-parameter moment estimates and a step counter
    optimizer = optim.Adam(model.parameters(), lr=learning_rate, betas=betas, eps=eps)
    criterion = nn.BCELoss()

    history = {"loss": [], "accuracy": []}
    start_time = time.time()

    for epoch in range(epochs):
        model.train()

        # clear gradients
        optimizer.zero_grad()

        # forward pass over the whole batch
        probabilities = model(inputs)
        loss = criterion(probabilities, targets)

        if torch.isnan(loss) or torch.isinf(loss):
            logger.warning(f"NaN/Inf detected in loss at epoch {epoch + 1}")

        # backward pass and one optimizer step
        loss.backward()
        optimizer.step()

        with torch.no_grad():
            correct = ((probabilities > threshold) == (targets == 1)).float().mean().item() * 100

        history["loss"].append(loss.item())
        history["accuracy"].append(correct)

        logger.debug(f"Epoch {epoch + 1}/{epochs}, Loss: {loss.item():.4f}, Acc: {correct:.1f}%")

        if on_epoch_end is not None:
            on_epoch_end(epoch + 1, loss.item(), correct)

        if cancel_token is not None and cancel_token.cancelled:
            logger.warning(f"Training cancelled after epoch {epoch + 1}/{epochs}")
            raise TrainingCancelled(f"Training cancelled after epoch {epoch + 1} of {epochs}")

    elapsed = time.time() - start_time
    if history["loss"]:
        logger.info(f"Trained {epochs} epochs on {len(inputs)} examples in {format_time(elapsed)}, "
                    f"final loss {history['loss'][-1]:.4f}")
    return history


def evaluate_reorder_model(
    model: nn.Module,
    features: np.ndarray,
    device: Union[str, torch.device] = "cpu"
) -> np.ndarray:
    """
    Run a forward pass without gradient tracking.

    Args:
        model: Trained network
        features: Raw features of shape (n_samples, 3)
        device: Device to use ("cuda" or "cpu")

    Returns:
        Reorder probabilities of shape (n_samples,)
    """
    model = model.to(device)
    model.eval()
    inputs = features_to_tensor(features, device=device)
    with torch.no_grad():
        probabilities = model(inputs)
    return probabilities.reshape(-1).cpu().numpy()
