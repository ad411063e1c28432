#////////////////////////////////////////////////////////////////////////////////#
# File:         utils.py                                                         #
# Date:         2025-03-18                                                       #
#////////////////////////////////////////////////////////////////////////////////#


"""
Utility functions for the reorder classifier project.
"""
import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Union, Any

import numpy as np
import torch

from reorder_net import config

logger = logging.getLogger(__name__)


def save_json(data: Dict, filepath: Union[str, Path]) -> None:
    """Save dict to JSON."""
    with open(filepath, 'w') as f:
        json.dump(data, f, indent=4)


def setup_torch_device() -> torch.device:
    """setup torch device (cpu or cuda)"""
    if torch.cuda.is_available():
        device = torch.device("cuda")
        logger.info(f"Using GPU: {torch.cuda.get_device_name(0)}")
    else:
        device = torch.device("cpu")
        logger.debug("Using CPU")
    return device


def set_random_seed(seed: int = None) -> np.random.Generator:
    """
    Seed torch and numpy, and return a numpy Generator seeded the same way.

    The demo itself runs unseeded; this is for tests and reproducible CLI runs.
    """
    if seed is None:
        seed = config.RANDOM_SEED

    np.random.seed(seed)
    torch.manual_seed(seed)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)
    return np.random.default_rng(seed)


def format_time(seconds: float) -> str:
    """format seconds into readable string"""
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{int(hours)}h {int(minutes)}m {int(seconds)}s"


def features_to_tensor(
    features: np.ndarray,
    device: Optional[torch.device] = None
) -> torch.Tensor:
    """
    Convert a (n_samples, n_features) array of raw feature values to a float tensor.

    No scaling is applied; the network sees the raw stock, sales and lead time values.
    """
    tensor = torch.tensor(np.asarray(features), dtype=torch.float32)
    if tensor.dim() == 1:
        tensor = tensor.reshape(-1, config.NUM_FEATURES)
    if device is not None:
        tensor = tensor.to(device)
    return tensor


def labels_to_tensor(
    labels: np.ndarray,
    device: Optional[torch.device] = None
) -> torch.Tensor:
    """Convert 0/1 labels to a float column tensor of shape (n_samples, 1)."""
    tensor = torch.tensor(np.asarray(labels), dtype=torch.float32).reshape(-1, 1)
    if device is not None:
        tensor = tensor.to(device)
    return tensor


class CancellationToken:
    """
    Cooperative cancellation flag for a training run.

    The training loop checks it after every epoch, so a cancelled run stops
    once the current epoch has finished.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


def to_serializable(value: Any) -> Any:
    """Convert numpy scalars and arrays to plain python types for json export."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, dict):
        return {str(k): to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_serializable(v) for v in value]
    return value
