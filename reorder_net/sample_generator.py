#////////////////////////////////////////////////////////////////////////////////#
# File:         sample_generator.py                                              #
# Date:         2025-03-12                                                       #
# Description:  Synthetic inventory catalog and labeled training data.          #
#////////////////////////////////////////////////////////////////////////////////#
"""
Synthetic sample generation for the reorder classifier.

Two kinds of data come out of here:
- a catalog of inventory records to be scored by the trained network
- batches of labeled training examples, labeled by the reorder-point rule

Both draw their features uniformly from the same integer ranges, so a network
trained on one generalizes to the other. Randomness is unseeded unless the
caller passes a numpy Generator.
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from reorder_net import config
from reorder_net.exceptions import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryRecord:
    """One catalog item. Immutable once generated."""
    id: int
    name: str
    current_inventory: int
    avg_sales_per_week: int
    lead_time_days: int

    def features(self) -> Tuple[int, int, int]:
        """Model inputs in training order: (stock, weekly sales, lead time)."""
        return (self.current_inventory, self.avg_sales_per_week, self.lead_time_days)


@dataclass(frozen=True)
class TrainingExample:
    """A single supervised tuple: (stock, weekly_sales, lead_time_days) and its 0/1 label."""
    features: Tuple[int, int, int]
    label: int


class TrainingBatch:
    """
    Column-oriented batch of training examples.

    features has shape (n, 3) in (stock, weekly_sales, lead_time_days) order,
    labels has shape (n,).
    """

    def __init__(self, features: np.ndarray, labels: np.ndarray):
        features = np.asarray(features).reshape(-1, config.NUM_FEATURES)
        labels = np.asarray(labels).reshape(-1)
        if len(features) != len(labels):
            raise ValueError(
                f"features and labels must have the same length, got {len(features)} and {len(labels)}"
            )
        self.features = features
        self.labels = labels

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[TrainingExample]:
        for row, label in zip(self.features, self.labels):
            yield TrainingExample(features=tuple(int(v) for v in row), label=int(label))

    def __repr__(self) -> str:
        return f"TrainingBatch(size={len(self)}, positives={int(self.labels.sum())})"


def reorder_point(weekly_sales, lead_time_days):
    """Units expected to sell during the replenishment lead time."""
    return (np.asarray(weekly_sales) / config.DAYS_PER_WEEK) * np.asarray(lead_time_days)


def reorder_label(stock, weekly_sales, lead_time_days) -> Union[int, np.ndarray]:
    """
    Ground-truth reorder rule: 1 if stock < (weekly_sales / 7) * lead_time_days else 0.

    Strict inequality, so stock exactly at the reorder point is healthy.
    Works on scalars and on numpy arrays.
    """
    labels = (np.asarray(stock) < reorder_point(weekly_sales, lead_time_days)).astype(np.int64)
    if labels.ndim == 0:
        return int(labels)
    return labels


def _validate_count(count, name: str) -> int:
    # bool is an int subclass but never a sensible count
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        logger.error(f"{name} must be an integer, got {type(count).__name__}")
        raise InvalidArgument(f"{name} must be an integer, got {count!r}")
    if count < 0:
        logger.error(f"{name} must be non-negative, got {count}")
        raise InvalidArgument(f"{name} must be non-negative, got {count}")
    return int(count)


def _draw_features(size: int, rng: np.random.Generator) -> np.ndarray:
    """draw (stock, weekly_sales, lead_time) columns uniformly from the configured ranges"""
    columns = []
    for low, high in (config.STOCK_RANGE, config.WEEKLY_SALES_RANGE, config.LEAD_TIME_RANGE):
        # integers() excludes the upper bound
        columns.append(rng.integers(low, high + 1, size=size))
    return np.stack(columns, axis=1).astype(np.int64)


def generate_catalog(count: int, rng: Optional[np.random.Generator] = None) -> List[InventoryRecord]:
    """
    Generate a catalog of inventory records with random stock, demand and lead time.

    Args:
        count: Number of records (non-negative integer)
        rng: Optional numpy Generator, a fresh unseeded one is used otherwise

    Returns:
        List of records with ids 1..count

    Raises:
        InvalidArgument: If count is negative or not an integer
    """
    count = _validate_count(count, "count")
    if rng is None:
        rng = np.random.default_rng()

    features = _draw_features(count, rng)
    records = []
    for index, (stock, sales, lead_time) in enumerate(features, start=1):
        records.append(InventoryRecord(
            id=index,
            name=f"Item-{config.ITEM_NAME_OFFSET + index}",
            current_inventory=int(stock),
            avg_sales_per_week=int(sales),
            lead_time_days=int(lead_time),
        ))

    logger.debug(f"Generated catalog with {len(records)} records")
    return records


def generate_training_batch(size: int, rng: Optional[np.random.Generator] = None) -> TrainingBatch:
    """
    Generate labeled training examples from freshly drawn features.

    Labels are computed by the reorder-point rule from the exact feature values
    that are handed to the network.

    Args:
        size: Number of examples (non-negative integer)
        rng: Optional numpy Generator, a fresh unseeded one is used otherwise

    Returns:
        TrainingBatch with `size` examples

    Raises:
        InvalidArgument: If size is negative or not an integer
    """
    size = _validate_count(size, "size")
    if rng is None:
        rng = np.random.default_rng()

    features = _draw_features(size, rng)
    labels = reorder_label(features[:, 0], features[:, 1], features[:, 2])
    batch = TrainingBatch(features, np.asarray(labels, dtype=np.int64).reshape(-1))

    if size > 0:
        logger.debug(f"Generated training batch: {size} examples, "
                     f"{batch.labels.mean() * 100:.1f}% labeled reorder")
    return batch


def catalog_features(records: Sequence[InventoryRecord]) -> np.ndarray:
    """Stack record features into an (n, 3) array in training feature order."""
    if len(records) == 0:
        return np.empty((0, config.NUM_FEATURES), dtype=np.int64)
    return np.array([record.features() for record in records], dtype=np.int64)


def catalog_to_frame(records: Sequence[InventoryRecord]) -> pd.DataFrame:
    """Tabular view of a catalog, one row per record, indexed by id."""
    columns = ["id", "name"] + config.FEATURE_NAMES
    frame = pd.DataFrame(
        [
            (r.id, r.name, r.current_inventory, r.avg_sales_per_week, r.lead_time_days)
            for r in records
        ],
        columns=columns,
    )
    return frame.set_index("id")
