"""
Shared fixtures for the reorder classifier tests.
Run with: python -m pytest tests -v
"""
import numpy as np
import pytest

from reorder_net.models.classifier_engine import ClassifierEngine
from reorder_net.sample_generator import InventoryRecord, generate_catalog, generate_training_batch
from reorder_net.utils import set_random_seed


@pytest.fixture
def rng():
    """Seeded generator so sampled data is stable within a test."""
    return set_random_seed(1234)


@pytest.fixture
def small_catalog(rng):
    return generate_catalog(20, rng=rng)


@pytest.fixture
def training_batch(rng):
    return generate_training_batch(500, rng=rng)


@pytest.fixture
def trained_engine(training_batch):
    """Engine trained with the default settings (30 epochs, lr 0.001)."""
    engine = ClassifierEngine()
    engine.train(training_batch)
    return engine


@pytest.fixture
def handmade_records():
    """Records with known reorder-point labels."""
    return [
        # 5 < (35 / 7) * 3 = 15 -> reorder
        InventoryRecord(id=1, name="Item-1001", current_inventory=5, avg_sales_per_week=35, lead_time_days=3),
        # exactly at the reorder point -> healthy
        InventoryRecord(id=2, name="Item-1002", current_inventory=15, avg_sales_per_week=35, lead_time_days=3),
        # 90 >= (10 / 7) * 2 -> healthy
        InventoryRecord(id=3, name="Item-1003", current_inventory=90, avg_sales_per_week=10, lead_time_days=2),
        # 0 < (54 / 7) * 7 = 54 -> reorder
        InventoryRecord(id=4, name="Item-1004", current_inventory=0, avg_sales_per_week=54, lead_time_days=7),
    ]
