"""
Tests for synthetic catalog and training batch generation.
"""
import numpy as np
import pandas as pd
import pytest

from reorder_net import config
from reorder_net.exceptions import InvalidArgument
from reorder_net.sample_generator import (
    InventoryRecord,
    TrainingBatch,
    TrainingExample,
    catalog_features,
    catalog_to_frame,
    generate_catalog,
    generate_training_batch,
    reorder_label,
    reorder_point,
)


class TestReorderRule:
    def test_below_reorder_point_needs_reorder(self):
        assert reorder_label(5, 35, 3) == 1

    def test_exactly_at_reorder_point_is_healthy(self):
        assert reorder_point(35, 3) == 15.0
        assert reorder_label(15, 35, 3) == 0
        assert reorder_label(6, 14, 3) == 0

    def test_above_reorder_point_is_healthy(self):
        assert reorder_label(16, 35, 3) == 0

    def test_vectorised_over_arrays(self):
        labels = reorder_label(np.array([5, 15, 90]), np.array([35, 35, 10]), np.array([3, 3, 2]))
        np.testing.assert_array_equal(labels, [1, 0, 0])


class TestGenerateCatalog:
    def test_returns_requested_count(self, rng):
        assert len(generate_catalog(100, rng=rng)) == 100

    def test_ids_sequential_from_one(self, rng):
        catalog = generate_catalog(50, rng=rng)
        assert [record.id for record in catalog] == list(range(1, 51))

    def test_names_follow_item_numbering(self, rng):
        catalog = generate_catalog(3, rng=rng)
        assert [record.name for record in catalog] == ["Item-1001", "Item-1002", "Item-1003"]

    def test_fields_within_ranges(self, rng):
        catalog = generate_catalog(2000, rng=rng)
        stock = [r.current_inventory for r in catalog]
        sales = [r.avg_sales_per_week for r in catalog]
        lead = [r.lead_time_days for r in catalog]
        assert (min(stock), max(stock)) == config.STOCK_RANGE
        assert (min(sales), max(sales)) == config.WEEKLY_SALES_RANGE
        assert (min(lead), max(lead)) == config.LEAD_TIME_RANGE
        assert all(isinstance(v, int) for v in stock + sales + lead)

    def test_zero_count_gives_empty_catalog(self):
        assert generate_catalog(0) == []

    def test_records_are_immutable(self, small_catalog):
        with pytest.raises(AttributeError):
            small_catalog[0].current_inventory = 10

    def test_works_without_rng(self):
        assert len(generate_catalog(5)) == 5

    def test_same_seed_same_catalog(self):
        first = generate_catalog(10, rng=np.random.default_rng(7))
        second = generate_catalog(10, rng=np.random.default_rng(7))
        assert first == second

    @pytest.mark.parametrize("bad_count", [-1, 2.5, "10", None, True])
    def test_invalid_count_raises(self, bad_count):
        with pytest.raises(InvalidArgument):
            generate_catalog(bad_count)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            generate_catalog(-5)


class TestGenerateTrainingBatch:
    def test_returns_requested_size(self, training_batch):
        assert len(training_batch) == 500
        assert training_batch.features.shape == (500, 3)
        assert training_batch.labels.shape == (500,)

    def test_every_label_follows_reorder_rule(self, training_batch):
        for example in training_batch:
            stock, weekly_sales, lead_time = example.features
            expected = 1 if stock < (weekly_sales / 7) * lead_time else 0
            assert example.label == expected

    def test_features_within_ranges(self, rng):
        batch = generate_training_batch(3000, rng=rng)
        for column, (low, high) in enumerate(
            [config.STOCK_RANGE, config.WEEKLY_SALES_RANGE, config.LEAD_TIME_RANGE]
        ):
            assert batch.features[:, column].min() == low
            assert batch.features[:, column].max() == high

    def test_both_classes_present(self, training_batch):
        assert 0 < training_batch.labels.sum() < len(training_batch)

    def test_iteration_yields_examples(self, training_batch):
        example = next(iter(training_batch))
        assert isinstance(example, TrainingExample)
        assert len(example.features) == 3
        assert example.label in (0, 1)

    def test_zero_size_gives_empty_batch(self):
        batch = generate_training_batch(0)
        assert len(batch) == 0
        assert list(batch) == []

    @pytest.mark.parametrize("bad_size", [-10, 1.0, "500"])
    def test_invalid_size_raises(self, bad_size):
        with pytest.raises(InvalidArgument):
            generate_training_batch(bad_size)

    def test_mismatched_batch_rejected(self):
        with pytest.raises(ValueError):
            TrainingBatch(np.zeros((3, 3)), np.zeros(2))


class TestCatalogViews:
    def test_features_in_training_order(self, handmade_records):
        features = catalog_features(handmade_records)
        assert features.shape == (4, 3)
        np.testing.assert_array_equal(features[0], [5, 35, 3])

    def test_empty_catalog_features(self):
        assert catalog_features([]).shape == (0, 3)

    def test_frame_indexed_by_id(self, small_catalog):
        frame = catalog_to_frame(small_catalog)
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.index) == list(range(1, 21))
        assert list(frame.columns) == ["name"] + config.FEATURE_NAMES
        assert frame.loc[1, "current_inventory"] == small_catalog[0].current_inventory
