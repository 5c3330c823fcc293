"""Synthetic inventory catalog tests."""

import dataclasses

import numpy as np
import pytest

from reorder_predictor import config
from reorder_predictor.inventory import (
    GAME_ITEMS,
    InventoryRecord,
    Prediction,
    catalog_to_frame,
    generate_catalog,
    summarize_catalog,
)


def _products(n: int) -> list:
    return [{"id": i + 1, "title": f"product {i + 1}"} for i in range(n)]


class TestCatalogShape:
    """Catalog always has 100 records with ids 1..100."""

    def test_twenty_items_give_hundred_records(self):
        catalog = generate_catalog(_products(20), rng=np.random.default_rng(0))
        assert len(catalog) == config.CATALOG_SIZE
        assert [r.id for r in catalog] == list(range(1, 101))

    def test_short_list_is_cycled(self):
        catalog = generate_catalog(_products(7), rng=np.random.default_rng(1))
        assert len(catalog) == 100
        assert sorted(r.id for r in catalog) == list(range(1, 101))

    def test_long_list_has_no_duplicate_ids(self):
        catalog = generate_catalog(_products(35), rng=np.random.default_rng(2))
        ids = [r.id for r in catalog]
        assert len(ids) == 100
        assert len(set(ids)) == 100

    def test_single_item(self):
        catalog = generate_catalog(_products(1), rng=np.random.default_rng(3))
        assert [r.id for r in catalog] == list(range(1, 101))

    def test_empty_list_raises(self):
        with pytest.raises(ValueError):
            generate_catalog([], rng=np.random.default_rng(0))

    def test_default_rng(self):
        catalog = generate_catalog(_products(20))
        assert len(catalog) == 100


class TestCatalogFields:
    """Names follow the id, numeric fields stay in range."""

    def test_name_is_pool_entry_for_id(self):
        for seed in range(5):
            catalog = generate_catalog(_products(20), rng=np.random.default_rng(seed))
            for record in catalog:
                assert record.name == GAME_ITEMS[record.id % len(GAME_ITEMS)]

    def test_batch_repetition_maps_same_name(self):
        catalog = generate_catalog(_products(20), rng=np.random.default_rng(0))
        by_id = {r.id: r for r in catalog}
        assert by_id[1].name == GAME_ITEMS[1]
        assert by_id[21].name == GAME_ITEMS[1]
        assert by_id[20].name == GAME_ITEMS[0]

    def test_fields_in_range_for_many_seeds(self):
        for seed in range(25):
            catalog = generate_catalog(_products(20), rng=np.random.default_rng(seed))
            for r in catalog:
                assert 5 <= r.stock <= 84
                assert 5 <= r.avg_sales <= 64
                assert 1 <= r.lead_time <= 10
                assert isinstance(r.stock, int)

    def test_range_bounds_are_reachable(self):
        # 100 records * 40 seeds is plenty to hit both ends of the 1..10 lead time range
        lead_times = set()
        for seed in range(40):
            lead_times.update(r.lead_time for r in generate_catalog(_products(20), rng=np.random.default_rng(seed)))
        assert min(lead_times) == 1
        assert max(lead_times) == 10

    def test_features_triple(self):
        catalog = generate_catalog(_products(20), rng=np.random.default_rng(0))
        record = catalog[0]
        assert record.features == (record.stock, record.avg_sales, record.lead_time)

    def test_all_pending_without_score(self):
        catalog = generate_catalog(_products(20), rng=np.random.default_rng(0))
        assert all(r.prediction is Prediction.PENDING for r in catalog)
        assert all(r.score is None for r in catalog)

    def test_same_seed_same_catalog(self):
        first = generate_catalog(_products(20), rng=np.random.default_rng(42))
        second = generate_catalog(_products(20), rng=np.random.default_rng(42))
        assert first == second


class TestInventoryRecord:

    def test_with_prediction_rounds_score(self):
        record = InventoryRecord(id=1, name="x", stock=10, avg_sales=20, lead_time=3)
        labelled = record.with_prediction(Prediction.REORDER, 0.87654)
        assert labelled.score == 0.88
        assert labelled.prediction is Prediction.REORDER
        assert record.prediction is Prediction.PENDING  # original untouched

    def test_record_is_immutable(self):
        record = InventoryRecord(id=1, name="x", stock=10, avg_sales=20, lead_time=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.stock = 11

    def test_display_labels(self):
        assert Prediction.PENDING.display_label == "Waiting..."
        assert Prediction.REORDER.display_label == "Restock Needed"
        assert Prediction.SUFFICIENT.display_label == "Sufficient"


class TestCatalogFrame:

    def test_frame_columns_and_order(self):
        catalog = generate_catalog(_products(20), rng=np.random.default_rng(0))
        df = catalog_to_frame(catalog)
        assert list(df.columns) == ["id", "name", "stock", "avg_sales", "lead_time", "prediction", "score"]
        assert len(df) == 100
        assert df["id"].tolist() == list(range(1, 101))

    def test_summary_before_prediction(self):
        catalog = generate_catalog(_products(20), rng=np.random.default_rng(0))
        summary = summarize_catalog(catalog)
        assert summary["total"] == 100
        assert summary["Pending"] == 100
        assert summary["Reorder"] == 0
        assert summary["mean_score"] is None

    def test_summary_after_prediction(self):
        catalog = generate_catalog(_products(20), rng=np.random.default_rng(0))
        labelled = tuple(
            r.with_prediction(Prediction.REORDER if r.id % 2 else Prediction.SUFFICIENT, 0.5)
            for r in catalog
        )
        summary = summarize_catalog(labelled)
        assert summary["Reorder"] == 50
        assert summary["Sufficient"] == 50
        assert summary["Pending"] == 0
        assert summary["mean_score"] == 0.5

    def test_summary_of_empty_catalog(self):
        summary = summarize_catalog(())
        assert summary["total"] == 0
        assert summary["mean_score"] is None
