"""Seeding, device and timing helper tests."""

import numpy as np
import torch

from reorder_predictor.inventory import generate_catalog
from reorder_predictor.models.classifier import create_reorder_model
from reorder_predictor.utils import format_elapsed, seeded_generator, select_device

PRODUCTS = [{"id": i + 1} for i in range(20)]


class TestSeededGenerator:

    def test_returns_numpy_generator(self):
        assert isinstance(seeded_generator(3), np.random.Generator)
        assert isinstance(seeded_generator(), np.random.Generator)

    def test_same_seed_same_catalog(self):
        first = generate_catalog(PRODUCTS, rng=seeded_generator(11))
        second = generate_catalog(PRODUCTS, rng=seeded_generator(11))
        assert first == second

    def test_seed_also_fixes_weight_init(self):
        seeded_generator(5)
        first = create_reorder_model().state_dict()
        seeded_generator(5)
        second = create_reorder_model().state_dict()
        assert all(torch.equal(first[k], second[k]) for k in first)


class TestSelectDevice:

    def test_explicit_device_kept(self):
        assert select_device("cpu") == torch.device("cpu")
        assert select_device(torch.device("cpu")) == torch.device("cpu")

    def test_automatic_choice_follows_cuda_availability(self):
        expected = "cuda" if torch.cuda.is_available() else "cpu"
        assert select_device().type == expected


class TestFormatElapsed:

    def test_under_a_minute(self):
        assert format_elapsed(0.421) == "0.42s"

    def test_minutes_and_seconds(self):
        assert format_elapsed(125.7) == "2m 05s"
