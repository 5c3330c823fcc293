#////////////////////////////////////////////////////////////////////////////////#
# File:         inventory.py                                                     #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-13                                                       #
# Description:  Synthetic inventory catalog generation for the reorder           #
#               dashboard.                                                       #
#////////////////////////////////////////////////////////////////////////////////#

"""
Generate the synthetic inventory catalog shown on the dashboard.

The external product list only decides how many base items back each batch.
Names come from a fixed pool of game store products and the numeric fields
(stock, average weekly sales, lead time) are drawn uniformly at random.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from reorder_predictor import config

logger = logging.getLogger(__name__)


# game store item names, indexed by id % len(GAME_ITEMS)
GAME_ITEMS = (
    "PlayStation 5 Console", "Xbox Series X", "Nintendo Switch OLED",
    "RTX 4090 Graphics Card", "Logitech G Pro Mouse", "Razer BlackWidow Keyboard",
    "HyperX Cloud II Headset", "Samsung Odyssey Monitor", "Steam Deck 512GB",
    "Elden Ring (PS5)", "Cyberpunk 2077 (PC)", "DualSense Controller",
    "Xbox Elite Controller", "Secretlab Titan Chair", "Elgato Stream Deck",
    "Blue Yeti Microphone", "Oculus Quest 2", "NVMe SSD 2TB",
    "DDR5 RAM 32GB", "Gaming Laptop MSI Raider",
)


class Prediction(Enum):
    """reorder label of a catalog row"""
    PENDING = "Pending"
    REORDER = "Reorder"
    SUFFICIENT = "Sufficient"

    @property
    def display_label(self) -> str:
        """text shown in the dashboard table"""
        return _DISPLAY_LABELS[self]


_DISPLAY_LABELS = {
    Prediction.PENDING: "Waiting...",
    Prediction.REORDER: "Restock Needed",
    Prediction.SUFFICIENT: "Sufficient",
}


@dataclass(frozen=True)
class InventoryRecord:
    """single catalog row"""
    id: int
    name: str
    stock: int
    avg_sales: int
    lead_time: int
    prediction: Prediction = Prediction.PENDING
    score: Optional[float] = None  # only set after a prediction

    @property
    def features(self) -> Tuple[int, int, int]:
        """classifier input vector (stock, avg_sales, lead_time)"""
        return (self.stock, self.avg_sales, self.lead_time)

    def with_prediction(self, prediction: Prediction, score: float) -> "InventoryRecord":
        """copy of this record carrying a prediction and its rounded score"""
        return replace(self, prediction=prediction, score=round(float(score), config.SCORE_DECIMALS))


def _draw(rng: np.random.Generator, bounds: Tuple[int, int]) -> int:
    """uniform integer draw, both bounds inclusive"""
    low, high = bounds
    return int(rng.integers(low, high + 1))


def generate_catalog(
    base_items: Sequence[Any],
    rng: Optional[np.random.Generator] = None,
    name_pool: Sequence[str] = GAME_ITEMS
) -> Tuple[InventoryRecord, ...]:
    """
    Build the inventory catalog from the base product list.

    The catalog is NUM_BATCHES batches of BATCH_SIZE slots. Slot i of batch b gets
    id 20*b + i + 1 and is backed by base item i % len(base_items), so a list of
    exactly 20 items is repeated five times, a shorter list is cycled within each
    batch and a longer one only contributes its first 20 items. Either way ids are
    1..100 with no gaps or duplicates.

    Args:
        base_items: Products from the external source (content is ignored)
        rng: Numpy generator for the random fields, unseeded if None
        name_pool: Names indexed by id % len(name_pool)

    Returns:
        Tuple of CATALOG_SIZE records, all Pending

    Raises:
        ValueError: If base_items or name_pool is empty
    """
    if len(base_items) == 0:
        raise ValueError("Cannot build a catalog from an empty product list")
    if len(name_pool) == 0:
        raise ValueError("Name pool must not be empty")
    if rng is None:
        rng = np.random.default_rng()

    n_base = len(base_items)
    if n_base != config.BATCH_SIZE:
        logger.info(f"product list has {n_base} items, cycling to fill batches of {config.BATCH_SIZE}")

    full_list = []
    for batch_idx in range(config.NUM_BATCHES):
        # slot i is backed by base_items[i % n_base], only the position matters
        for slot in range(config.BATCH_SIZE):
            record_id = batch_idx * config.BATCH_SIZE + slot + 1
            full_list.append(InventoryRecord(
                id=record_id,
                name=name_pool[record_id % len(name_pool)],
                stock=_draw(rng, config.STOCK_RANGE),
                avg_sales=_draw(rng, config.AVG_SALES_RANGE),
                lead_time=_draw(rng, config.LEAD_TIME_RANGE),
            ))

    catalog = tuple(full_list[:config.CATALOG_SIZE])
    logger.debug(f"generated catalog with {len(catalog)} records")
    return catalog


def catalog_to_frame(catalog: Sequence[InventoryRecord]) -> pd.DataFrame:
    """catalog as a dataframe, one row per record, in catalog order"""
    columns = ["id", "name", "stock", "avg_sales", "lead_time", "prediction", "score"]
    rows = [
        {
            "id": record.id,
            "name": record.name,
            "stock": record.stock,
            "avg_sales": record.avg_sales,
            "lead_time": record.lead_time,
            "prediction": record.prediction.value,
            "score": record.score,
        }
        for record in catalog
    ]
    return pd.DataFrame(rows, columns=columns)


def summarize_catalog(catalog: Sequence[InventoryRecord]) -> Dict[str, Any]:
    """
    Count rows per prediction label and average the scores of predicted rows.

    Returns:
        Dict with 'total', one count per Prediction value and 'mean_score'
        (None when nothing has been scored yet)
    """
    df = catalog_to_frame(catalog)
    counts = df["prediction"].value_counts()
    summary = {"total": len(df)}
    for label in Prediction:
        summary[label.value] = int(counts.get(label.value, 0))

    scores = df["score"].dropna()
    summary["mean_score"] = round(float(scores.mean()), config.SCORE_DECIMALS) if len(scores) else None
    return summary
