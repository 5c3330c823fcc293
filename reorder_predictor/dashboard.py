#////////////////////////////////////////////////////////////////////////////////#
# File:         dashboard.py                                                     #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-16                                                       #
# Description:  Terminal dashboard for the inventory reorder predictor.          #
#////////////////////////////////////////////////////////////////////////////////#
"""
Terminal dashboard for the inventory reorder predictor.

Runs one session end to end: fetch products, build the catalog, train the
classifier, label every row and print the inventory table.
"""

import argparse
import functools
import logging
import sys
import time
from typing import Optional, Sequence

import pandas as pd

from reorder_predictor import config
from reorder_predictor.data_source import fetch_products
from reorder_predictor.inventory import InventoryRecord, Prediction, catalog_to_frame, summarize_catalog
from reorder_predictor.models.classifier import train_reorder_model
from reorder_predictor.session import InventorySession, SessionState, TERMINAL_STATES, status_category
from reorder_predictor.utils import format_elapsed, seeded_generator

logger = logging.getLogger(__name__)

TABLE_COLUMNS = {
    "id": "ID",
    "name": "Product Name",
    "stock": "Stock Level",
    "avg_sales": "Avg Sales/Week",
    "lead_time": "Lead Time (Days)",
    "prediction": "Reorder Prediction",
}


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {value}")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero, got {value}")
    return number


def parse_arguments(argv: Optional[Sequence[str]] = None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace object containing all parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Inventory reorder predictor dashboard",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument("--api-url", type=str, default=config.PRODUCTS_API_URL, help="Product list endpoint")
    parser.add_argument("--timeout", type=float, default=config.REQUEST_TIMEOUT,
                        help="Request timeout in seconds (waits forever if unset)")

    # Model options
    parser.add_argument("--epochs", type=_positive_int, default=config.DEFAULT_EPOCHS, help="Training epochs")
    parser.add_argument("--learning-rate", type=_positive_float, default=config.DEFAULT_LEARNING_RATE,
                        help="Learning rate")
    parser.add_argument("--activation", type=str, default=config.DEFAULT_ACTIVATION, choices=["tanh", "relu"],
                        help="Hidden layer activation")

    # Other options
    parser.add_argument("--seed", type=int, default=None, help="Random seed (unseeded if not given)")
    parser.add_argument("--no-predict", action="store_true", help="Stop after training")
    parser.add_argument("--limit-rows", type=_non_negative_int, default=None, help="Only print the first N rows")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    return parser.parse_args(argv)


def format_status_line(state: SessionState, message: str) -> str:
    """status badge as a single line"""
    return f"[{status_category(state)}] System Status: {message}"


def render_catalog_table(catalog: Sequence[InventoryRecord], limit_rows: Optional[int] = None) -> pd.DataFrame:
    """catalog formatted the way the dashboard table shows it"""
    if limit_rows is not None and limit_rows < 0:
        raise ValueError(f"limit_rows must be zero or more, got {limit_rows}")

    df = catalog_to_frame(catalog)
    if limit_rows is not None:
        df = df.head(limit_rows)

    table = pd.DataFrame({
        "id": df["id"].map(lambda v: f"#{v}"),
        "name": df["name"],
        "stock": df["stock"].map(lambda v: f"{v} units"),
        "avg_sales": df["avg_sales"],
        "lead_time": df["lead_time"].map(lambda v: f"{v} days"),
        "prediction": df["prediction"].map(lambda v: Prediction(v).display_label),
    })
    return table.rename(columns=TABLE_COLUMNS)


def _report(session: InventorySession) -> None:
    print(format_status_line(session.get_status(), session.get_status_message()))


def run_dashboard(args) -> int:
    """drive one session, returns the process exit code"""
    rng = seeded_generator(args.seed)
    data_source = functools.partial(fetch_products, url=args.api_url, timeout=args.timeout)
    train_fn = functools.partial(
        train_reorder_model,
        epochs=args.epochs,
        learning_rate=args.learning_rate,
        activation=args.activation
    )

    start_time = time.time()
    with InventorySession(data_source=data_source, rng=rng, train_fn=train_fn) as session:
        session.start()
        _report(session)
        session.wait()
        _report(session)

        if session.request_train():
            _report(session)
            session.wait()
            _report(session)

        if not args.no_predict and session.request_predict():
            _report(session)
            session.wait()
            _report(session)

        final_state = session.get_status()
        catalog = session.get_catalog()
        if final_state in TERMINAL_STATES:
            logger.error(f"session ended in {final_state.name}: {session.get_last_error()}")
            return 1

        print()
        print(render_catalog_table(catalog, args.limit_rows).to_string(index=False))
        print()

        summary = summarize_catalog(catalog)
        print(f"Restock Needed: {summary[Prediction.REORDER.value]}, "
              f"Sufficient: {summary[Prediction.SUFFICIENT.value]}, "
              f"Waiting: {summary[Prediction.PENDING.value]}")

    logger.info(f"dashboard run finished in {format_elapsed(time.time() - start_time)}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    return run_dashboard(args)


if __name__ == "__main__":
    sys.exit(main())
