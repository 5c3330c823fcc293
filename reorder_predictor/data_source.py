#////////////////////////////////////////////////////////////////////////////////#
# File:         data_source.py                                                   #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-13                                                       #
# Description:  Fetches the base product list the catalog is built from.         #
#////////////////////////////////////////////////////////////////////////////////#
"""
Loading of the base product list from the external store API.

Only the number of products is used downstream, the product fields are thrown
away by the catalog generator.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from reorder_predictor import config
from reorder_predictor.exceptions import DataSourceError

logger = logging.getLogger(__name__)


def fetch_products(
    url: Optional[str] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None
) -> List[Dict[str, Any]]:
    """
    Fetch the product list from the store API.

    Args:
        url: Endpoint returning a JSON array of products (defaults to config.PRODUCTS_API_URL)
        timeout: Request timeout in seconds, None waits indefinitely
        session: Optional requests session to reuse connections

    Returns:
        List of product dicts, never empty

    Raises:
        DataSourceError: On transport errors, HTTP errors, bad JSON or an empty/non-list payload
    """
    if url is None:
        url = config.PRODUCTS_API_URL
    if timeout is None:
        timeout = config.REQUEST_TIMEOUT

    http = session if session is not None else requests
    logger.info(f"fetching product data from {url}")

    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        logger.error(f"product request to {url} failed: {e}")
        raise DataSourceError(f"Could not fetch products from {url}: {e}") from e
    except ValueError as e:
        # json decode errors subclass ValueError
        logger.error(f"product response from {url} is not valid JSON: {e}")
        raise DataSourceError(f"Invalid JSON from {url}: {e}") from e

    if not isinstance(payload, list):
        logger.error(f"product response from {url} is a {type(payload).__name__}, not a list")
        raise DataSourceError(f"Expected a JSON array from {url}, got {type(payload).__name__}")
    if not payload:
        logger.error(f"product list from {url} is empty")
        raise DataSourceError(f"Product list from {url} is empty")

    logger.info(f"received {len(payload)} products")
    return payload
