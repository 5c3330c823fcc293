#////////////////////////////////////////////////////////////////////////////////#
# File:         utils.py                                                         #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-13                                                       #
#////////////////////////////////////////////////////////////////////////////////#
"""
Utility functions for the inventory reorder predictor.
"""
import logging
from typing import Optional, Union

import numpy as np
import torch

logger = logging.getLogger(__name__)


def select_device(device: Optional[Union[str, torch.device]] = None) -> torch.device:
    """
    Resolve the device the reorder classifier trains on.

    Args:
        device: Explicit device ("cpu", "cuda", ...), picked automatically if None

    Returns:
        torch.device, cuda when available and nothing was requested
    """
    if device is not None:
        return torch.device(device)

    resolved = torch.device("cuda" if torch.cuda.is_available() else "cpu")
    logger.debug(f"reorder classifier will train on {resolved}")
    return resolved


def seeded_generator(seed: Optional[int] = None) -> np.random.Generator:
    """
    Generator for the synthetic catalog fields.

    With a seed, torch is seeded as well so weight init and the per-epoch
    shuffle repeat across runs. Without one both stay unseeded.
    """
    if seed is not None:
        torch.manual_seed(seed)
        logger.debug(f"seeded numpy generator and torch with {seed}")
    return np.random.default_rng(seed)


def format_elapsed(seconds: float) -> str:
    """short run time, e.g. '0.42s' or '2m 05s'"""
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, seconds = divmod(int(seconds), 60)
    return f"{minutes}m {seconds:02d}s"
