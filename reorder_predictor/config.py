#////////////////////////////////////////////////////////////////////////////////#
# File:         config.py                                                        #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-12                                                       #
# Description:  Configuration settings for the inventory reorder predictor.      #
#////////////////////////////////////////////////////////////////////////////////#




"""
Configuration settings for the inventory reorder predictor.
"""
import os

# External product source (only the number of products matters)
PRODUCTS_API_URL = os.getenv("REORDER_PRODUCTS_API_URL", "https://fakestoreapi.com/products")
# None means wait forever, same as the browser fetch
_timeout = os.getenv("REORDER_REQUEST_TIMEOUT")
REQUEST_TIMEOUT = float(_timeout) if _timeout else None

# Catalog settings
CATALOG_SIZE = 100
NUM_BATCHES = 5
BATCH_SIZE = 20  # slots per batch, CATALOG_SIZE // NUM_BATCHES

# Synthetic field ranges (inclusive)
STOCK_RANGE = (5, 84)
AVG_SALES_RANGE = (5, 64)
LEAD_TIME_RANGE = (1, 10)

# Training settings
DEFAULT_EPOCHS = 200
DEFAULT_BATCH_SIZE = 32  # bigger than the training set, so one step per epoch
DEFAULT_LEARNING_RATE = 0.001
DEFAULT_HIDDEN_DIM = 8
DEFAULT_ACTIVATION = "tanh"  # "tanh" or "relu"
TRAINING_LOG_EVERY = 50  # epochs between debug log lines

# Prediction settings
REORDER_THRESHOLD = 0.5
SCORE_DECIMALS = 2
