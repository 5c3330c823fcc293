#////////////////////////////////////////////////////////////////////////////////#
# File:         __init__.py                                                      #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-14                                                       #
# Description:  Models package initialization for the reorder classifier.       #
#////////////////////////////////////////////////////////////////////////////////#

"""
Models package for the inventory reorder predictor.

Exports the reorder classifier and its train/predict functions.
"""

from .classifier import (
    ReorderClassifier,
    TrainedClassifier,
    TRAINING_FEATURES,
    TRAINING_LABELS,
    create_reorder_model,
    train_reorder_model,
    predict_reorder_score,
    label_for_score
)

__all__ = [
    'ReorderClassifier',
    'TrainedClassifier',
    'TRAINING_FEATURES',
    'TRAINING_LABELS',
    'create_reorder_model',
    'train_reorder_model',
    'predict_reorder_score',
    'label_for_score'
]
