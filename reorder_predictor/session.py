#////////////////////////////////////////////////////////////////////////////////#
# File:         session.py                                                       #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-15                                                       #
# Description:  Session state machine driving load, train and predict for the    #
#               reorder dashboard.                                               #
#////////////////////////////////////////////////////////////////////////////////#
"""
Session state machine for the reorder dashboard.

The session is one explicit state plus the two things it owns, the catalog and
the trained classifier. Transitions are a pure function of (state, event) and
allowed_actions() is the only place that decides which commands are enabled.

Long operations (fetch, train, predict over the whole catalog) run one at a time
on a single background worker. Commands are fire-and-forget, callers observe the
outcome through get_status() and get_catalog().
"""
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Any, Callable, FrozenSet, List, Optional, Sequence, Tuple

import numpy as np

from reorder_predictor import config
from reorder_predictor.data_source import fetch_products
from reorder_predictor.exceptions import DataSourceError, InvalidTransitionError, TrainingError
from reorder_predictor.inventory import InventoryRecord, Prediction, generate_catalog
from reorder_predictor.models.classifier import (
    TrainedClassifier,
    label_for_score,
    predict_reorder_score,
    train_reorder_model
)

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
    TRAINING = "training"
    TRAINED = "trained"
    TRAIN_FAILED = "train_failed"
    PREDICTING = "predicting"
    PREDICTED = "predicted"


class SessionEvent(Enum):
    START = "start"
    LOAD_SUCCEEDED = "load_succeeded"
    LOAD_FAILED = "load_failed"
    TRAIN_REQUESTED = "train_requested"
    TRAIN_SUCCEEDED = "train_succeeded"
    TRAIN_FAILED = "train_failed"
    PREDICT_REQUESTED = "predict_requested"
    PREDICT_COMPLETED = "predict_completed"


class Action(Enum):
    """user commands the dashboard can enable"""
    TRAIN = "train"
    PREDICT = "predict"


_TRANSITIONS = {
    (SessionState.IDLE, SessionEvent.START): SessionState.LOADING,
    (SessionState.LOADING, SessionEvent.LOAD_SUCCEEDED): SessionState.LOADED,
    (SessionState.LOADING, SessionEvent.LOAD_FAILED): SessionState.LOAD_FAILED,
    (SessionState.LOADED, SessionEvent.TRAIN_REQUESTED): SessionState.TRAINING,
    (SessionState.TRAINING, SessionEvent.TRAIN_SUCCEEDED): SessionState.TRAINED,
    (SessionState.TRAINING, SessionEvent.TRAIN_FAILED): SessionState.TRAIN_FAILED,
    (SessionState.TRAINED, SessionEvent.PREDICT_REQUESTED): SessionState.PREDICTING,
    (SessionState.PREDICTED, SessionEvent.PREDICT_REQUESTED): SessionState.PREDICTING,
    (SessionState.PREDICTING, SessionEvent.PREDICT_COMPLETED): SessionState.PREDICTED,
}

# retraining stays disabled once a classifier exists
_ALLOWED_ACTIONS = {
    SessionState.LOADED: frozenset({Action.TRAIN}),
    SessionState.TRAINED: frozenset({Action.PREDICT}),
    SessionState.PREDICTED: frozenset({Action.PREDICT}),
}

_STATUS_MESSAGES = {
    SessionState.IDLE: "Waiting for user action...",
    SessionState.LOADING: "Fetching product data from API...",
    SessionState.LOADED: "Data loaded. Ready to train model.",
    SessionState.LOAD_FAILED: "Error loading API data.",
    SessionState.TRAINING: "Training Model... Please wait.",
    SessionState.TRAINED: "Model Trained! Ready to predict.",
    SessionState.TRAIN_FAILED: "Error training model.",
    SessionState.PREDICTING: f"Analyzing {config.CATALOG_SIZE} products...",
    SessionState.PREDICTED: "Analysis Complete. Check Dashboard below.",
}

_PROCESSING_STATES = {SessionState.LOADING, SessionState.TRAINING, SessionState.PREDICTING}
_SUCCESS_STATES = {SessionState.LOADED, SessionState.TRAINED, SessionState.PREDICTED}
TERMINAL_STATES = frozenset({SessionState.LOAD_FAILED, SessionState.TRAIN_FAILED})


def transition(state: SessionState, event: SessionEvent) -> SessionState:
    """
    Next state for an event.

    Raises:
        InvalidTransitionError: If the event is not accepted in this state
    """
    try:
        return _TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransitionError(state, event) from None


def allowed_actions(state: SessionState) -> FrozenSet[Action]:
    """commands enabled in this state"""
    return _ALLOWED_ACTIONS.get(state, frozenset())


def status_message(state: SessionState) -> str:
    return _STATUS_MESSAGES[state]


def status_category(state: SessionState) -> str:
    """badge category: processing, success, error or idle"""
    if state in _PROCESSING_STATES:
        return "processing"
    if state in _SUCCESS_STATES:
        return "success"
    if state in TERMINAL_STATES:
        return "error"
    return "idle"


class InventorySession:
    """
    Owns the catalog and classifier for one dashboard session.

    Args:
        data_source: Callable returning the base product list, fetch_products by default
        rng: Numpy generator for the synthetic catalog fields, unseeded if None
        train_fn: Callable returning a TrainedClassifier, train_reorder_model by default
    """

    def __init__(
        self,
        data_source: Optional[Callable[[], Sequence[Any]]] = None,
        rng: Optional[np.random.Generator] = None,
        train_fn: Optional[Callable[[], TrainedClassifier]] = None
    ):
        self._data_source = data_source if data_source is not None else fetch_products
        self._rng = rng
        self._train_fn = train_fn if train_fn is not None else train_reorder_model

        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="reorder-session")
        self._lock = threading.Lock()
        self._pending: Optional[Future] = None

        self._state = SessionState.IDLE
        self._catalog: Tuple[InventoryRecord, ...] = ()
        self._classifier: Optional[TrainedClassifier] = None
        self._last_error: Optional[Exception] = None

    def __enter__(self) -> "InventorySession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- read side ---

    def get_catalog(self) -> Tuple[InventoryRecord, ...]:
        return self._catalog

    def get_status(self) -> SessionState:
        return self._state

    def get_status_message(self) -> str:
        return status_message(self._state)

    def get_allowed_actions(self) -> FrozenSet[Action]:
        return allowed_actions(self._state)

    def get_classifier(self) -> Optional[TrainedClassifier]:
        return self._classifier

    def get_last_error(self) -> Optional[Exception]:
        return self._last_error

    # --- commands ---

    def start(self) -> bool:
        """begin loading the product list, only once per session"""
        with self._lock:
            if self._state is not SessionState.IDLE:
                logger.warning(f"start ignored, session already in state {self._state.name}")
                return False
            self._state = transition(self._state, SessionEvent.START)
        self._submit(self._run_load)
        return True

    def request_train(self) -> bool:
        """train the classifier in the background; returns False if the command is disabled"""
        if not self._begin(Action.TRAIN, SessionEvent.TRAIN_REQUESTED):
            return False
        self._submit(self._run_train)
        return True

    def request_predict(self) -> bool:
        """label every catalog record in the background; returns False if the command is disabled"""
        if not self._begin(Action.PREDICT, SessionEvent.PREDICT_REQUESTED):
            return False
        self._submit(self._run_predict)
        return True

    def wait(self, timeout: Optional[float] = None) -> SessionState:
        """
        Block until the in-flight operation finishes.

        Errors that are not part of the session's failure states (bugs in an
        injected data source or trainer) are re-raised here.
        """
        pending = self._pending
        if pending is not None:
            pending.result(timeout=timeout)
        return self._state

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    # --- internals ---

    def _begin(self, action: Action, event: SessionEvent) -> bool:
        with self._lock:
            if action not in allowed_actions(self._state):
                logger.warning(f"{action.name} request ignored in state {self._state.name}")
                return False
            self._state = transition(self._state, event)
            return True

    def _finish(self, event: SessionEvent) -> None:
        with self._lock:
            self._state = transition(self._state, event)
        logger.info(f"session {event.value} -> {self._state.name}")

    def _submit(self, task: Callable[[], None]) -> None:
        self._pending = self._executor.submit(task)

    def _run_load(self) -> None:
        try:
            products = self._data_source()
            catalog = generate_catalog(products, rng=self._rng)
        except (DataSourceError, ValueError) as e:
            logger.error(f"could not load inventory data: {e}")
            self._last_error = e
            self._finish(SessionEvent.LOAD_FAILED)
            return

        self._catalog = catalog
        self._finish(SessionEvent.LOAD_SUCCEEDED)

    def _run_train(self) -> None:
        try:
            handle = self._train_fn()
        except (TrainingError, ValueError) as e:
            # ValueError covers rejected hyperparameters (epochs, batch size, learning rate)
            logger.error(f"could not train reorder model: {e}")
            self._last_error = e
            self._finish(SessionEvent.TRAIN_FAILED)
            return

        self._classifier = handle
        self._finish(SessionEvent.TRAIN_SUCCEEDED)

    def _run_predict(self) -> None:
        updated: List[InventoryRecord] = []
        for record in self._catalog:
            risk_score = predict_reorder_score(self._classifier, record.features)
            updated.append(record.with_prediction(label_for_score(risk_score), risk_score))

        # swap in the whole catalog at once
        self._catalog = tuple(updated)
        n_reorder = sum(1 for r in updated if r.prediction is Prediction.REORDER)
        logger.info(f"scored {len(updated)} products, {n_reorder} flagged for reorder")
        self._finish(SessionEvent.PREDICT_COMPLETED)
