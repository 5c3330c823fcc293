#////////////////////////////////////////////////////////////////////////////////#
# File:         classifier.py                                                    #
# Author:       Douglas Nyberg                                                   #
# Email:        douglas1.nyberg@gmail.com                                        #
# Date:         2026-10-14                                                       #
#////////////////////////////////////////////////////////////////////////////////#


"""
Feed-forward binary classifier deciding whether an inventory item should be reordered.
"""


import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

import torch
import torch.nn as nn
import torch.optim as optim

from reorder_predictor import config
from reorder_predictor.exceptions import PredictPreconditionError, TrainingError
from reorder_predictor.inventory import Prediction
from reorder_predictor.utils import select_device

logger = logging.getLogger(__name__)


# Example training data (stock, avg_sales, lead_time)
TRAINING_FEATURES = [
    [20.0, 50.0, 3.0],  # don't reorder (0)
    [5.0, 30.0, 5.0],   # reorder (1)
    [15.0, 40.0, 4.0],  # don't reorder (0)
    [8.0, 60.0, 2.0],   # reorder (1)
]
# Labels: 1 = reorder, 0 = don't reorder
TRAINING_LABELS = [[0.0], [1.0], [0.0], [1.0]]

ACTIVATIONS = {
    "tanh": nn.Tanh,
    "relu": nn.ReLU,
}


class ReorderClassifier(nn.Module):
    """
    One hidden layer classifier over the (stock, avg_sales, lead_time) vector.
    """
    def __init__(
        self,
        input_dim: int = 3,
        hidden_dim: int = 8,
        activation: str = "tanh"
    ):
        """
        Initialize the classifier.

        Args:
            input_dim: Number of input features
            hidden_dim: Number of hidden units
            activation: Hidden layer nonlinearity, one of ACTIVATIONS
        """
        super(ReorderClassifier, self).__init__()

        if activation not in ACTIVATIONS:
            raise ValueError(f"Unknown activation '{activation}', expected one of {sorted(ACTIVATIONS)}")

        self.input_dim = input_dim
        self.hidden_dim = hidden_dim
        self.activation_name = activation

        self.network = nn.Sequential(
            nn.Linear(input_dim, hidden_dim),
            ACTIVATIONS[activation](),
            nn.Linear(hidden_dim, 1),
            nn.Sigmoid()  # output is the reorder probability
        )

    def forward(self, features: torch.Tensor) -> torch.Tensor:
        """
        Forward pass.

        Args:
            features: Tensor of shape (batch_size, input_dim)

        Returns:
            Tensor of shape (batch_size, 1) with values in [0, 1]
        """
        return self.network(features)


@dataclass
class TrainedClassifier:
    """handle to a trained classifier, only used for inference"""
    model: ReorderClassifier
    history: Dict[str, List[float]] = field(default_factory=dict)
    training_seconds: float = 0.0

    @property
    def final_accuracy(self) -> Optional[float]:
        accuracy = self.history.get("accuracy")
        return accuracy[-1] if accuracy else None


def create_reorder_model(
    hidden_dim: int = config.DEFAULT_HIDDEN_DIM,
    activation: str = config.DEFAULT_ACTIVATION
) -> ReorderClassifier:
    """factory for the reorder classifier"""
    return ReorderClassifier(input_dim=len(TRAINING_FEATURES[0]), hidden_dim=hidden_dim, activation=activation)


def train_reorder_model(
    epochs: int = config.DEFAULT_EPOCHS,
    batch_size: int = config.DEFAULT_BATCH_SIZE,
    learning_rate: float = config.DEFAULT_LEARNING_RATE,
    hidden_dim: int = config.DEFAULT_HIDDEN_DIM,
    activation: str = config.DEFAULT_ACTIVATION,
    device: Optional[Union[str, torch.device]] = None
) -> TrainedClassifier:
    """
    Fit a fresh classifier on the fixed reorder examples.

    Every epoch is a full pass over the four examples in a new random order,
    minimizing binary cross entropy with Adam. Accuracy is tracked alongside
    the loss but does not drive training.

    Args:
        epochs: Number of full passes over the examples
        batch_size: Examples per optimizer step
        learning_rate: Learning rate for Adam
        hidden_dim: Number of hidden units
        activation: Hidden layer nonlinearity
        device: Device to train on, cuda when available if None

    Returns:
        TrainedClassifier with the model in eval mode and the training history

    Raises:
        ValueError: If epochs or batch_size is not positive
        TrainingError: If the loss becomes NaN/Inf or torch fails during the fit
    """
    if epochs < 1:
        raise ValueError(f"epochs must be positive, got {epochs}")
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    device = select_device(device)

    start_time = time.time()
    model = create_reorder_model(hidden_dim=hidden_dim, activation=activation).to(device)

    training_data = torch.tensor(TRAINING_FEATURES, dtype=torch.float32, device=device)
    output_data = torch.tensor(TRAINING_LABELS, dtype=torch.float32, device=device)

    optimizer = optim.Adam(model.parameters(), lr=learning_rate)
    criterion = nn.BCELoss()

    history = {"loss": [], "accuracy": []}
    n_samples = training_data.shape[0]
    n_batches = (n_samples + batch_size - 1) // batch_size

    try:
        for epoch in range(epochs):
            model.train()
            total_loss = 0.0
            correct = 0

            # new order every epoch
            shuffled_indices = torch.randperm(n_samples, device=device)

            for batch_idx in range(n_batches):
                start_idx = batch_idx * batch_size
                end_idx = min(start_idx + batch_size, n_samples)
                batch_indices = shuffled_indices[start_idx:end_idx]

                features_batch = training_data[batch_indices]
                labels_batch = output_data[batch_indices]

                optimizer.zero_grad()
                y_pred = model(features_batch)
                loss = criterion(y_pred, labels_batch)

                if torch.isnan(loss) or torch.isinf(loss):
                    raise TrainingError(f"NaN/Inf loss at epoch {epoch + 1}")

                loss.backward()
                optimizer.step()

                total_loss += loss.item() * len(batch_indices)
                predicted = (y_pred.detach() > config.REORDER_THRESHOLD).float()
                correct += int((predicted == labels_batch).sum().item())

            history["loss"].append(total_loss / n_samples)
            history["accuracy"].append(correct / n_samples)

            if (epoch + 1) % config.TRAINING_LOG_EVERY == 0 or epoch + 1 == epochs:
                logger.debug(f"Epoch {epoch + 1}/{epochs}, Loss: {history['loss'][-1]:.4f}, "
                             f"Accuracy: {history['accuracy'][-1]:.2f}")
    except RuntimeError as e:
        logger.error(f"reorder model training failed: {e}")
        raise TrainingError(f"Training failed: {e}") from e
    finally:
        # drop gradients and the training tensors, the handle only needs the weights
        optimizer.zero_grad(set_to_none=True)
        del training_data, output_data

    model.eval()
    elapsed = time.time() - start_time
    logger.info(f"trained reorder model in {elapsed:.2f}s, final loss {history['loss'][-1]:.4f}, "
                f"accuracy {history['accuracy'][-1]:.2f}")
    return TrainedClassifier(model=model, history=history, training_seconds=elapsed)


def predict_reorder_score(handle: Optional[TrainedClassifier], features: Sequence[float]) -> float:
    """
    Score a single feature vector.

    Args:
        handle: Trained classifier from train_reorder_model
        features: (stock, avg_sales, lead_time)

    Returns:
        Reorder probability in [0, 1] as a plain float

    Raises:
        PredictPreconditionError: If no classifier has been trained
        ValueError: If the vector does not have one value per input feature
    """
    if handle is None:
        raise PredictPreconditionError("predict called before a classifier was trained")

    model = handle.model
    values = [float(v) for v in features]
    if len(values) != model.input_dim:
        raise ValueError(f"Expected {model.input_dim} features, got {len(values)}")

    device = next(model.parameters()).device
    model.eval()

    # tensors stay local to this block so nothing outlives the call
    with torch.inference_mode():
        input_tensor = torch.tensor([values], dtype=torch.float32, device=device)
        result = model(input_tensor)
        risk_score = result.item()

    return float(risk_score)


def label_for_score(score: float) -> Prediction:
    """map a reorder probability to its label"""
    return Prediction.REORDER if score > config.REORDER_THRESHOLD else Prediction.SUFFICIENT
