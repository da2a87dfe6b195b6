"""Training module: multiclass classifier fitting and the Model it produces."""

from flightcodes.training.model import Model
from flightcodes.training.trainer import Trainer, train_model

__all__ = ["Model", "Trainer", "train_model"]
