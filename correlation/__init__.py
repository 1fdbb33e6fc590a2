"""Bounded-memory linear regression and correlation."""

from .store import SampleStore
from .engine import Correlation, CorrelationResult
from .config import CorrelationConfig

__version__ = "0.2.0"

__all__ = ["SampleStore", "Correlation", "CorrelationResult", "CorrelationConfig"]
