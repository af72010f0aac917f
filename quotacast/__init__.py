"""Quotacast: quota and cost forecasting for naive, optimized and zero-based workflow strategies."""

from quotacast.errors import InvalidInputError, QuotacastError
from quotacast.forecaster import QuotaForecaster

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "QuotaForecaster",
    "QuotacastError",
    "__version__",
]
