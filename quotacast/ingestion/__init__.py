"""Request loading and the end-to-end forecast pipeline."""

from quotacast.ingestion.document import EstimationRequest, load_estimation_request
from quotacast.ingestion.pipeline import (
    REPORT_SCHEMA_VERSION,
    run_forecast,
    run_forecast_on_file,
)

__all__ = [
    "EstimationRequest",
    "REPORT_SCHEMA_VERSION",
    "load_estimation_request",
    "run_forecast",
    "run_forecast_on_file",
]
