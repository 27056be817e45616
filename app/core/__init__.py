"""
Core Package - IIICI Certification Scoring Service
app/core/__init__.py

Core infrastructure: dependencies, exceptions, logging.
"""

from app.core.dependencies import (
    get_scoring_engine,
    get_scoring_service,
    get_validation_service,
)
from app.core.exceptions import (
    IndicatorNotFoundException,
    InvalidFormDataException,
    InvalidPillarException,
    PillarNotFoundException,
    ScoringException,
)
from app.core.logging_config import configure_logging

__all__ = [
    # Dependencies
    "get_scoring_engine",
    "get_scoring_service",
    "get_validation_service",
    # Exceptions
    "IndicatorNotFoundException",
    "InvalidFormDataException",
    "InvalidPillarException",
    "PillarNotFoundException",
    "ScoringException",
    # Logging
    "configure_logging",
]
