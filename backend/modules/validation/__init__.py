"""
modules/validation package: request guards before the planner runs and
advisory checks on its output.
"""
from modules.validation.request_validator import (
    ValidationResult,
    validate_trip_request,
    validate_trip_response,
)

__all__ = [
    "ValidationResult",
    "validate_trip_request",
    "validate_trip_response",
]
