"""Domain layer: errors and constants."""

from .errors import ErrorCodes, FormValidationError, HtmxContextError

__all__ = [
    "ErrorCodes",
    "FormValidationError",
    "HtmxContextError",
]
