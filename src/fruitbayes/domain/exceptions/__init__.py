"""Custom exceptions for the fruitbayes package."""

# Base exceptions
from .base import (
    FruitBayesError,
    ConfigurationError,
    FileSystemError,
)

# Estimation exceptions
from .estimation import (
    EstimationError,
    EmptyClassError,
    UnknownClassLabelError,
)

# Validation exceptions
from .validation import (
    ValidationError,
    FileValidationError,
    DataFileNotFoundError,
    InvalidFileFormatError,
    InvalidRecordError,
    ParameterValidationError,
)

__all__ = [
    # Base
    "FruitBayesError",
    "ConfigurationError",
    "FileSystemError",

    # Estimation
    "EstimationError",
    "EmptyClassError",
    "UnknownClassLabelError",

    # Validation
    "ValidationError",
    "FileValidationError",
    "DataFileNotFoundError",
    "InvalidFileFormatError",
    "InvalidRecordError",
    "ParameterValidationError",
]
