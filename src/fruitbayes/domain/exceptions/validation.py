"""Input validation exceptions."""

from typing import Optional, List, Any
from .base import FruitBayesError

class ValidationError(FruitBayesError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if field_name:
            self.add_context('field_name', field_name)
        if field_value is not None:
            self.add_context('field_value', str(field_value))

    def _get_default_error_code(self) -> str:
        return "VALIDATION_ERROR"


class FileValidationError(ValidationError):
    """Raised when file validation fails."""

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        validation_type: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if file_path:
            self.add_context('file_path', str(file_path))
        if validation_type:
            self.add_context('validation_type', validation_type)

    def _get_default_error_code(self) -> str:
        return "FILE_VALIDATION_FAILED"


class DataFileNotFoundError(FileValidationError):
    """Raised when a required data file doesn't exist."""
    def __init__(self, file_path: str, **kwargs):
        message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, validation_type="existence_check", **kwargs)
        self.add_suggestion("Check if the file path is correct and accessible")

    def _get_default_error_code(self) -> str:
        return "FILE_NOT_FOUND"


class InvalidFileFormatError(FileValidationError):
    """Raised when a data file is missing required columns."""
    def __init__(
        self,
        file_path: str,
        expected_columns: List[str],
        missing_columns: Optional[List[str]] = None,
        **kwargs
    ):
        columns_str = ", ".join(expected_columns)
        message = f"Invalid file format for {file_path}. Expected columns: {columns_str}"
        super().__init__(message, file_path=file_path, validation_type="format_check", **kwargs)
        self.add_context('expected_columns', expected_columns)
        if missing_columns:
            self.add_context('missing_columns', missing_columns)
        self.add_suggestion(f"Ensure the header row contains: {columns_str}")

    def _get_default_error_code(self) -> str:
        return "INVALID_FILE_FORMAT"


class InvalidRecordError(FileValidationError):
    """Raised when a single row of a data file cannot be parsed."""
    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
        **kwargs
    ):
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message, file_path=file_path, validation_type="record_check", **kwargs)
        self.line_number = line_number
        if line_number is not None:
            self.add_context('line_number', line_number)

    def _get_default_error_code(self) -> str:
        return "INVALID_RECORD"


class ParameterValidationError(ValidationError):
    """Raised when parameter validation fails."""
    def __init__(
        self,
        parameter_name: str,
        parameter_value: Any,
        expected_type: Optional[str] = None,
        **kwargs
    ):
        message = f"Invalid parameter '{parameter_name}': {parameter_value}"
        super().__init__(message, field_name=parameter_name, field_value=str(parameter_value), **kwargs)
        if expected_type:
            self.add_context('expected_type', expected_type)
        self.add_suggestion(f"Check the value and type of parameter '{parameter_name}'")

    def _get_default_error_code(self) -> str:
        return "PARAMETER_VALIDATION_FAILED"
