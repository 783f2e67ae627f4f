"""Custom exception hierarchy for the CSV to MAL XML converter.

All converter-specific exceptions inherit from ConverterError,
enabling consistent error handling and structured log output.

Exception hierarchy:
    ConverterError (base)
    ├── InputFileError
    ├── RowValidationError
    └── OutputWriteError
"""

from typing import Any


class ConverterError(Exception):
    """Base exception for all converter errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for log filtering
        details: Additional context as key-value pairs
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize converter error.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (e.g., 'INPUT_FILE_ERROR')
            details: Additional context for debugging
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for structured logging.

        Returns:
            Dictionary with error_code, error_message, and details.
            Note: Uses 'error_message' instead of 'message' to avoid conflicts
            with Python's logging module which reserves 'message' internally.
        """
        return {
            "error_code": self.error_code,
            "error_message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.error_code!r}, {self.message!r})"


class InputFileError(ConverterError):
    """Raised when the input CSV cannot be used.

    This covers:
    - File not found
    - Permission or other OS errors while reading
    - Content that is not valid in the configured encoding
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "INPUT_FILE_ERROR", details)


class RowValidationError(ConverterError):
    """Raised when a CSV row fails strict validation.

    Never fatal for a run: the strict pipeline logs it and skips the row.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        field: str | None = None,
    ) -> None:
        """Initialize row validation error.

        Args:
            message: Reason the row was rejected
            line_number: 1-based line of the row in the source file
            field: Name of the offending CSV column
        """
        details = {"line_number": line_number, "field": field}
        super().__init__(message, "ROW_VALIDATION_ERROR", details)
        self.line_number = line_number
        self.field = field


class OutputWriteError(ConverterError):
    """Raised when the XML document cannot be written."""

    def __init__(
        self,
        output_path: str,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize output write error.

        Args:
            output_path: Destination that could not be written
            original_error: The underlying OS error
        """
        details: dict[str, Any] = {"output_path": output_path}
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(f"Error writing XML file: {output_path}", "OUTPUT_WRITE_ERROR", details)
        self.original_error = original_error
