"""
Custom exception hierarchy for grade ordering.

Provides a consistent error handling approach across all modules.
"""


class GradeSortError(Exception):
    """
    Base exception for all grade ordering errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: dict | None = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== Configuration Errors ====================

class ConfigurationError(GradeSortError):
    """
    Error in system configuration.

    Raised when settings loaded from the environment are invalid.
    """
    pass


# ==================== Argument Errors ====================

class InvalidArgumentError(GradeSortError):
    """
    Raised when a caller passes a value the operation cannot accept.
    """
    pass


class InvalidRecordError(InvalidArgumentError):
    """
    Raised when a record cannot provide an integer grade.

    Covers absent records, records without a ``grade`` attribute and
    records whose grade is not an integer.
    """

    def __init__(self, message: str, position: str | None = None, attribute: str = "grade"):
        super().__init__(message, {
            'position': position,
            'attribute': attribute,
        })
        self.position = position
        self.attribute = attribute
