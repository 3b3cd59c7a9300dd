"""Custom exceptions used throughout the beancounter package."""

from typing import Any, Optional


class BeanCounterError(Exception):
    """Base exception for all bean counter errors.

    All package-specific exceptions inherit from this class, so every
    error raised by the machine can be caught with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(BeanCounterError):
    """Raised when there's an error in configuration.

    This includes:
    - Unreadable or malformed YAML
    - Missing required configuration
    - Out-of-range values (e.g. slot_count < 1)
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class SlotIndexError(BeanCounterError, IndexError):
    """Raised when a slot index falls outside [0, slot_count)."""

    def __init__(
        self,
        index: int,
        slot_count: int,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["index"] = index
        details["slot_count"] = slot_count
        message = f"Slot index {index} out of range for {slot_count} slots"
        super().__init__(message=message, details=details)
        self.index = index
        self.slot_count = slot_count


class PegPositionError(BeanCounterError, IndexError):
    """Raised when a (row, column) pair is not a legal peg position.

    Legal positions satisfy 0 <= column <= row < rows.
    """

    def __init__(
        self,
        row: int,
        column: Optional[int] = None,
        rows: int = 0,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["row"] = row
        details["rows"] = rows
        if column is None:
            message = f"Row {row} out of range for a grid of {rows} rows"
        else:
            details["column"] = column
            message = f"Illegal peg position ({row}, {column}) for a grid of {rows} rows"
        super().__init__(message=message, details=details)
        self.row = row
        self.column = column
        self.rows = rows


class InvariantViolationError(BeanCounterError):
    """Raised when the machine state breaks one of its structural invariants.

    Examples:
    - Bean count not conserved across backlog, pegs and slots
    - Two beans in flight on the same row
    - Machine reports a change after it already reached quiescence
    """

    def __init__(
        self,
        invariant: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=f"Invariant '{invariant}' violated: {message}", details=details)
        self.invariant = invariant
