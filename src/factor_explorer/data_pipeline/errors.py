from __future__ import annotations


class FactorDataError(Exception):
    """Base error for loading the factor snapshots."""

    code = "DATA_ERROR"

    def __init__(self, message: str, *, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class SchemaValidationError(FactorDataError):
    """Raised when an input file does not satisfy its column contract."""

    code = "VALIDATION_ERROR"


class EmptySelectionFilterError(SchemaValidationError):
    """Raised when the fixed location/weighting filter keeps no rows."""

    code = "EMPTY_FILTER"


class DuplicateDateError(SchemaValidationError):
    """Raised when a factor series repeats a date under the ``error`` policy."""

    code = "DUPLICATE_DATE"


class StartupLoadError(FactorDataError):
    """Raised when one of the startup files cannot be read or parsed."""

    code = "STARTUP_ERROR"

    def __init__(self, source: str, cause: BaseException) -> None:
        user_message = getattr(cause, "user_message", None) or str(cause)
        super().__init__(
            f"failed to load {source}: {cause}",
            user_message=f"Error loading or processing {source}: {user_message}",
        )
        self.source = source
        self.cause = cause
