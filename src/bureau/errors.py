"""
Error taxonomy for bureau operations.

Read paths never raise: listing and pointer failures degrade to empty/None.
Everything else surfaces as a BureauError subclass carrying a readable message.
"""


class BureauError(Exception):
    """Base class for errors surfaced to callers."""

    retryable = False


class ValidationError(BureauError, ValueError):
    """Raised when a required argument is missing, empty, or unsafe."""
    pass


class TaskNotFoundError(BureauError, LookupError):
    """Raised when no task directory carries the requested label."""
    pass


class NoCurrentTaskError(BureauError, LookupError):
    """Raised when an operation needs a current task and none resolves."""
    pass


class AllocationExhaustedError(BureauError):
    """Raised when the same-day disambiguator probe hits its safety bound."""
    pass


class MutationError(BureauError):
    """Raised when creating a task directory or replacing the pointer fails."""

    retryable = True


class TaskConflictError(MutationError):
    """Raised when the chosen task directory already exists at creation time."""
    pass
