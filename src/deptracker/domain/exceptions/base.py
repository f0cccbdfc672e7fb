"""Base exceptions for deptracker domain."""


class DepTrackerError(Exception):
    """Root exception for all deptracker errors.

    All domain exceptions inherit from this.
    Allows catching all deptracker-specific errors.
    """
