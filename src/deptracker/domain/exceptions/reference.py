"""Unresolved class reference exception."""

from deptracker.domain.exceptions.base import DepTrackerError


class UnresolvedReferenceError(DepTrackerError):
    """Class is not part of the analyzed class map.

    Soft error: callers treat the class as layerless
    (external or vendor code) instead of aborting.

    Attributes:
        class_name: Name that could not be resolved
    """

    def __init__(self, class_name: str) -> None:
        if not class_name:
            raise ValueError("class_name must not be empty")

        self.class_name = class_name
        super().__init__(f"Class '{class_name}' is not in the class map")
