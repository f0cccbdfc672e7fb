"""Layer resolver protocol."""

from typing import Protocol


class LayerResolverProtocol(Protocol):
    """Contract for class name → layer names resolution.

    Implementations must be referentially transparent for one
    configuration snapshot, so results can be cached.
    """

    def get_layers_by_class_name(self, class_name: str) -> tuple[str, ...]:
        """Get layers the class belongs to.

        Args:
            class_name: Fully qualified class name

        Returns:
            Layer names in declaration order (empty if none match
            or the class is not in the class map)
        """
        ...
