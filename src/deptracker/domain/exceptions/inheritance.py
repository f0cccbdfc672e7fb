"""Inheritance warnings."""


class CyclicInheritanceWarning(UserWarning):
    """Inheritance chain contains a cycle.

    Emitted via warnings.warn() when ancestor traversal meets a class
    already on the current chain. Traversal stops at the repeat.
    """
