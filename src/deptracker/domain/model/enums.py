"""Domain enumerations.

Values are the lowercase names used in class map documents.
"""

from enum import Enum


class InheritKind(Enum):
    """How a class inherits from a direct ancestor."""

    EXTENDS = "extends"  # class Child extends Base
    IMPLEMENTS = "implements"  # class Impl implements Iface
    USES = "uses"  # trait / mixin use


class DependencyKind(Enum):
    """Where a class-name reference occurs inside a class."""

    USE = "use"  # import / use statement
    PARAMETER = "parameter"  # method parameter type
    RETURN_TYPE = "return_type"  # method return type
    INSTANTIATION = "instantiation"  # new Foo()
    STATIC_CALL = "static_call"  # Foo::bar()
    CONSTANT = "constant"  # Foo::BAR
    OTHER = "other"
