"""Emitter registry."""

from __future__ import annotations

from deptracker.application.emitters.basic import BasicDependencyEmitter
from deptracker.application.emitters.inheritance import InheritanceDependencyEmitter
from deptracker.domain.ports.emitter import DependencyEmitterProtocol


def default_emitters() -> tuple[DependencyEmitterProtocol, ...]:
    """Instantiate built-in emitters, in run order.

    Returns:
        Inheritance emitter first, then basic emitter
    """
    return (InheritanceDependencyEmitter(), BasicDependencyEmitter())
