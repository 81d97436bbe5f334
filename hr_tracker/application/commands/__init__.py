"""
Application Commands (CQRS write side)

Exports:
    - StatusTransitionGate: Authorization and payload validation
    - SingleTransitionCommand, MassTransitionCommand: Validated commands
"""

from hr_tracker.application.commands.transition_status import (
    MassTransitionCommand,
    SingleTransitionCommand,
    StatusTransitionGate,
    TransitionCommand,
)

__all__ = [
    "StatusTransitionGate",
    "SingleTransitionCommand",
    "MassTransitionCommand",
    "TransitionCommand",
]
