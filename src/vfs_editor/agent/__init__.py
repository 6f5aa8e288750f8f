"""Agent-facing session interface."""

from .interface import AgentSession

__all__ = [
    'AgentSession',
]
