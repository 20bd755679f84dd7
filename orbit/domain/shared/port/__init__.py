"""Shared port base."""

from typing import Protocol


class Port(Protocol):
    """Marker base for interfaces the domain expects infrastructure to implement."""


__all__ = ["Port"]
