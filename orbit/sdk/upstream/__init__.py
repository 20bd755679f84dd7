"""Upstream SDK - wire types for the planet catalog."""

from orbit.sdk.upstream.record import UpstreamPage, UpstreamRecord

__all__ = [
    "UpstreamPage",
    "UpstreamRecord",
]
