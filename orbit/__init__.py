"""Orbit - planet catalog synchronized from an upstream API."""

__version__ = "0.1.0"
