"""Aggregate base - identity-bearing domain objects."""

from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base class for aggregates persisted by a repository."""

    model_config = ConfigDict(from_attributes=True)
