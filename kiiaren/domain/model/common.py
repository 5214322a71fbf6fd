"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; state changes go through ``model_copy(update=...)``
    and are persisted by the owning repository.
    """

    model_config = ConfigDict(frozen=True)
