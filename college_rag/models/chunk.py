"""Chunk data model."""

from uuid import uuid4

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """One titled block of a dataset document while it is being edited.

    The ``id`` only identifies the block within an editing session and is
    never sent to the backend.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = ""
    body: str = ""
