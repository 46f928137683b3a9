"""Dataset data models."""

from pydantic import BaseModel, Field


class Dataset(BaseModel):
    """A student's topic dataset as stored by the core API."""

    id: str
    title: str
    content: str | None = None
    author: str | None = None
    user_id: str
    created_at: str
    updated_at: str
    indexed_at: str | None = None


class DatasetListResponse(BaseModel):
    datasets: list[Dataset] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20


class CreateDatasetResponse(BaseModel):
    dataset_id: str
    title: str
    created_at: str
    message: str = ""


class DatasetStatus(BaseModel):
    """Indexing state of a dataset."""

    status: str  # "not_indexed", "needs_reindex", "indexed"
    text: str
