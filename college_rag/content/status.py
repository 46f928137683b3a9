"""Dataset indexing status helpers."""

from datetime import datetime, timezone

from college_rag.models.dataset import Dataset, DatasetStatus


def _parse_timestamp(value: str) -> datetime:
    # The core API emits RFC 3339 with a trailing "Z"; naive values are UTC
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def needs_reindexing(updated_at: str, indexed_at: str | None) -> bool:
    """Return True when the dataset was never indexed or changed since.

    Args:
        updated_at: ISO timestamp of the last content update.
        indexed_at: ISO timestamp of the last indexing run, if any.
    """
    if not indexed_at:
        return True
    return _parse_timestamp(updated_at) > _parse_timestamp(indexed_at)


def get_dataset_status(dataset: Dataset) -> DatasetStatus:
    if not dataset.indexed_at:
        return DatasetStatus(status="not_indexed", text="Not indexed")

    if needs_reindexing(dataset.updated_at, dataset.indexed_at):
        return DatasetStatus(status="needs_reindex", text="Reindexing required")

    return DatasetStatus(status="indexed", text="Indexed")
