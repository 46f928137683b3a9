"""Dataset CRUD client for the core API."""

import logging
import re
from typing import Any

from college_rag.api.client import ApiClient
from college_rag.models.dataset import CreateDatasetResponse, Dataset, DatasetListResponse

logger = logging.getLogger(__name__)

UPLOAD_CONTENT_TYPE = "text/markdown"


def upload_filename(title: str) -> str:
    """Build the uploaded file name: non-alphanumerics become ``_``, lower-cased."""
    return re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower() + ".md"


class DatasetApi:
    """Create, read, update, delete and reindex datasets."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def list_datasets(self, page: int = 1, limit: int = 20) -> DatasetListResponse:
        data = self._client.get("/api/v1/datasets", params={"page": page, "limit": limit})
        return DatasetListResponse.model_validate(data)

    def list_student_datasets(self, page: int = 1, limit: int = 20) -> DatasetListResponse:
        """Datasets of the students assigned to the current teacher."""
        data = self._client.get(
            "/api/v1/datasets/students", params={"page": page, "limit": limit}
        )
        return DatasetListResponse.model_validate(data)

    def get_dataset(self, dataset_id: str) -> Dataset:
        return Dataset.model_validate(self._client.get(f"/api/v1/datasets/{dataset_id}"))

    def create_dataset(
        self, title: str, content: str, assignment_id: str | None = None
    ) -> CreateDatasetResponse:
        """Upload serialized content as a Markdown file.

        Args:
            title: Dataset title.
            content: Serialized chunk document.
            assignment_id: Topic assignment the dataset answers, if any.

        Returns:
            The creation receipt.
        """
        form: dict[str, Any] = {"title": title}
        if assignment_id:
            form["assignment_id"] = assignment_id
        files = {
            "file": (upload_filename(title), content.encode("utf-8"), UPLOAD_CONTENT_TYPE)
        }

        data = self._client.post("/api/v1/datasets", data=form, files=files)
        result = CreateDatasetResponse.model_validate(data)
        logger.info("Created dataset %s (%s)", result.dataset_id, title)
        return result

    def update_dataset(self, dataset_id: str, title: str, content: str) -> Dataset:
        data = self._client.put(
            f"/api/v1/datasets/{dataset_id}", json={"title": title, "content": content}
        )
        return Dataset.model_validate(data)

    def delete_dataset(self, dataset_id: str) -> None:
        self._client.delete(f"/api/v1/datasets/{dataset_id}")

    def reindex_dataset(self, dataset_id: str) -> None:
        self._client.post(f"/api/v1/datasets/{dataset_id}/reindex")
        logger.info("Requested reindex of dataset %s", dataset_id)
