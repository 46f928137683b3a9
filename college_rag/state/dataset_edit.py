"""Editing session for an existing dataset."""

import logging

from college_rag.api.datasets import DatasetApi
from college_rag.content.chunks import IdFactory, generate_chunk_id
from college_rag.content.editor import ChunkEditor
from college_rag.content.status import needs_reindexing
from college_rag.models.dataset import Dataset

logger = logging.getLogger(__name__)


class DatasetEditSession:
    """Tracks title and chunk edits of a dataset against its saved state.

    Args:
        dataset_api: Client used to persist changes.
        dataset: The dataset as loaded, including its content.
        id_factory: Id generator for editor chunks.
    """

    def __init__(
        self,
        dataset_api: DatasetApi,
        dataset: Dataset,
        id_factory: IdFactory = generate_chunk_id,
    ) -> None:
        self._dataset_api = dataset_api
        self.dataset = dataset
        self.title = dataset.title
        self.editor = ChunkEditor.from_content(dataset.content, id_factory=id_factory)
        self._original_title = dataset.title
        self._original_content = self.editor.serialize()

    @classmethod
    def load(
        cls, dataset_api: DatasetApi, dataset_id: str, id_factory: IdFactory = generate_chunk_id
    ) -> "DatasetEditSession":
        return cls(dataset_api, dataset_api.get_dataset(dataset_id), id_factory=id_factory)

    @property
    def content(self) -> str:
        return self.editor.serialize()

    @property
    def has_changes(self) -> bool:
        return self.title != self._original_title or self.content != self._original_content

    @property
    def needs_reindexing(self) -> bool:
        return needs_reindexing(self.dataset.updated_at, self.dataset.indexed_at)

    def _validate_title(self) -> None:
        if not self.title.strip():
            raise ValueError("Dataset title must not be empty")

    def _persist(self) -> None:
        content = self.content
        self.dataset = self._dataset_api.update_dataset(self.dataset.id, self.title, content)
        self._original_title = self.title
        self._original_content = content
        logger.info("Saved dataset %s", self.dataset.id)

    def save(self) -> Dataset:
        """Persist the edits. The dataset must be reindexed separately.

        Raises:
            ValueError: If the title is blank or nothing changed.
        """
        self._validate_title()
        if not self.has_changes:
            raise ValueError("There are no changes to save")
        self._persist()
        return self.dataset

    def save_and_reindex(self) -> Dataset:
        """Persist any edits, reindex, and reload the dataset.

        Raises:
            ValueError: If the title is blank.
        """
        self._validate_title()
        if self.has_changes:
            self._persist()
        self._dataset_api.reindex_dataset(self.dataset.id)
        self.dataset = self._dataset_api.get_dataset(self.dataset.id)
        return self.dataset

    def revert(self) -> None:
        self.title = self._original_title
        self.editor.reset(self._original_content)
