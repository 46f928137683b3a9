"""Editing state for a chunked dataset document."""

from college_rag.content.chunks import (
    IdFactory,
    generate_chunk_id,
    insert_chunk_after,
    parse_content_to_chunks,
    remove_chunk,
    serialize_chunks,
    update_chunk,
)
from college_rag.models.chunk import Chunk


class ChunkEditor:
    """Holds the ordered chunk list of one editing session.

    Every operation replaces ``chunks`` with a new list, so a reference
    taken before an edit keeps seeing the old state. The list is never
    empty.

    Args:
        chunks: Initial chunks; parsed from empty content when omitted.
        id_factory: Id generator used for every new chunk.
    """

    def __init__(
        self,
        chunks: list[Chunk] | None = None,
        id_factory: IdFactory = generate_chunk_id,
    ) -> None:
        self._id_factory = id_factory
        if not chunks:
            chunks = parse_content_to_chunks("", id_factory)
        self.chunks: list[Chunk] = list(chunks)

    @classmethod
    def from_content(
        cls, content: str | None, id_factory: IdFactory = generate_chunk_id
    ) -> "ChunkEditor":
        return cls(parse_content_to_chunks(content, id_factory), id_factory=id_factory)

    def reset(self, content: str | None = "") -> None:
        self.chunks = parse_content_to_chunks(content, self._id_factory)

    def insert_after(self, index: int) -> Chunk:
        """Insert an empty chunk after ``index`` and return it."""
        self.chunks = insert_chunk_after(self.chunks, index, self._id_factory)
        return self.chunks[min(max(index + 1, 0), len(self.chunks) - 1)]

    def remove(self, chunk_id: str) -> None:
        self.chunks = remove_chunk(self.chunks, chunk_id, self._id_factory)

    def update_title(self, chunk_id: str, title: str) -> None:
        self.chunks = update_chunk(self.chunks, chunk_id, "title", title)

    def update_body(self, chunk_id: str, body: str) -> None:
        self.chunks = update_chunk(self.chunks, chunk_id, "body", body)

    def serialize(self) -> str:
        return serialize_chunks(self.chunks)
