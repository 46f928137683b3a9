"""Dataset content: chunk codec, editor state and local import."""

from college_rag.content.chunks import (
    create_empty_chunk,
    generate_chunk_id,
    insert_chunk_after,
    parse_content_to_chunks,
    remove_chunk,
    serialize_chunks,
    update_chunk,
)
from college_rag.content.editor import ChunkEditor
from college_rag.content.loader import read_document
from college_rag.content.status import get_dataset_status, needs_reindexing

__all__ = [
    "ChunkEditor",
    "create_empty_chunk",
    "generate_chunk_id",
    "get_dataset_status",
    "insert_chunk_after",
    "needs_reindexing",
    "parse_content_to_chunks",
    "read_document",
    "remove_chunk",
    "serialize_chunks",
    "update_chunk",
]
