"""Conversion between editor chunks and heading-delimited dataset content."""

import logging
import re
from collections.abc import Callable
from uuid import uuid4

from college_rag.models.chunk import Chunk

logger = logging.getLogger(__name__)

# A heading line is "##", at least one whitespace character, then the title.
# Body lines that happen to look like this always start a new chunk.
HEADING_PATTERN: re.Pattern[str] = re.compile(r"^##\s+(.*)$")

HEADING_PREFIX = "## "
CHUNK_SEPARATOR = "\n\n"

IdFactory = Callable[[], str]

EDITABLE_FIELDS = ("title", "body")


def generate_chunk_id() -> str:
    """Return a random session-local chunk id (UUID4, backed by os.urandom)."""
    return str(uuid4())


def create_empty_chunk(id_factory: IdFactory = generate_chunk_id) -> Chunk:
    """Create a chunk with a fresh id and empty title and body.

    Args:
        id_factory: Callable producing a unique id string.

    Returns:
        A new empty Chunk.
    """
    return Chunk(id=id_factory(), title="", body="")


def _serialize_chunk(chunk: Chunk) -> str | None:
    title = chunk.title.strip()
    body = chunk.body.strip()

    if not title and not body:
        return None

    if title:
        heading = f"{HEADING_PREFIX}{title}"
        return f"{heading}\n{body}" if body else heading

    return body


def serialize_chunks(chunks: list[Chunk]) -> str:
    """Serialize chunks into a single heading-delimited document.

    Titled chunks become a ``## <title>`` line followed by the body.
    Untitled chunks contribute their body only, and chunks with neither
    title nor body are dropped. Contributions are separated by one blank
    line.

    Args:
        chunks: Ordered chunks from the editor.

    Returns:
        The document string; empty when every chunk is blank.
    """
    parts = [_serialize_chunk(chunk) for chunk in chunks]
    return CHUNK_SEPARATOR.join(part for part in parts if part)


def parse_content_to_chunks(
    content: str | None, id_factory: IdFactory = generate_chunk_id
) -> list[Chunk]:
    """Split a dataset document into editor chunks.

    Every ``## `` line starts a new chunk whose title is the rest of the
    line. Lines before the first heading form an untitled chunk. Blank
    chunks are discarded, but the result always holds at least one chunk.

    Args:
        content: Document text; ``None`` is treated as empty.
        id_factory: Callable producing a unique id for each chunk.

    Returns:
        Non-empty ordered list of chunks.
    """
    normalized = (content or "").replace("\r\n", "\n")
    if not normalized.strip():
        return [create_empty_chunk(id_factory)]

    chunks: list[Chunk] = []
    current_title = ""
    current_body: list[str] = []

    def flush() -> None:
        body = "\n".join(current_body).strip()
        title = current_title.strip()
        if not title and not body:
            return
        chunks.append(Chunk(id=id_factory(), title=title, body=body))

    for line in normalized.split("\n"):
        match = HEADING_PATTERN.match(line)
        if match:
            flush()
            current_title = match.group(1)
            current_body = []
        else:
            current_body.append(line)

    flush()

    if not chunks:
        return [create_empty_chunk(id_factory)]

    logger.debug("Parsed %d chunks from %d characters", len(chunks), len(normalized))
    return chunks


def insert_chunk_after(
    chunks: list[Chunk], index: int, id_factory: IdFactory = generate_chunk_id
) -> list[Chunk]:
    """Return a copy of ``chunks`` with an empty chunk right after ``index``.

    An index past the end appends; a negative index inserts at the front.
    """
    position = min(max(index + 1, 0), len(chunks))
    return [*chunks[:position], create_empty_chunk(id_factory), *chunks[position:]]


def remove_chunk(
    chunks: list[Chunk], chunk_id: str, id_factory: IdFactory = generate_chunk_id
) -> list[Chunk]:
    """Return a copy of ``chunks`` without the chunk matching ``chunk_id``.

    Removing the only chunk yields a single fresh empty chunk instead of an
    empty list.
    """
    if len(chunks) <= 1:
        return [create_empty_chunk(id_factory)]
    return [chunk for chunk in chunks if chunk.id != chunk_id]


def update_chunk(chunks: list[Chunk], chunk_id: str, field: str, value: str) -> list[Chunk]:
    """Return a copy of ``chunks`` with one field of one chunk replaced.

    Args:
        chunks: Current chunk list.
        chunk_id: Id of the chunk to edit.
        field: ``"title"`` or ``"body"``.
        value: New field value, stored as typed.

    Returns:
        New list in the same order.

    Raises:
        ValueError: If ``field`` is not an editable field.
    """
    if field not in EDITABLE_FIELDS:
        raise ValueError(
            f"Unknown chunk field: '{field}'. Editable: {', '.join(EDITABLE_FIELDS)}"
        )
    return [
        chunk.model_copy(update={field: value}) if chunk.id == chunk_id else chunk
        for chunk in chunks
    ]
