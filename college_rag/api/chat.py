"""Dataset ask endpoint: retried single-shot requests and streamed answers."""

import json
import logging
from collections.abc import Iterable, Iterator

import requests
from pydantic import ValidationError

from college_rag.api.client import ApiClient, error_message
from college_rag.chat.reasoning import wrap_think_content
from college_rag.models.chat import AskEvent, AskRequest, AskResponse, Citation

logger = logging.getLogger(__name__)

DEFAULT_ASK_TIMEOUT = 7.0
DEFAULT_MAX_RETRIES = 5

# Failures where no usable response arrived; anything else is final.
TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    requests.Timeout,
    requests.ConnectionError,
)

ASK_ERROR_MESSAGES: dict[str, str] = {
    "no relevant content found": (
        "No relevant information was found in the dataset. "
        "Try rephrasing the question."
    ),
    "failed to embed question": "Your question could not be processed. Try again later.",
    "failed to search vectors": "Knowledge base search failed. Try again later.",
    "failed to rerank": "Ranking the results failed. Try again later.",
}


class AskStreamError(RuntimeError):
    """A streamed ask was rejected or reported an error event."""


def format_ask_error(error: str) -> str:
    """Map a backend error code to a readable message; unknown codes pass through."""
    return ASK_ERROR_MESSAGES.get(error, error)


def ask_path(dataset_id: str) -> str:
    return f"/api/v1/datasets/{dataset_id}/ask"


def parse_event_stream(lines: Iterable[str | bytes]) -> Iterator[AskEvent]:
    """Parse server-sent-event lines into ask events.

    An ``event:`` line sets the pending type. A ``data:`` line is decoded
    only while the pending type is ``message``, after which the pending
    type resets. Malformed payloads are skipped.

    Args:
        lines: Lines of the response body without trailing newlines.

    Yields:
        AskEvent for each well-formed message payload. Error events carry
        the readable message from format_ask_error.
    """
    event_type = ""
    for raw_line in lines:
        line = raw_line.decode("utf-8") if isinstance(raw_line, bytes) else raw_line

        if line.startswith("event:"):
            event_type = line[len("event:") :].strip()
        elif line.startswith("data:") and event_type == "message":
            data = line[len("data:") :].strip()
            event_type = ""
            try:
                event = AskEvent.model_validate(json.loads(data))
            except (ValueError, ValidationError):
                logger.debug("Skipping malformed stream payload: %r", data)
                continue

            if event.type == "error":
                event = event.model_copy(update={"error": format_ask_error(event.error)})
            yield event


def collect_stream(events: Iterable[AskEvent]) -> AskResponse:
    """Fold streamed events into a single answer.

    Reasoning tokens are kept ahead of the answer inside a ``<think>``
    span, the same shape saved chats store.

    Raises:
        AskStreamError: If the stream reports an error event.
    """
    thinking: list[str] = []
    answer: list[str] = []
    citations: list[Citation] = []

    for event in events:
        if event.type == "thinking":
            thinking.append(event.delta)
        elif event.type == "delta":
            answer.append(event.delta)
        elif event.type == "citations":
            citations = list(event.citations)
        elif event.type == "error":
            raise AskStreamError(event.error)
        elif event.type == "done":
            break

    return AskResponse(
        answer=wrap_think_content("".join(thinking), "".join(answer)),
        citations=citations,
    )


class ChatApi:
    """Client for asking questions against a dataset.

    Args:
        client: Client bound to the core API.
        timeout: Per-attempt timeout in seconds.
        max_retries: Default number of attempts for ask_question.
    """

    def __init__(
        self,
        client: ApiClient,
        timeout: float = DEFAULT_ASK_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        self._client = client
        self.timeout = timeout
        self.max_retries = max_retries

    def ask_question(
        self, dataset_id: str, message: str, max_retries: int | None = None
    ) -> AskResponse:
        """Ask a question, retrying while the service is unreachable.

        Attempts run one after another without delay. Timeouts and
        connection failures are retried until ``max_retries`` attempts have
        been made. Any other error, including an error status from the
        server, is raised immediately.

        Args:
            dataset_id: Dataset to ask against.
            message: The question text.
            max_retries: Total number of attempts; defaults to the client's.

        Returns:
            The answer and its citations.

        Raises:
            requests.Timeout: If every attempt timed out last.
            requests.ConnectionError: If every attempt failed to connect last.
            requests.HTTPError: If the server answered with an error status.
            ValueError: If max_retries is below 1.
        """
        attempts = self.max_retries if max_retries is None else max_retries
        if attempts < 1:
            raise ValueError(f"max_retries must be at least 1, got {attempts}")

        body = AskRequest(question=message).model_dump()
        last_error: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                data = self._client.post(ask_path(dataset_id), json=body, timeout=self.timeout)
            except TRANSIENT_ERRORS as exc:
                last_error = exc
                logger.warning(
                    "Ask attempt %d/%d for dataset %s failed: %s",
                    attempt,
                    attempts,
                    dataset_id,
                    exc,
                )
                continue
            return AskResponse.model_validate(data)

        logger.error("Ask for dataset %s failed after %d attempts", dataset_id, attempts)
        raise last_error  # type: ignore[misc]

    def stream_question(self, dataset_id: str, message: str) -> Iterator[AskEvent]:
        """Ask a question and yield the answer as it is generated.

        Raises:
            AskStreamError: If the server rejects the request.
        """
        body = AskRequest(question=message).model_dump()
        try:
            response = self._client.request(
                "POST",
                ask_path(dataset_id),
                json=body,
                stream=True,
                timeout=self.timeout,
            )
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            raise AskStreamError(error_message(exc, f"HTTP {status}")) from exc

        with response:
            yield from parse_event_stream(response.iter_lines())
