"""Conversation state for one dataset."""

import logging

from college_rag.api.chat import ChatApi
from college_rag.models.chat import ChatExchange, SaveChatRequest

logger = logging.getLogger(__name__)

ASK_FAILED_MESSAGE = "Could not get an answer. Please try asking again."


class ChatSession:
    """Running list of question/answer exchanges against a dataset.

    Args:
        chat_api: Client used to ask questions.
        dataset_id: Dataset every question is scoped to.
    """

    def __init__(self, chat_api: ChatApi, dataset_id: str) -> None:
        self._chat_api = chat_api
        self.dataset_id = dataset_id
        self.exchanges: list[ChatExchange] = []
        self.is_loading = False
        self.error: str | None = None

    def ask(self, message: str) -> ChatExchange:
        """Ask a question and record the exchange.

        Raises:
            ValueError: If the message is blank.
            requests.RequestException: If the ask failed; ``error`` is set.
        """
        question = message.strip()
        if not question:
            raise ValueError("Question must not be empty")

        self.is_loading = True
        self.error = None
        try:
            response = self._chat_api.ask_question(self.dataset_id, question)
        except Exception:
            logger.exception("Ask failed for dataset %s", self.dataset_id)
            self.error = ASK_FAILED_MESSAGE
            raise
        finally:
            self.is_loading = False

        exchange = ChatExchange(
            question=question, answer=response.answer, citations=response.citations
        )
        self.exchanges = [*self.exchanges, exchange]
        return exchange

    def to_save_request(self, title: str) -> SaveChatRequest:
        """Build the payload for saving this conversation.

        Raises:
            ValueError: If the title is blank or there is nothing to save.
        """
        if not title.strip():
            raise ValueError("Chat title must not be empty")
        if not self.exchanges:
            raise ValueError("There are no messages to save")
        return SaveChatRequest(title=title.strip(), messages=list(self.exchanges))

    def clear(self) -> None:
        self.exchanges = []
        self.is_loading = False
        self.error = None
