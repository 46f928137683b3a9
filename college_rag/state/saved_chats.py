"""Saved chat list state for one dataset."""

import logging

from college_rag.api.client import error_message
from college_rag.api.saved_chats import SavedChatApi
from college_rag.models.chat import SaveChatRequest, SavedChat, SavedChatListItem

logger = logging.getLogger(__name__)


class SavedChatState:
    """Saved chats of a dataset plus the one currently opened.

    Failed calls record a readable ``error`` and re-raise, except
    ``fetch_chats`` which empties the list instead.
    """

    def __init__(self, api: SavedChatApi) -> None:
        self._api = api
        self.chats: list[SavedChatListItem] = []
        self.total_chats = 0
        self.current_page = 1
        self.current_chat: SavedChat | None = None
        self.error: str | None = None

    def fetch_chats(self, dataset_id: str, page: int = 1, limit: int = 20) -> None:
        self.error = None
        self.current_page = page
        try:
            response = self._api.list_chats(dataset_id, page, limit)
        except Exception as exc:
            logger.warning("Loading chats of dataset %s failed: %s", dataset_id, exc)
            self.chats = []
            self.error = error_message(exc, "Failed to load chats")
            return
        self.chats = response.chats
        self.total_chats = response.total

    def fetch_chat(self, chat_id: str) -> SavedChat:
        self.error = None
        try:
            self.current_chat = self._api.get_chat(chat_id)
        except Exception as exc:
            self.error = error_message(exc, "Failed to load chat")
            raise
        return self.current_chat

    def create_chat(self, dataset_id: str, request: SaveChatRequest) -> SavedChat:
        self.error = None
        try:
            chat = self._api.create_chat(dataset_id, request)
        except Exception as exc:
            self.error = error_message(exc, "Failed to save chat")
            raise
        self.fetch_chats(dataset_id, self.current_page)
        return chat

    def delete_chat(self, chat_id: str) -> None:
        self.error = None
        try:
            self._api.delete_chat(chat_id)
        except Exception as exc:
            self.error = error_message(exc, "Failed to delete chat")
            raise
        self.chats = [chat for chat in self.chats if chat.id != chat_id]
        self.total_chats = max(self.total_chats - 1, 0)
        if self.current_chat is not None and self.current_chat.id == chat_id:
            self.current_chat = None

    def clear(self) -> None:
        self.chats = []
        self.total_chats = 0
        self.current_page = 1
        self.current_chat = None
        self.error = None
