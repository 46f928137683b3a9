"""Explicit state objects for chat and dataset editing."""

from college_rag.state.chat_session import ChatSession
from college_rag.state.dataset_edit import DatasetEditSession
from college_rag.state.saved_chats import SavedChatState

__all__ = ["ChatSession", "DatasetEditSession", "SavedChatState"]
