"""HTTP clients for the auth and core services."""

from college_rag.api.admin import AdminApi, AdminStats
from college_rag.api.auth import AuthApi
from college_rag.api.chat import (
    AskStreamError,
    ChatApi,
    collect_stream,
    format_ask_error,
    parse_event_stream,
)
from college_rag.api.client import ApiClient, error_message
from college_rag.api.datasets import DatasetApi
from college_rag.api.saved_chats import SavedChatApi
from college_rag.api.topics import TopicApi

__all__ = [
    "AdminApi",
    "AdminStats",
    "ApiClient",
    "AskStreamError",
    "AuthApi",
    "ChatApi",
    "DatasetApi",
    "SavedChatApi",
    "TopicApi",
    "collect_stream",
    "error_message",
    "format_ask_error",
    "parse_event_stream",
]
