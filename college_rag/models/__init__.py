"""Data models for the College RAG client."""

from college_rag.models.chat import (
    AskEvent,
    AskRequest,
    AskResponse,
    ChatExchange,
    Citation,
    DeleteChatResponse,
    SaveChatRequest,
    SavedChat,
    SavedChatListItem,
    SavedChatListResponse,
    SavedChatMessage,
    ThinkSplit,
)
from college_rag.models.chunk import Chunk
from college_rag.models.dataset import (
    CreateDatasetResponse,
    Dataset,
    DatasetListResponse,
    DatasetStatus,
)
from college_rag.models.topic import (
    AddStudentsResponse,
    AssignedTopicsResponse,
    CreateTopicRequest,
    CreateTopicResponse,
    DatasetPermission,
    DatasetPermissionsResponse,
    StudentInfo,
    StudentSearchResponse,
    TeacherInfo,
    TeacherSearchResponse,
    TeacherTopic,
    TeacherTopicsResponse,
    Topic,
    TopicStudent,
    TopicStudentsResponse,
    TopicWithAssignment,
)
from college_rag.models.user import LoginResponse, User

__all__ = [
    "AddStudentsResponse",
    "AskEvent",
    "AskRequest",
    "AskResponse",
    "AssignedTopicsResponse",
    "ChatExchange",
    "Chunk",
    "Citation",
    "CreateDatasetResponse",
    "CreateTopicRequest",
    "CreateTopicResponse",
    "Dataset",
    "DatasetListResponse",
    "DatasetPermission",
    "DatasetPermissionsResponse",
    "DatasetStatus",
    "DeleteChatResponse",
    "LoginResponse",
    "SaveChatRequest",
    "SavedChat",
    "SavedChatListItem",
    "SavedChatListResponse",
    "SavedChatMessage",
    "StudentInfo",
    "StudentSearchResponse",
    "TeacherInfo",
    "TeacherSearchResponse",
    "TeacherTopic",
    "TeacherTopicsResponse",
    "ThinkSplit",
    "Topic",
    "TopicStudent",
    "TopicStudentsResponse",
    "TopicWithAssignment",
    "User",
]
