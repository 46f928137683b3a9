"""Chat and saved-chat data models."""

from pydantic import BaseModel, ConfigDict, Field


class Citation(BaseModel):
    """A retrieved chunk reference attached to an answer."""

    model_config = ConfigDict(extra="allow")

    chunk_id: int
    score: float
    original_score: float | None = None
    score_improvement: float | None = None


class AskRequest(BaseModel):
    """Body of a dataset ask request."""

    question: str


class AskResponse(BaseModel):
    """Answer returned by the dataset ask endpoint."""

    answer: str
    citations: list[Citation] = Field(default_factory=list)


class AskEvent(BaseModel):
    """A single event of a streamed ask response."""

    type: str  # "thinking", "delta", "citations", "done", "error"
    delta: str = ""
    citations: list[Citation] = Field(default_factory=list)
    error: str = ""


class ThinkSplit(BaseModel):
    """An answer separated into its visible text and reasoning span."""

    visible_text: str
    hidden_text: str | None = None


class SavedChatMessage(BaseModel):
    """One question/answer turn stored in a saved chat."""

    id: str | None = None
    chat_id: str | None = None
    order_num: int | None = None
    question: str
    answer: str
    citations: list[Citation] = Field(default_factory=list)
    created_at: str | None = None


class SavedChat(BaseModel):
    """A saved conversation with all of its messages."""

    id: str
    dataset_id: str
    user_id: str
    title: str
    created_by: str
    messages: list[SavedChatMessage] = Field(default_factory=list)
    created_at: str
    updated_at: str


class SavedChatListItem(BaseModel):
    """Saved chat summary as returned by list endpoints."""

    id: str
    dataset_id: str
    user_id: str
    title: str
    created_by: str
    created_at: str
    updated_at: str


class SavedChatListResponse(BaseModel):
    chats: list[SavedChatListItem] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20


class ChatExchange(BaseModel):
    """Question/answer pair sent when saving a chat."""

    question: str
    answer: str
    citations: list[Citation] = Field(default_factory=list)


class SaveChatRequest(BaseModel):
    title: str
    messages: list[ChatExchange] = Field(default_factory=list)


class DeleteChatResponse(BaseModel):
    success: bool
    message: str = ""
