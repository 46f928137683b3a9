"""Saved chat client for the core API."""

from college_rag.api.client import ApiClient
from college_rag.models.chat import (
    DeleteChatResponse,
    SaveChatRequest,
    SavedChat,
    SavedChatListResponse,
)


class SavedChatApi:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def create_chat(self, dataset_id: str, request: SaveChatRequest) -> SavedChat:
        data = self._client.post(
            f"/api/v1/datasets/{dataset_id}/chats", json=request.model_dump()
        )
        return SavedChat.model_validate(data)

    def list_chats(self, dataset_id: str, page: int = 1, limit: int = 20) -> SavedChatListResponse:
        data = self._client.get(
            f"/api/v1/datasets/{dataset_id}/chats", params={"page": page, "limit": limit}
        )
        return SavedChatListResponse.model_validate(data)

    def get_chat(self, chat_id: str) -> SavedChat:
        return SavedChat.model_validate(self._client.get(f"/api/v1/chats/{chat_id}"))

    def update_chat(self, chat_id: str, request: SaveChatRequest) -> SavedChat:
        data = self._client.put(f"/api/v1/chats/{chat_id}", json=request.model_dump())
        return SavedChat.model_validate(data)

    def delete_chat(self, chat_id: str) -> DeleteChatResponse:
        data = self._client.delete(f"/api/v1/chats/{chat_id}")
        return DeleteChatResponse.model_validate(data or {"success": True})

    def download_chat(self, chat_id: str) -> bytes:
        """Raw Markdown export produced by the server."""
        return self._client.request("GET", f"/api/v1/chats/{chat_id}/download").content
