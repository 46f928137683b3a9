"""Auth service client."""

import logging

from college_rag.api.client import ApiClient
from college_rag.models.user import LoginResponse, User

logger = logging.getLogger(__name__)


class AuthApi:
    """Sign-in, sign-out and token validation against the auth service.

    Args:
        client: Client bound to the auth service.
        core_client: Core API client that receives the access token after a
            successful login, if given.
    """

    def __init__(self, client: ApiClient, core_client: ApiClient | None = None) -> None:
        self._client = client
        self._core_client = core_client

    def login(self, username: str, password: str) -> LoginResponse:
        data = self._client.post(
            "/api/v1/users/signin", json={"username": username, "password": password}
        )
        result = LoginResponse.model_validate(data)

        self._client.access_token = result.access_token
        if self._core_client is not None:
            self._core_client.access_token = result.access_token

        logger.info("Signed in as %s (%s)", result.user.username, result.user.role)
        return result

    def logout(self) -> None:
        self._client.post("/api/v1/users/signout")
        self._client.access_token = None
        if self._core_client is not None:
            self._core_client.access_token = None

    def validate_token(self) -> User:
        data = self._client.post("/api/v1/auth/validate")
        return User.model_validate(data["user"])
