"""Tests for the auth, dataset, saved chat, topic and admin clients."""

from unittest.mock import MagicMock

import pytest
import requests

from college_rag.api.admin import AdminApi
from college_rag.api.auth import AuthApi
from college_rag.api.client import ApiClient, error_message
from college_rag.api.datasets import DatasetApi, upload_filename
from college_rag.api.saved_chats import SavedChatApi
from college_rag.api.topics import TopicApi
from college_rag.models.chat import ChatExchange, SaveChatRequest
from college_rag.models.topic import StudentInfo, TeacherInfo

DATASET = {
    "id": "ds-1",
    "title": "Cell biology",
    "content": "## Cells\nUnits of life",
    "user_id": "student-1",
    "created_at": "2025-01-01T00:00:00Z",
    "updated_at": "2025-01-02T00:00:00Z",
    "indexed_at": None,
}

SAVED_CHAT = {
    "id": "chat-1",
    "dataset_id": "ds-1",
    "user_id": "student-1",
    "title": "Review",
    "created_by": "alice",
    "messages": [{"question": "q", "answer": "a", "citations": []}],
    "created_at": "2025-01-01T00:00:00Z",
    "updated_at": "2025-01-01T00:00:00Z",
}


def _topic(topic_id: str, author: str, students: list[dict] | None = None) -> dict:
    return {
        "id": topic_id,
        "title": f"Topic {topic_id}",
        "description": "",
        "created_by": author,
        "created_by_id": f"id-{author}",
        "created_at": "2025-01-01",
        "updated_at": "2025-01-01",
        "students": students,
    }


# ── Base client ──────────────────────────────────────────────────────────────


class TestApiClient:
    def test_joins_urls(self) -> None:
        client = ApiClient("http://core.test/", session=MagicMock())
        assert client.url("/api/v1/x") == "http://core.test/api/v1/x"
        assert client.url("api/v1/x") == "http://core.test/api/v1/x"

    def test_no_auth_header_without_token(self, session, make_response) -> None:
        client = ApiClient("http://core.test", session=session)
        session.request.return_value = make_response(200, {})

        client.get("/ping")

        assert "Authorization" not in session.request.call_args.kwargs["headers"]

    def test_default_timeout(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(200, {})
        core_client.get("/ping")
        assert session.request.call_args.kwargs["timeout"] == 30.0

    def test_raises_for_error_status(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(404, {"error": "not found"})
        with pytest.raises(requests.HTTPError):
            core_client.get("/missing")

    def test_empty_post_body_returns_none(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(204)
        assert core_client.post("/noop") is None


class TestErrorMessage:
    def test_prefers_body_error(self, make_response) -> None:
        exc = requests.HTTPError(response=make_response(400, {"error": "title taken"}))
        assert error_message(exc, "fallback") == "title taken"

    def test_fallback_for_plain_errors(self) -> None:
        assert error_message(requests.Timeout("slow"), "fallback") == "fallback"

    def test_fallback_for_non_json_body(self, make_response) -> None:
        exc = requests.HTTPError(response=make_response(502, body=b"Bad Gateway"))
        assert error_message(exc, "fallback") == "fallback"


# ── Auth ─────────────────────────────────────────────────────────────────────


class TestAuthApi:
    def test_login_stores_token(self, session, make_response) -> None:
        auth_client = ApiClient("http://auth.test", session=session)
        core = ApiClient("http://core.test", session=MagicMock())
        session.request.return_value = make_response(
            200,
            {
                "access_token": "acc",
                "refresh_token": "ref",
                "expires_in": 3600,
                "user": {"id": "u1", "username": "alice", "role": "student"},
            },
        )

        result = AuthApi(auth_client, core_client=core).login("alice", "secret")

        assert result.user.role == "student"
        assert core.access_token == "acc"
        assert session.request.call_args.kwargs["json"] == {
            "username": "alice",
            "password": "secret",
        }

    def test_logout_clears_token(self, session, make_response) -> None:
        auth_client = ApiClient("http://auth.test", access_token="acc", session=session)
        core = ApiClient("http://core.test", access_token="acc", session=MagicMock())
        session.request.return_value = make_response(200)

        AuthApi(auth_client, core_client=core).logout()

        assert auth_client.access_token is None
        assert core.access_token is None

    def test_validate_token(self, session, make_response) -> None:
        auth_client = ApiClient("http://auth.test", access_token="acc", session=session)
        session.request.return_value = make_response(
            200, {"user": {"id": "u1", "username": "bob", "role": "teacher"}}
        )

        user = AuthApi(auth_client).validate_token()

        assert user.username == "bob"
        assert session.request.call_args.args[1] == "http://auth.test/api/v1/auth/validate"


# ── Datasets ─────────────────────────────────────────────────────────────────


class TestUploadFilename:
    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Cell Biology", "cell_biology.md"),
            ("Lab #3: DNA", "lab__3__dna.md"),
            ("Клетка", "______.md"),
        ],
    )
    def test_filename(self, title: str, expected: str) -> None:
        assert upload_filename(title) == expected


class TestDatasetApi:
    def test_list_datasets(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(
            200, {"datasets": [DATASET], "total": 1, "page": 2, "limit": 5}
        )

        result = DatasetApi(core_client).list_datasets(page=2, limit=5)

        assert result.datasets[0].title == "Cell biology"
        assert session.request.call_args.kwargs["params"] == {"page": 2, "limit": 5}

    def test_get_dataset(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(200, DATASET)
        assert DatasetApi(core_client).get_dataset("ds-1").content == DATASET["content"]

    def test_create_dataset_uploads_markdown(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(
            201,
            {"dataset_id": "ds-9", "title": "Cells", "created_at": "2025-01-01", "message": "ok"},
        )

        result = DatasetApi(core_client).create_dataset("Cells", "## A\nx", assignment_id="as-1")

        assert result.dataset_id == "ds-9"
        kwargs = session.request.call_args.kwargs
        assert kwargs["data"] == {"title": "Cells", "assignment_id": "as-1"}
        assert kwargs["files"]["file"] == ("cells.md", b"## A\nx", "text/markdown")

    def test_create_without_assignment(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(
            201, {"dataset_id": "ds-9", "title": "Cells", "created_at": "2025-01-01"}
        )

        DatasetApi(core_client).create_dataset("Cells", "x")

        assert "assignment_id" not in session.request.call_args.kwargs["data"]

    def test_update_dataset(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(200, DATASET)

        DatasetApi(core_client).update_dataset("ds-1", "New", "body")

        args, kwargs = session.request.call_args
        assert args == ("PUT", "http://core.test/api/v1/datasets/ds-1")
        assert kwargs["json"] == {"title": "New", "content": "body"}

    def test_reindex_and_delete(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(200)
        api = DatasetApi(core_client)

        api.reindex_dataset("ds-1")
        api.delete_dataset("ds-1")

        calls = [c.args for c in session.request.call_args_list]
        assert calls == [
            ("POST", "http://core.test/api/v1/datasets/ds-1/reindex"),
            ("DELETE", "http://core.test/api/v1/datasets/ds-1"),
        ]


# ── Saved chats ──────────────────────────────────────────────────────────────


class TestSavedChatApi:
    def test_create_chat(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(201, SAVED_CHAT)
        request = SaveChatRequest(
            title="Review", messages=[ChatExchange(question="q", answer="a")]
        )

        chat = SavedChatApi(core_client).create_chat("ds-1", request)

        assert chat.messages[0].question == "q"
        args, kwargs = session.request.call_args
        assert args[1] == "http://core.test/api/v1/datasets/ds-1/chats"
        assert kwargs["json"]["title"] == "Review"

    def test_delete_chat(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(200, {"success": True, "message": "gone"})
        assert SavedChatApi(core_client).delete_chat("chat-1").success is True

    def test_download_chat(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(200, body=b"# Review\n")
        assert SavedChatApi(core_client).download_chat("chat-1") == b"# Review\n"


# ── Topics ───────────────────────────────────────────────────────────────────


class TestTopicApi:
    def test_search_students(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(
            200, {"students": [{"id": "s1", "username": "alice"}], "total": 1}
        )

        students = TopicApi(core_client).search_students("ali")

        assert students == [StudentInfo(id="s1", username="alice")]
        assert session.request.call_args.kwargs["json"] == {"query": "ali"}

    def test_add_students(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(200, {"message": "ok", "added_count": 1})

        result = TopicApi(core_client).add_students(
            "t-1", [StudentInfo(id="s1", username="alice")]
        )

        assert result.added_count == 1
        assert session.request.call_args.kwargs["json"] == {
            "students": [{"id": "s1", "username": "alice"}]
        }

    def test_assigned_topics(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(
            200,
            {
                "assignments": [
                    {
                        "id": "a1",
                        "topic": {
                            "id": "t1",
                            "title": "Genetics",
                            "description": "",
                            "created_by": "Dr. Lee",
                            "created_at": "2025-01-01",
                            "updated_at": "2025-01-01",
                        },
                        "assignment_id": "as-1",
                        "assigned_at": "2025-01-02",
                        "has_dataset": True,
                    }
                ]
            },
        )

        result = TopicApi(core_client).get_assigned_topics()

        assert result.assignments[0].topic.title == "Genetics"

    def test_grant_permission(self, core_client, session, make_response) -> None:
        session.request.return_value = make_response(
            200,
            {
                "id": "p1",
                "teacher_id": "t9",
                "teacher_name": "Dr. Lee",
                "granted_by": "admin",
                "granted_at": "2025-01-01",
            },
        )

        permission = TopicApi(core_client).grant_dataset_permission(
            "ds-1", TeacherInfo(id="t9", username="Dr. Lee")
        )

        assert permission.teacher_id == "t9"
        assert session.request.call_args.kwargs["json"] == {
            "teacher_id": "t9",
            "teacher_name": "Dr. Lee",
        }


# ── Admin ────────────────────────────────────────────────────────────────────


class TestAdminApi:
    def test_get_stats(self, core_client, session, make_response) -> None:
        topics = {
            "topics": [
                _topic("t1", "Dr. Lee", [{"id": "s1", "username": "a"}, {"id": "s3", "username": "c"}]),
                _topic("t2", "Dr. Lee"),
                _topic("t3", "Dr. Kim", [{"id": "s2", "username": "b"}]),
            ],
            "total": 3,
            "page": 1,
            "limit": 1000,
            "pages": 1,
        }
        datasets = {
            "datasets": [DATASET, {**DATASET, "id": "ds-2", "user_id": "student-2"}],
            "total": 2,
            "page": 1,
            "limit": 1000,
        }
        session.request.side_effect = [make_response(200, topics), make_response(200, datasets)]

        stats = AdminApi(TopicApi(core_client), DatasetApi(core_client)).get_stats()

        assert stats.teachers_count == 2
        # student-1, student-2 from datasets; s1, s2, s3 from topics
        assert stats.students_count == 5
        assert stats.topics_count == 3
        assert stats.datasets_count == 2
