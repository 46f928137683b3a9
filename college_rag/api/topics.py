"""Topic, student assignment and dataset permission client."""

from college_rag.api.client import ApiClient
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
    TopicStudentsResponse,
)


class TopicApi:
    """Topic endpoints for all three roles.

    Students read their assignments, teachers create topics and assign
    students, admins list everything and manage dataset permissions.
    """

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # Student

    def get_assigned_topics(self) -> AssignedTopicsResponse:
        return AssignedTopicsResponse.model_validate(self._client.get("/api/v1/topics/assigned"))

    # Teacher

    def search_students(self, query: str) -> list[StudentInfo]:
        data = self._client.post("/api/v1/students/search", json={"query": query})
        return StudentSearchResponse.model_validate(data).students

    def create_topic(self, request: CreateTopicRequest) -> CreateTopicResponse:
        data = self._client.post("/api/v1/topics", json=request.model_dump())
        return CreateTopicResponse.model_validate(data)

    def list_my_topics(self, page: int = 1, limit: int = 20) -> TeacherTopicsResponse:
        data = self._client.get("/api/v1/topics", params={"page": page, "limit": limit})
        return TeacherTopicsResponse.model_validate(data)

    def get_topic(self, topic_id: str) -> TeacherTopic:
        return TeacherTopic.model_validate(self._client.get(f"/api/v1/topics/{topic_id}"))

    def add_students(self, topic_id: str, students: list[StudentInfo]) -> AddStudentsResponse:
        data = self._client.post(
            f"/api/v1/topics/{topic_id}/students",
            json={"students": [student.model_dump() for student in students]},
        )
        return AddStudentsResponse.model_validate(data)

    def get_topic_students(self, topic_id: str) -> TopicStudentsResponse:
        data = self._client.get(f"/api/v1/topics/{topic_id}/students")
        return TopicStudentsResponse.model_validate(data)

    # Admin

    def list_all_topics(self, page: int = 1, limit: int = 20) -> TeacherTopicsResponse:
        data = self._client.get("/api/v1/topics/all", params={"page": page, "limit": limit})
        return TeacherTopicsResponse.model_validate(data)

    def delete_topic(self, topic_id: str) -> None:
        self._client.delete(f"/api/v1/topics/{topic_id}")

    def search_teachers(self, query: str) -> list[TeacherInfo]:
        data = self._client.post("/api/v1/teachers/search", json={"query": query})
        return TeacherSearchResponse.model_validate(data).teachers

    def list_dataset_permissions(self, dataset_id: str) -> list[DatasetPermission]:
        data = self._client.get(f"/api/v1/datasets/{dataset_id}/permissions")
        return DatasetPermissionsResponse.model_validate(data).permissions

    def list_all_permissions(self) -> DatasetPermissionsResponse:
        return DatasetPermissionsResponse.model_validate(
            self._client.get("/api/v1/permissions")
        )

    def grant_dataset_permission(self, dataset_id: str, teacher: TeacherInfo) -> DatasetPermission:
        data = self._client.post(
            f"/api/v1/datasets/{dataset_id}/permissions",
            json={"teacher_id": teacher.id, "teacher_name": teacher.username},
        )
        return DatasetPermission.model_validate(data)

    def revoke_dataset_permission(self, dataset_id: str, teacher_id: str) -> None:
        self._client.delete(f"/api/v1/datasets/{dataset_id}/permissions/{teacher_id}")
