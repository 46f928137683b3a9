"""Topic, assignment and permission data models."""

from pydantic import BaseModel, Field


class Topic(BaseModel):
    id: str
    title: str
    description: str = ""
    created_by: str
    created_at: str
    updated_at: str


class TopicWithAssignment(BaseModel):
    """A topic as seen by the student it was assigned to."""

    id: str
    topic: Topic
    assignment_id: str
    assigned_at: str
    has_dataset: bool = False


class AssignedTopicsResponse(BaseModel):
    assignments: list[TopicWithAssignment] = Field(default_factory=list)


class StudentInfo(BaseModel):
    id: str
    username: str


class StudentSearchResponse(BaseModel):
    students: list[StudentInfo] = Field(default_factory=list)
    total: int = 0


class CreateTopicRequest(BaseModel):
    title: str
    description: str = ""
    students: list[StudentInfo] = Field(default_factory=list)


class CreateTopicResponse(BaseModel):
    id: str
    title: str
    description: str = ""
    created_at: str
    message: str = ""


class TeacherTopic(BaseModel):
    """A topic as seen by the teacher who created it."""

    id: str
    title: str
    description: str = ""
    created_by: str
    created_by_id: str
    created_at: str
    updated_at: str
    student_count: int | None = None
    students: list[StudentInfo] | None = None


class TeacherTopicsResponse(BaseModel):
    topics: list[TeacherTopic] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20
    pages: int = 1


class AddStudentsResponse(BaseModel):
    message: str = ""
    added_count: int = 0


class TopicStudent(BaseModel):
    id: str
    student: StudentInfo
    assigned_at: str


class TopicStudentsResponse(BaseModel):
    students: list[TopicStudent] = Field(default_factory=list)


class TeacherInfo(BaseModel):
    id: str
    username: str


class TeacherSearchResponse(BaseModel):
    teachers: list[TeacherInfo] = Field(default_factory=list)
    total: int = 0


class DatasetPermission(BaseModel):
    """A teacher's read grant on a student dataset."""

    id: str
    dataset_id: str | None = None
    dataset_title: str | None = None
    teacher_id: str
    teacher_name: str
    granted_by: str
    granted_at: str


class DatasetPermissionsResponse(BaseModel):
    permissions: list[DatasetPermission] = Field(default_factory=list)
    total: int = 0
