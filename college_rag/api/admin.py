"""Admin dashboard figures derived from the core API listings."""

import logging

from pydantic import BaseModel

from college_rag.api.datasets import DatasetApi
from college_rag.api.topics import TopicApi

logger = logging.getLogger(__name__)

# Large enough to see every record of a single college deployment
STATS_PAGE_LIMIT = 1000


class AdminStats(BaseModel):
    teachers_count: int = 0
    students_count: int = 0
    topics_count: int = 0
    datasets_count: int = 0


class AdminApi:
    def __init__(self, topics: TopicApi, datasets: DatasetApi) -> None:
        self._topics = topics
        self._datasets = datasets

    def get_stats(self) -> AdminStats:
        """Count teachers, students, topics and datasets.

        Teachers are counted by distinct topic author. Students are the
        distinct dataset owners plus every student assigned to a topic,
        since a student may not have written a dataset yet.
        """
        topics = self._topics.list_all_topics(page=1, limit=STATS_PAGE_LIMIT)
        datasets = self._datasets.list_datasets(page=1, limit=STATS_PAGE_LIMIT)

        teacher_names = {topic.created_by for topic in topics.topics}
        student_ids = {dataset.user_id for dataset in datasets.datasets}
        for topic in topics.topics:
            student_ids.update(student.id for student in topic.students or [])

        if topics.total > len(topics.topics) or datasets.total > len(datasets.datasets):
            logger.warning("Admin stats computed from a partial listing")

        return AdminStats(
            teachers_count=len(teacher_names),
            students_count=len(student_ids),
            topics_count=topics.total,
            datasets_count=datasets.total,
        )
