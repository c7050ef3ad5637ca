"""Task service - Business logic for task operations."""

from __future__ import annotations

from worklog_cli.models import Task, TaskCreate, TaskUpdate
from worklog_cli.models.exceptions import AmbiguousSpecificationError, NotFoundError
from worklog_cli.repositories import TaskRepository
from worklog_cli.utils.logger import get_logger


class TaskService:
    """Service for task business logic."""

    def __init__(self, task_repository: TaskRepository):
        self.repository = task_repository

    async def find_task(
        self, project_id: int, issue: int | None = None, name: str | None = None
    ) -> Task | None:
        return await self.repository.find(project_id, issue, name)

    async def create_task(
        self,
        project_id: int,
        name: str,
        issue: int | None = None,
        description: str | None = None,
    ) -> Task:
        task = await self.repository.create(
            TaskCreate(
                project_id=project_id, name=name, issue=issue, description=description
            )
        )
        get_logger("tasks").info("created task %d in project %d", task.id, project_id)
        return task

    async def get_or_create(
        self, project_id: int, issue: int | None, name: str
    ) -> Task:
        """Return the matching task, creating it when nothing matches."""
        task = await self.find_task(project_id, issue, name)
        if task is None:
            task = await self.create_task(project_id, name, issue)
        return task

    async def update_task(
        self,
        project_id: int,
        task_id: int,
        name: str | None = None,
        issue: int | None = None,
        clear_issue: bool = False,
    ) -> Task:
        """Rename a task or change its issue number.

        Raises:
            AmbiguousSpecificationError: If an issue is both set and removed
            NotFoundError: If the task does not belong to the project
        """
        if issue is not None and clear_issue:
            raise AmbiguousSpecificationError(
                "--set-issue and --remove-issue cannot be used together"
            )
        task = await self.repository.get(task_id)
        if task.project_id != project_id:
            raise NotFoundError(f"Task {task_id} doesn't belong to project {project_id}")
        return await self.repository.update(
            task_id, TaskUpdate(name=name, issue=issue, clear_issue=clear_issue)
        )

    async def list_tasks(self, project_id: int) -> list[Task]:
        return await self.repository.list_all(project_id)

    async def search_tasks(self, project_id: int, query: str) -> list[Task]:
        return await self.repository.search(project_id, query)


def get_task_service() -> TaskService:
    """Factory function to get a TaskService instance."""
    from worklog_cli.adapters.sqlite.task_repository import SqliteTaskRepository
    from worklog_cli.services.config_service import get_config_service

    config = get_config_service().config
    return TaskService(SqliteTaskRepository(db_path=config.data_path))
