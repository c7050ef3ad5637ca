"""Project service - Business logic for project operations."""

from __future__ import annotations

from worklog_cli.models import Project, ProjectCreate
from worklog_cli.repositories import ProjectRepository
from worklog_cli.utils.logger import get_logger


class ProjectService:
    """Service for project business logic."""

    def __init__(self, project_repository: ProjectRepository):
        self.repository = project_repository

    async def list_projects(self) -> list[Project]:
        return await self.repository.list_all()

    async def get_project(self, project_id: int) -> Project:
        return await self.repository.get(project_id)

    async def create_project(self, url: str, name: str | None = None) -> Project:
        """Create a new project.

        The first project ever created becomes the default one.
        """
        project = await self.repository.create(ProjectCreate(url=url, name=name))
        get_logger("projects").info("created project %d (%s)", project.id, project.url)
        if await self.repository.get_default() is None:
            await self.repository.set_default(project.id)
        return project

    async def get_default_project(self) -> Project | None:
        return await self.repository.get_default()

    async def set_default_project(self, project_id: int) -> Project:
        await self.repository.set_default(project_id)
        get_logger("projects").info("default project set to %d", project_id)
        return await self.repository.get(project_id)


def get_project_service() -> ProjectService:
    """Factory function to get a ProjectService instance."""
    from worklog_cli.adapters.sqlite.project_repository import SqliteProjectRepository
    from worklog_cli.services.config_service import get_config_service

    config = get_config_service().config
    return ProjectService(SqliteProjectRepository(db_path=config.data_path))
