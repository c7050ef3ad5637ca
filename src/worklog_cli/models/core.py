"""Work-log domain models."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class Project(BaseModel):
    """Project model representing a tracked project.

    Attributes:
        id: Unique identifier for the project
        url: Project home page or issue tracker URL
        name: Optional display name (unique when present)
        created_at: Creation timestamp
    """

    id: int
    url: str
    name: str | None = None
    created_at: datetime | None = None

    @property
    def label(self) -> str:
        return self.name or self.url


class ProjectCreate(BaseModel):
    """Model for creating a new project."""

    url: str = Field(min_length=1)
    name: str | None = None


class Task(BaseModel):
    """Task model; time is always logged against a task.

    Attributes:
        id: Unique identifier for the task
        project_id: Owning project
        name: Task name
        issue: Optional issue number in the project's tracker
        description: Optional free-form description
    """

    id: int
    project_id: int
    name: str
    issue: int | None = None
    description: str | None = None


class TaskCreate(BaseModel):
    """Model for creating a new task."""

    project_id: int
    name: str = Field(min_length=1)
    issue: int | None = None
    description: str | None = None


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    ``clear_issue`` removes the issue number; it cannot be combined with
    ``issue``.
    """

    name: str | None = None
    issue: int | None = None
    clear_issue: bool = False


class LogEntry(BaseModel):
    """Minutes spent on one task on one date."""

    date: date
    task_id: int
    duration_minutes: int = Field(ge=0)


class LogEntryExpanded(BaseModel):
    """Log entry joined with its task, as shown in reports."""

    task_id: int
    task_name: str
    issue: int | None = None
    date: date
    duration_minutes: int


class TaskTotal(BaseModel):
    """Minutes aggregated per task over a period."""

    task_id: int
    task_name: str
    issue: int | None = None
    duration_minutes: int
