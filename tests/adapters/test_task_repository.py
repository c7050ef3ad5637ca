"""Unit tests for SqliteTaskRepository."""

from __future__ import annotations

import pytest

from worklog_cli.adapters.sqlite.task_repository import SqliteTaskRepository
from worklog_cli.models import TaskCreate, TaskUpdate
from worklog_cli.models.exceptions import NotFoundError


@pytest.fixture
def repo(db):
    return SqliteTaskRepository(connection=db)


async def _create(repo, project_id, name, issue=None, description=None):
    return await repo.create(
        TaskCreate(project_id=project_id, name=name, issue=issue, description=description)
    )


class TestFind:
    @pytest.mark.asyncio
    async def test_nothing_to_match(self, repo, project_id):
        await _create(repo, project_id, "Review")
        assert await repo.find(project_id, None, None) is None

    @pytest.mark.asyncio
    async def test_name_prefers_task_without_issue(self, repo, project_id):
        await _create(repo, project_id, "Review", issue=7)
        plain = await _create(repo, project_id, "Review")

        assert (await repo.find(project_id, None, "Review")).id == plain.id

    @pytest.mark.asyncio
    async def test_name_falls_back_to_task_with_issue(self, repo, project_id):
        with_issue = await _create(repo, project_id, "Review", issue=7)

        assert (await repo.find(project_id, None, "Review")).id == with_issue.id

    @pytest.mark.asyncio
    async def test_issue_only_takes_first(self, repo, project_id):
        first = await _create(repo, project_id, "Billing", issue=42)
        await _create(repo, project_id, "Billing follow-up", issue=42)

        assert (await repo.find(project_id, 42, None)).id == first.id

    @pytest.mark.asyncio
    async def test_issue_and_name_must_both_match(self, repo, project_id):
        await _create(repo, project_id, "Billing", issue=42)

        assert await repo.find(project_id, 42, "Other") is None
        assert await repo.find(project_id, 43, "Billing") is None
        assert (await repo.find(project_id, 42, "Billing")).name == "Billing"

    @pytest.mark.asyncio
    async def test_other_project_is_ignored(self, repo, db, project_id):
        cursor = db.execute(
            "INSERT INTO projects (url, created_at) VALUES ('other', '2024-01-01T00:00:00')"
        )
        await _create(repo, cursor.lastrowid, "Review")

        assert await repo.find(project_id, None, "Review") is None


class TestUpdate:
    @pytest.mark.asyncio
    async def test_rename(self, repo, project_id):
        task = await _create(repo, project_id, "Revew", issue=3)

        updated = await repo.update(task.id, TaskUpdate(name="Review"))

        assert updated.name == "Review"
        assert updated.issue == 3

    @pytest.mark.asyncio
    async def test_set_and_clear_issue(self, repo, project_id):
        task = await _create(repo, project_id, "Review")

        assert (await repo.update(task.id, TaskUpdate(issue=9))).issue == 9
        assert (await repo.update(task.id, TaskUpdate(clear_issue=True))).issue is None

    @pytest.mark.asyncio
    async def test_missing_task(self, repo):
        with pytest.raises(NotFoundError):
            await repo.update(404, TaskUpdate(name="x"))


class TestListAndSearch:
    @pytest.mark.asyncio
    async def test_list_all(self, repo, project_id):
        await _create(repo, project_id, "One")
        await _create(repo, project_id, "Two", description="second")

        tasks = await repo.list_all(project_id)
        assert [t.name for t in tasks] == ["One", "Two"]
        assert tasks[1].description == "second"

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, repo, project_id):
        await _create(repo, project_id, "Billing export")
        await _create(repo, project_id, "Code review")

        assert [t.name for t in await repo.search(project_id, "EXPORT")] == [
            "Billing export"
        ]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, repo, project_id):
        await _create(repo, project_id, "100% coverage")
        await _create(repo, project_id, "1000 users")

        assert [t.name for t in await repo.search(project_id, "0%")] == ["100% coverage"]
