from __future__ import annotations

import pytest

from taskboard.container import wire
from taskboard.main import create_app

from fakes import InMemoryEmployees, InMemoryTasks


@pytest.fixture()
def tasks_repo() -> InMemoryTasks:
    return InMemoryTasks()


@pytest.fixture()
def employees_repo(tasks_repo: InMemoryTasks) -> InMemoryEmployees:
    return InMemoryEmployees(tasks_repo)


@pytest.fixture()
def container(tasks_repo, employees_repo):
    return wire(employees_repo=employees_repo, tasks_repo=tasks_repo)


@pytest.fixture()
def app(container):
    app = create_app(container, settings_module="taskboard.config.testing")
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
