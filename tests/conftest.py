"""Global test fixtures."""

import json
from pathlib import Path

import pytest

from domain.entities import Role, Schedule, User
from domain.hierarchy import HierarchyIndex
from presentation.mappers import roles_from_raw, users_from_raw

FIXTURES = Path(__file__).parent / 'fixtures'


def _load(name: str) -> list[dict]:
    return json.loads((FIXTURES / name).read_text(encoding='utf-8'))


@pytest.fixture
def index() -> HierarchyIndex:
    return HierarchyIndex()


@pytest.fixture
def fixture_roles() -> list[Role]:
    return roles_from_raw(_load('roles.json'))


@pytest.fixture
def fixture_users() -> list[User]:
    return users_from_raw(_load('users.json'))


@pytest.fixture
def loaded_index(index: HierarchyIndex, fixture_roles, fixture_users) -> HierarchyIndex:
    index.load_users(fixture_users)
    index.load_roles(fixture_roles)
    return index


@pytest.fixture
def make_schedule():
    def _make(id: int, employee: int = 1, start_time: int = 1458165600, end_time: int = 1458194400) -> Schedule:
        return Schedule(id=id, employee=employee, start_time=start_time, end_time=end_time)

    return _make
