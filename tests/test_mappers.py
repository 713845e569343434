import pytest
from pydantic import ValidationError

from domain.entities import Role, Schedule, User
from domain.hierarchy import HierarchyIndex
from presentation.dto import RoleRecord, ScheduleRecord, UserRecord
from presentation.mappers import (
    RoleMapper,
    ScheduleMapper,
    UserMapper,
    index_to_records,
    roles_from_raw,
    schedule_from_raw,
    users_from_raw,
)


class TestRecords:
    def test_role_record_aliases(self) -> None:
        record = RoleRecord.model_validate({'Id': 2, 'Name': 'Location Manager', 'Parent': 1})
        assert RoleMapper.to_domain(record) == Role(id=2, name='Location Manager', parent=1)

    def test_role_parent_required(self) -> None:
        with pytest.raises(ValidationError):
            RoleRecord.model_validate({'Id': 1, 'Name': 'System Administrator'})

    def test_user_record_ignores_unknown_keys(self) -> None:
        record = UserRecord.model_validate({'Id': 1, 'Name': 'Adam Admin', 'Role': 1, 'Email': 'a@b.c'})
        assert UserMapper.to_domain(record) == User(id=1, name='Adam Admin', role=1)

    def test_schedule_with_department(self) -> None:
        schedule = schedule_from_raw({
            'Id': 1,
            'Employee': 1,
            'Department': 1,
            'StartTime': 1458165600,
            'EndTime': 1458194400,
        })
        assert schedule == Schedule(id=1, employee=1, start_time=1458165600, end_time=1458194400)
        assert 'department' not in ScheduleRecord.model_fields

    def test_invalid_record(self) -> None:
        with pytest.raises(ValidationError):
            roles_from_raw([{'Id': 'one', 'Name': 'Broken'}])

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            users_from_raw([{'Id': 1, 'Name': 'No role'}])


class TestToRecord:
    def test_role_dump_by_alias(self) -> None:
        record = RoleMapper.to_record(Role(id=3, name='Supervisor', parent=2))
        assert record.model_dump(by_alias=True) == {'Id': 3, 'Name': 'Supervisor', 'Parent': 2}

    def test_user_dump_by_alias(self) -> None:
        record = UserMapper.to_record(User(id=5, name='Steve Trainer', role=5))
        assert record.model_dump(by_alias=True) == {'Id': 5, 'Name': 'Steve Trainer', 'Role': 5}

    def test_schedule_dump_by_alias(self) -> None:
        record = ScheduleMapper.to_record(Schedule(id=1, employee=2, start_time=10, end_time=20))
        assert record.model_dump(by_alias=True) == {
            'Id': 1,
            'Employee': 2,
            'StartTime': 10,
            'EndTime': 20,
        }


class TestFixtures:
    def test_fixture_roles(self, fixture_roles) -> None:
        assert [role.id for role in fixture_roles] == [1, 2, 3, 4, 5]
        assert fixture_roles[0].is_root

    def test_fixture_users(self, fixture_users) -> None:
        assert [user.role for user in fixture_users] == [1, 4, 3, 2, 5]

    def test_index_to_records(self, loaded_index: HierarchyIndex) -> None:
        records = index_to_records(loaded_index.roles)

        assert records[3].model_dump(by_alias=True) == {
            'role': {'Id': 3, 'Name': 'Supervisor', 'Parent': 2},
            'children': [4, 5],
        }
        assert records[1].children == [2, 3, 4, 5]

    def test_index_to_records_empty(self) -> None:
        assert index_to_records({}) == {}
