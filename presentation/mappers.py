from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import TypeAdapter

import domain.entities as domain
import presentation.dto as dto

_roles_adapter = TypeAdapter(list[dto.RoleRecord])
_users_adapter = TypeAdapter(list[dto.UserRecord])


class RoleMapper:
    @staticmethod
    def to_domain(record: dto.RoleRecord) -> domain.Role:
        return domain.Role(
            id=record.id,
            name=record.name,
            parent=record.parent,
        )

    @staticmethod
    def to_record(entity: domain.Role) -> dto.RoleRecord:
        return dto.RoleRecord(
            id=entity.id,
            name=entity.name,
            parent=entity.parent,
        )


class UserMapper:
    @staticmethod
    def to_domain(record: dto.UserRecord) -> domain.User:
        return domain.User(
            id=record.id,
            name=record.name,
            role=record.role,
        )

    @staticmethod
    def to_record(entity: domain.User) -> dto.UserRecord:
        return dto.UserRecord(
            id=entity.id,
            name=entity.name,
            role=entity.role,
        )


class ScheduleMapper:
    @staticmethod
    def to_domain(record: dto.ScheduleRecord) -> domain.Schedule:
        return domain.Schedule(
            id=record.id,
            employee=record.employee,
            start_time=record.start_time,
            end_time=record.end_time,
        )

    @staticmethod
    def to_record(entity: domain.Schedule) -> dto.ScheduleRecord:
        return dto.ScheduleRecord(
            id=entity.id,
            employee=entity.employee,
            start_time=entity.start_time,
            end_time=entity.end_time,
        )


def roles_from_raw(items: Iterable[Mapping[str, Any]]) -> list[domain.Role]:
    """Плоские записи {Id, Name, Parent} -> доменные роли."""
    return [RoleMapper.to_domain(r) for r in _roles_adapter.validate_python(list(items))]


def users_from_raw(items: Iterable[Mapping[str, Any]]) -> list[domain.User]:
    """Плоские записи {Id, Name, Role} -> доменные пользователи."""
    return [UserMapper.to_domain(u) for u in _users_adapter.validate_python(list(items))]


def schedule_from_raw(item: Mapping[str, Any]) -> domain.Schedule:
    return ScheduleMapper.to_domain(dto.ScheduleRecord.model_validate(item))


def index_to_records(index: Mapping[int, domain.RoleIndexEntry]) -> dict[int, dto.RoleIndexEntryResponse]:
    """Индекс ролей в виде DTO (например, для сериализации в JSON)."""
    return {
        role_id: dto.RoleIndexEntryResponse(
            role=RoleMapper.to_record(entry.role),
            children=list(entry.children),
        )
        for role_id, entry in index.items()
    }
