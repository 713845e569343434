from __future__ import annotations

from dataclasses import dataclass, field

# Parent корневой роли
ROOT_PARENT = 0


@dataclass
class Schedule:
    """Смена сотрудника (время в unix-секундах)"""

    id: int
    employee: int
    start_time: int
    end_time: int


@dataclass
class Role:
    """Роль в оргструктуре"""

    id: int
    name: str
    parent: int

    @property
    def is_root(self) -> bool:
        return self.parent == ROOT_PARENT


@dataclass
class User:
    """Пользователь с назначенной ролью"""

    id: int
    name: str
    role: int


@dataclass
class RoleIndexEntry:
    """Роль и ID всех её потомков (не только прямых)"""

    role: Role
    children: list[int] = field(default_factory=list)
