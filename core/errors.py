class HierarchyError(Exception):
    """Базовая ошибка библиотеки."""


class TypeConditionError(HierarchyError, TypeError):
    """Аргумент имеет неверную форму (не запись, не последовательность)."""


class StateError(HierarchyError, RuntimeError):
    """Запрос выполнен до загрузки необходимых данных."""


class RoleReferenceError(HierarchyError, LookupError):
    """Parent роли ссылается на роль, которой нет среди загруженных."""

    def __init__(self, role_id: int, parent_id: int):
        self.role_id = role_id
        self.parent_id = parent_id
        super().__init__(f'Роль ID={role_id}: родительская роль ID={parent_id} не найдена')
