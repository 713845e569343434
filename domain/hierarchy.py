from collections.abc import Sequence
from typing import Literal, get_args

from core.errors import RoleReferenceError, StateError, TypeConditionError
from core.logger import logger
from core.settings import settings
from domain.entities import ROOT_PARENT, Role, RoleIndexEntry, User

DanglingParentPolicy = Literal['stop', 'raise']


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class HierarchyIndex:
    """
    Индекс иерархии ролей для поиска подчинённых пользователя.

    Принципы:
    - roles: ID роли -> RoleIndexEntry, children содержит ВСЕХ потомков роли
    - users: последовательность пользователей, хранится по ссылке (без копии)
    - None означает, что данные ещё не загружены

    Использование:
        index = HierarchyIndex()
        index.load_roles(roles)
        index.load_users(users)
        subordinates = index.get_subordinates(user_id)
    """

    def __init__(self, dangling_parent: DanglingParentPolicy | None = None):
        self.roles: dict[int, RoleIndexEntry] | None = None
        self.users: Sequence[User] | None = None
        if dangling_parent is None:
            dangling_parent = settings.ROLE_DANGLING_PARENT
        if dangling_parent not in get_args(DanglingParentPolicy):
            logger.error(f'HierarchyIndex: неизвестная политика dangling_parent={dangling_parent!r}')
            raise ValueError(f'dangling_parent должен быть одним из {get_args(DanglingParentPolicy)}')
        self.dangling_parent = dangling_parent

    def load_roles(self, roles: Sequence[Role]) -> None:
        """Построить индекс ролей. Предыдущий индекс заменяется целиком."""
        if not _is_sequence(roles):
            logger.error(f'load_roles: ожидалась последовательность, получено {type(roles).__name__}')
            raise TypeConditionError('roles должен быть последовательностью')

        if not roles:
            self.roles = {}
            logger.info('Индекс ролей очищен (пустой список ролей)')
            return

        # При дублировании ID побеждает последняя роль
        index = {role.id: RoleIndexEntry(role=role) for role in roles}

        # Каждая роль добавляет свой ID во всех предков вплоть до корня.
        # Обход циклом, а не рекурсией
        for role in roles:
            current_parent = role.parent
            while current_parent != ROOT_PARENT:
                parent_entry = index.get(current_parent)
                if parent_entry is None:
                    if self.dangling_parent == 'raise':
                        logger.error(f'Роль ID={role.id}: родитель ID={current_parent} не найден')
                        raise RoleReferenceError(role.id, current_parent)
                    logger.warning(
                        f'Роль ID={role.id}: родитель ID={current_parent} не найден, подъём остановлен'
                    )
                    break

                parent_entry.children.append(role.id)
                current_parent = parent_entry.role.parent

        self.roles = index
        logger.info(f'Индекс ролей построен. Ролей: {len(index)}')

    def load_users(self, users: Sequence[User]) -> None:
        """Сохранить пользователей. Последовательность не копируется."""
        if not _is_sequence(users):
            logger.error(f'load_users: ожидалась последовательность, получено {type(users).__name__}')
            raise TypeConditionError('users должен быть последовательностью')

        self.users = users
        logger.info(f'Пользователи загружены. Количество: {len(users)}')

    def descendants(self, role_id: int) -> list[int]:
        """ID всех ролей ниже role_id. Для неизвестной роли — пустой список."""
        if self.roles is None:
            raise StateError('load_roles не вызван до запроса потомков роли')

        entry = self.roles.get(role_id)
        return list(entry.children) if entry else []

    def get_user(self, user_id: int) -> User | None:
        if self.users is None:
            raise StateError('load_users не вызван до поиска пользователя')

        return next((user for user in self.users if user.id == user_id), None)

    def get_subordinates(self, user_id: int) -> list[User]:
        """Пользователи, чья роль находится ниже роли user_id (в порядке загрузки)."""
        if self.roles is None:
            logger.error('get_subordinates вызван до load_roles')
            raise StateError('load_roles не вызван до get_subordinates')
        if self.users is None:
            logger.error('get_subordinates вызван до load_users')
            raise StateError('load_users не вызван до get_subordinates')

        top_user = self.get_user(user_id)
        if top_user is None:
            logger.debug(f'Пользователь ID={user_id} не найден, подчинённых нет')
            return []

        subordinate_roles = set(self.descendants(top_user.role))
        if not subordinate_roles:
            return []

        subordinates = [user for user in self.users if user.role in subordinate_roles]
        logger.debug(f'Пользователь ID={user_id}: подчинённых {len(subordinates)}')
        return subordinates
