from core.errors import TypeConditionError
from core.logger import logger
from domain.entities import Schedule


def is_overlapping(first: Schedule, second: Schedule) -> bool:
    """Пересекаются ли смены одного сотрудника.

    Интервалы [start_time, end_time] закрытые с обеих сторон.
    Смена с тем же ID считается пересекающейся сама с собой.
    """
    # Поверхностная проверка: поля записи не валидируются
    if not isinstance(first, Schedule):
        logger.error(f'is_overlapping: первый аргумент не Schedule ({type(first).__name__})')
        raise TypeConditionError('Первый аргумент не является записью Schedule')
    if not isinstance(second, Schedule):
        logger.error(f'is_overlapping: второй аргумент не Schedule ({type(second).__name__})')
        raise TypeConditionError('Второй аргумент не является записью Schedule')

    if first.employee != second.employee:
        return False

    if first.id == second.id:
        return True

    # Начало first внутри second (в т.ч. одинаковое начало)
    if second.start_time <= first.start_time <= second.end_time:
        return True

    # Начало second внутри first
    return first.start_time < second.start_time <= first.end_time
