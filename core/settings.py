from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === Логирование ===
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: str = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

    # === Иерархия ролей ===
    # stop  — прервать подъём по цепочке на отсутствующем родителе
    # raise — RoleReferenceError
    ROLE_DANGLING_PARENT: Literal['stop', 'raise'] = 'stop'

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,  # В .env можно использовать как верхний, так и нижний регистр
    )


# Singleton - Единственный экземпляр настроек на всё приложение
settings = Settings()
