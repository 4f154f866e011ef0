# region Docstring
"""
clipstash.config.factory
Settings base class with layered YAML/.env/environment sources, and a cached factory.
Overview:
- FactoryBaseSettings extends pydantic-settings' BaseSettings so every settings
    class reads the same sources in the same priority order.
- get_settings() instantiates a settings class once and caches it.
Contents:
- Classes:
    - FactoryBaseSettings:
        Configuration Priority (highest to lowest):
            1. Environment variables
            2. .env file in APP_ROOT
            3. YAML files (config.{APP_ENV}.yaml, then config.yaml in APP_ROOT)
            4. Init kwargs
            5. Field defaults
- Functions:
    - get_settings(settings_cls: Type[T]) -> T:
        LRU-cached factory; call get_settings.cache_clear() after changing the
        environment (tests do this).
"""
# endregion
# region Imports
from functools import lru_cache
from typing import Type, TypeVar

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .base import APP_ENV, APP_ROOT

# endregion
# region FactoryBaseSettings Class
T = TypeVar("T", bound=BaseSettings)


class FactoryBaseSettings(BaseSettings):
    """
    BaseSettings that also reads YAML config files from the application root.
    Priority: Env Vars > .env > YAML (Env specific) > YAML (Default) > Defaults
    """

    model_config = SettingsConfigDict(
        env_file=APP_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Later files in the list override earlier ones.
        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=[APP_ROOT / "config.yaml", APP_ROOT / f"config.{APP_ENV}.yaml"],
        )
        return (
            env_settings,
            dotenv_settings,
            yaml_settings,
            init_settings,
        )


# endregion
# region get_settings Factory Function


@lru_cache
def get_settings(settings_cls: Type[T]) -> T:
    """
    Factory function to load any settings class.
    Results are cached so config files are read once per class.
    """
    return settings_cls()


# endregion
