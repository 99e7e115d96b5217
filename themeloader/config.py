"""Loader configuration models and helpers."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoaderSettings(BaseSettings):
    """Directory names and hook prefix for one plugin's template loader."""

    filter_prefix: str = Field(
        default="your_plugin",
        min_length=1,
        description="Prefix for hook names fired and applied by the loader.",
    )
    theme_template_directory: str = Field(
        default="plugin-templates",
        description="Directory inside a theme where template overrides live.",
    )
    plugin_directory: str = Field(
        default=".",
        description="Root directory of the plugin shipping the default templates.",
    )
    plugin_template_directory: str = Field(
        default="templates",
        description="Directory inside the plugin holding its templates.",
    )
    template_extension: str = Field(
        default=".php",
        description="Suffix appended to slugs when building template file names.",
    )

    model_config = SettingsConfigDict(
        env_prefix="themeloader_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> LoaderSettings:
    """Return cached settings instance built from the environment."""

    return LoaderSettings()
