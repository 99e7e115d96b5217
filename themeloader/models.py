"""Pydantic models for search paths and host theme directories."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

PathLike = Union[str, Path]


def trailingslashit(value: PathLike) -> str:
    """Return ``value`` with exactly one trailing separator."""

    return str(value).rstrip("/\\") + "/"


class PathEntry(BaseModel):
    priority: int
    path: str

    model_config = ConfigDict(frozen=True)


class ThemeDirectories(BaseModel):
    """Theme roots reported by the host.

    ``stylesheet_directory`` is the active (possibly child) theme and
    ``template_directory`` the theme providing the templates. They only
    differ while a child theme is active.
    """

    template_directory: Path
    stylesheet_directory: Optional[Path] = Field(
        default=None,
        description="Child theme root; defaults to the template directory.",
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _default_stylesheet(cls, data: object) -> object:
        if isinstance(data, dict) and data.get("stylesheet_directory") is None:
            data = {**data, "stylesheet_directory": data.get("template_directory")}
        return data

    @property
    def is_child_theme(self) -> bool:
        return trailingslashit(self.stylesheet_directory) != trailingslashit(self.template_directory)
