"""Locate plugin templates with child theme and parent theme overrides."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import TypeAdapter

from .config import LoaderSettings, get_settings
from .context import DEFAULT_VAR_NAME, TemplateContext, TemplateDataHandle, as_template_object
from .hooks import HookRegistry, Hooks
from .includer import TemplateIncluder
from .models import PathEntry, ThemeDirectories, trailingslashit

logger = logging.getLogger(__name__)

CHILD_THEME_PRIORITY = 1
THEME_PRIORITY = 10
PLUGIN_PRIORITY = 100

_TEMPLATE_PATHS = TypeAdapter(Dict[int, Union[str, Path]])

TemplateNames = Union[str, Sequence[str]]


class TemplateLoader:
    """Find the highest priority template file for a plugin.

    Templates are looked up in the child theme (when one is active), then
    the parent theme and finally the plugin's own template directory, so a
    theme can override any single template the plugin ships.

    Located paths are cached per instance under the first requested file
    name and are never re-checked against the file system. Lookups that
    find nothing are not cached.
    """

    def __init__(
        self,
        theme: ThemeDirectories,
        *,
        settings: Optional[LoaderSettings] = None,
        hooks: Optional[Hooks] = None,
        context: Optional[TemplateContext] = None,
        includer: Optional[TemplateIncluder] = None,
    ) -> None:
        self.theme = theme
        self.settings = settings or get_settings()
        self.hooks: Hooks = hooks or HookRegistry()
        self.context = context if context is not None else TemplateContext()
        self.includer = includer or TemplateIncluder()
        self._template_path_cache: Dict[str, str] = {}
        self._template_data_var_names: Dict[str, None] = {DEFAULT_VAR_NAME: None}

    @property
    def filter_prefix(self) -> str:
        return self.settings.filter_prefix

    def __enter__(self) -> "TemplateLoader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unset_template_data()

    def get_template_part(self, slug: str, name: Optional[str] = None, load: bool = True) -> Optional[str]:
        """Return the path of the template part for ``slug`` and ``name``.

        The part is included on every call when ``load`` is true.
        """

        self.hooks.do_action(f"get_template_part_{slug}", slug, name)
        self.hooks.do_action(f"{self.filter_prefix}_get_template_part_{slug}", slug, name)

        templates = self.get_template_file_names(slug, name)
        return self.locate_template(templates, load, False)

    def set_template_data(self, data: Any, var_name: str = DEFAULT_VAR_NAME) -> "TemplateLoader":
        """Expose ``data`` to templates under ``var_name``.

        A value given as ``{"foo": 1}`` is read in the template as
        ``data.foo``; keys that are not identifiers need ``getattr``.
        """

        self._publish(data, var_name)
        return self

    def publish_template_data(self, data: Any, var_name: str = DEFAULT_VAR_NAME) -> TemplateDataHandle:
        """Like :meth:`set_template_data`, returning a handle that restores the previous value."""

        handle = self.context.push(var_name, as_template_object(data))
        self._template_data_var_names.setdefault(var_name)
        return handle

    def unset_template_data(self) -> "TemplateLoader":
        """Remove every variable published through this loader."""

        for var_name in self._template_data_var_names:
            if var_name in self.context:
                self.context.discard(var_name)
        return self

    def get_template_file_names(self, slug: str, name: Optional[str] = None) -> List[str]:
        extension = self.settings.template_extension
        templates = []
        if name is not None:
            templates.append(f"{slug}-{name}{extension}")
        templates.append(f"{slug}{extension}")

        # Filters should keep the most specific file name first.
        return self.hooks.apply_filters(f"{self.filter_prefix}_get_template_part", templates, slug, name)

    def locate_template(
        self,
        template_names: TemplateNames,
        load: bool = False,
        require_once: bool = True,
    ) -> Optional[str]:
        """Return the first existing template, searching names before paths.

        ``require_once`` only matters when ``load`` is true.
        """

        if isinstance(template_names, str):
            template_names = [template_names]
        else:
            template_names = list(template_names)
        cache_key = template_names[0] if template_names else ""

        located = self._template_path_cache.get(cache_key)
        if located is not None:
            logger.debug("Template cache hit for %s: %s", cache_key, located)
        else:
            located = self._search(template_names, cache_key)

        if load and located:
            self.includer.include(located, self.context.as_mapping(), require_once)

        return located

    def get_template_paths(self) -> List[PathEntry]:
        """Return the directories to search, lowest priority number first."""

        theme_directory = trailingslashit(self.settings.theme_template_directory)

        file_paths: Dict[int, Union[str, Path]] = {
            THEME_PRIORITY: trailingslashit(self.theme.template_directory) + theme_directory,
            PLUGIN_PRIORITY: self.get_templates_dir(),
        }

        # Non-child themes would otherwise check the active theme twice.
        if self.theme.is_child_theme:
            file_paths[CHILD_THEME_PRIORITY] = trailingslashit(self.theme.stylesheet_directory) + theme_directory

        file_paths = _TEMPLATE_PATHS.validate_python(
            self.hooks.apply_filters(f"{self.filter_prefix}_template_paths", file_paths)
        )

        return [PathEntry(priority=priority, path=trailingslashit(path)) for priority, path in sorted(file_paths.items())]

    def get_templates_dir(self) -> str:
        return trailingslashit(self.settings.plugin_directory) + self.settings.plugin_template_directory

    def _search(self, template_names: List[str], cache_key: str) -> Optional[str]:
        template_paths = self.get_template_paths()

        for template_name in filter(None, template_names):
            template_name = template_name.lstrip("/")
            for entry in template_paths:
                candidate = entry.path + template_name
                if Path(candidate).exists():
                    self._template_path_cache[cache_key] = candidate
                    logger.debug("Located template %s at %s", template_name, candidate)
                    return candidate

        logger.debug("No template found for %s", template_names)
        return None

    def _publish(self, data: Any, var_name: str) -> None:
        self.context.set(var_name, as_template_object(data))
        self._template_data_var_names.setdefault(var_name)
