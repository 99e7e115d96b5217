"""Template lookup for plugins with theme overrides."""

from .config import LoaderSettings, get_settings
from .context import TemplateContext, TemplateDataHandle, as_template_object
from .hooks import HookRegistry, Hooks, ListTransform, Observer
from .includer import TemplateIncluder, read_template
from .loader import TemplateLoader
from .models import PathEntry, ThemeDirectories, trailingslashit

__all__ = [
    "HookRegistry",
    "Hooks",
    "ListTransform",
    "LoaderSettings",
    "Observer",
    "PathEntry",
    "TemplateContext",
    "TemplateDataHandle",
    "TemplateIncluder",
    "TemplateLoader",
    "ThemeDirectories",
    "as_template_object",
    "get_settings",
    "read_template",
    "trailingslashit",
]
