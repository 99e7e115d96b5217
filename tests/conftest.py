from __future__ import annotations

from pathlib import Path

import pytest

from themeloader import HookRegistry, LoaderSettings, TemplateLoader, ThemeDirectories


def _write_template(directory: Path, name: str, content: str = "") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content or name, encoding="utf-8")
    return path


@pytest.fixture
def write_template():
    return _write_template


@pytest.fixture
def site(tmp_path: Path) -> dict[str, Path]:
    """Parent theme, child theme and plugin roots with empty template directories."""

    roots = {
        "parent": tmp_path / "themes" / "parent",
        "child": tmp_path / "themes" / "child",
        "plugin": tmp_path / "plugins" / "recipes",
    }
    for root in roots.values():
        root.mkdir(parents=True)
    roots["parent_templates"] = roots["parent"] / "recipe-templates"
    roots["child_templates"] = roots["child"] / "recipe-templates"
    roots["plugin_templates"] = roots["plugin"] / "templates"
    return roots


@pytest.fixture
def settings(site: dict[str, Path]) -> LoaderSettings:
    return LoaderSettings(
        filter_prefix="recipes",
        theme_template_directory="recipe-templates",
        plugin_directory=str(site["plugin"]),
        plugin_template_directory="templates",
    )


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def parent_theme(site: dict[str, Path]) -> ThemeDirectories:
    return ThemeDirectories(template_directory=site["parent"])


@pytest.fixture
def child_theme(site: dict[str, Path]) -> ThemeDirectories:
    return ThemeDirectories(template_directory=site["parent"], stylesheet_directory=site["child"])


@pytest.fixture
def loader(parent_theme: ThemeDirectories, settings: LoaderSettings, hooks: HookRegistry) -> TemplateLoader:
    return TemplateLoader(parent_theme, settings=settings, hooks=hooks)
