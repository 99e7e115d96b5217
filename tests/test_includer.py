import io

import pytest

from themeloader import TemplateIncluder


def test_default_handler_writes_template_contents(tmp_path):
    template = tmp_path / "recipe.php"
    template.write_text("<h1>Soup</h1>", encoding="utf-8")
    output = io.StringIO()
    includer = TemplateIncluder(stream=output)

    assert includer.include(str(template), {}) == "<h1>Soup</h1>"
    assert includer.include(str(template), {}) is None
    assert includer.include(str(template), {}, require_once=False) == "<h1>Soup</h1>"
    assert output.getvalue() == "<h1>Soup</h1><h1>Soup</h1>"
    assert includer.included == {str(template)}


def test_handler_receives_context(tmp_path):
    template = tmp_path / "card.php"
    template.write_text("", encoding="utf-8")
    includer = TemplateIncluder(lambda path, context: f"{path.name}:{context['title']}")

    assert includer.include(str(template), {"title": "Soup"}) == "card.php:Soup"


def test_missing_file_propagates(tmp_path):
    includer = TemplateIncluder()

    with pytest.raises(FileNotFoundError):
        includer.include(str(tmp_path / "gone.php"), {})


def test_failed_include_is_not_marked_included(tmp_path):
    template = tmp_path / "recipe.php"
    includer = TemplateIncluder()

    with pytest.raises(FileNotFoundError):
        includer.include(str(template), {})

    template.write_text("<h1>Soup</h1>", encoding="utf-8")

    assert includer.include(str(template), {}) == "<h1>Soup</h1>"
    assert includer.included == {str(template)}
