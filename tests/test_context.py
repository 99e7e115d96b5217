from types import SimpleNamespace

from themeloader import TemplateContext, TemplateDataHandle, as_template_object


def test_mapping_becomes_attribute_object():
    value = as_template_object({"foo": 1, "foo-bar": "x"})

    assert value.foo == 1
    assert getattr(value, "foo-bar") == "x"


def test_scalars_and_objects():
    record = object()

    assert as_template_object("Soup").scalar == "Soup"
    assert as_template_object(None) == SimpleNamespace()
    assert getattr(as_template_object(["a", "b"]), "1") == "b"
    assert as_template_object(record) is record


def test_handle_release_is_idempotent():
    context = TemplateContext({"data": as_template_object({"foo": 1})})
    handle = TemplateDataHandle(context, "data")

    assert handle.value.foo == 1
    handle.release()
    handle.release()

    assert handle.released
    assert "data" not in context


def test_discard_reports_missing_names():
    context = TemplateContext()
    context.set("x", None)

    assert context.discard("x")
    assert not context.discard("x")
    assert context.as_mapping() == {}
