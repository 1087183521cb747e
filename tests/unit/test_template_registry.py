"""Unit tests for the HTML TemplateRegistry."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from folio.contexts.rendering import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    registry = TemplateRegistry()

    template1 = registry.get_template("sections/hero")
    assert registry.is_cached("sections/hero")

    template2 = registry.get_template("sections/hero")
    assert template1 is template2


@pytest.mark.unit
def test_every_section_kind_has_template():
    registry = TemplateRegistry()
    for kind in ("hero", "about", "experience", "projects", "education", "contact"):
        assert registry.get_template_path(f"sections/{kind}").exists()


@pytest.mark.unit
def test_get_template_not_found():
    registry = TemplateRegistry()
    with pytest.raises(TemplateNotFound, match="testimonials"):
        registry.get_template("sections/testimonials")


@pytest.mark.unit
def test_get_template_path():
    path = TemplateRegistry().get_template_path("page")
    assert isinstance(path, Path)
    assert path.name == "page.html.jinja"


@pytest.mark.unit
def test_clear_cache():
    registry = TemplateRegistry()
    registry.get_template("page")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    (tmp_path / "page.html.jinja").write_text("<p>{{ title }}</p>")
    registry = TemplateRegistry(templates_path=tmp_path)
    assert registry.get_template("page").render(title="<b>") == "<p>&lt;b&gt;</p>"
