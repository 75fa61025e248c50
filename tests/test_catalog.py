# tests/test_catalog.py
import pytest

from .conftest import DATA
from tag_browser.catalog import ALL_LABEL, CatalogError, catalog_from_dict, default_catalog, load_catalog


def _data(**over):
    d = {"all_label": "all", "categories": ["a", "b"],
         "tags": [{"name": "x", "category": "a", "description": "d", "example": "e"}]}
    d.update(over)
    return d


def test_reference_catalog_shape(catalog):
    assert len(catalog) == 30
    assert catalog.categories.all_label == ALL_LABEL
    assert catalog.categories.tabs == (ALL_LABEL, "Структура", "Текст", "Формы", "Медиа", "Семантика")
    assert len(set(catalog.names())) == len(catalog)


def test_forms_category_members(catalog):
    assert [r.name for r in catalog.by_category("Формы")] == ["input", "button", "form", "select", "textarea"]
    assert catalog.counts()["Формы"] == 5
    assert sum(catalog.counts().values()) == len(catalog)


def test_every_name_resolves_to_its_record(catalog):
    for rec in catalog:
        assert catalog.get(rec.name) is rec


def test_lookup_is_exact_and_case_sensitive(catalog):
    assert catalog.get("DIV") is None
    assert catalog.get("di") is None
    assert catalog.get("nonexistent-tag") is None


def test_detail_fields_loaded(catalog):
    a = catalog.get("a")
    assert a.attribute_names == ("href", "target", "rel")
    assert a.attributes[0].description
    assert [e.title for e in a.examples][0] == "Внешняя ссылка в новой вкладке"
    assert a.browser_support
    br = catalog.get("br")
    assert br.attributes == ()
    assert catalog.get("span").notes == ()


def test_detail_text_falls_back_to_description(small_catalog):
    span = small_catalog.get("span")
    assert span.full_description is None
    assert span.detail_text == "Inline text wrapper"


def test_bare_attribute_names_accepted(small_catalog):
    assert small_catalog.get("span").attribute_names == ("class", "id")
    assert small_catalog.get("span").attributes[0].description == ""


def test_duplicate_name_rejected():
    tags = [{"name": "x", "category": "a", "description": "d", "example": "e"}] * 2
    with pytest.raises(CatalogError, match="duplicate"):
        catalog_from_dict(_data(tags=tags))


def test_unknown_category_rejected():
    tags = [{"name": "x", "category": "zzz", "description": "d", "example": "e"}]
    with pytest.raises(CatalogError, match="unknown category"):
        catalog_from_dict(_data(tags=tags))


def test_all_label_cannot_be_a_category():
    with pytest.raises(CatalogError):
        catalog_from_dict(_data(categories=["all", "a"]))


def test_missing_required_field_rejected():
    with pytest.raises(CatalogError, match="example"):
        catalog_from_dict(_data(tags=[{"name": "x", "category": "a", "description": "d"}]))


def test_catalog_is_immutable(catalog):
    with pytest.raises(Exception):
        catalog.records = ()
    with pytest.raises(Exception):
        catalog.get("div").name = "changed"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(str(tmp_path / "nope.yaml"))


def test_default_catalog_is_loaded_once():
    path = str(DATA)
    assert default_catalog(path) is default_catalog(path)
    assert len(default_catalog(path)) == 30


def test_default_catalog_keys_on_resolved_path(monkeypatch):
    monkeypatch.chdir(DATA.parent)
    assert default_catalog(DATA.name) is default_catalog(str(DATA))
