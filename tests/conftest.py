# tests/conftest.py
import pathlib

import pytest

from tag_browser.catalog import catalog_from_dict, load_catalog

DATA = pathlib.Path(__file__).resolve().parents[1] / "tag_browser" / "data" / "catalog.yaml"


@pytest.fixture(scope="session")
def catalog():
    return load_catalog(str(DATA))


@pytest.fixture
def small_catalog():
    return catalog_from_dict({
        "all_label": "all",
        "categories": ["block", "inline"],
        "tags": [
            {"name": "div", "category": "block", "description": "Generic container", "example": "<div></div>",
             "attributes": [{"name": "class", "description": "CSS classes"}],
             "examples": [{"title": "Card", "code": "<div class=\"card\"></div>"}],
             "browser_support": "All", "notes": ["Prefer semantic tags"]},
            {"name": "span", "category": "inline", "description": "Inline text wrapper", "example": "<span></span>",
             "attributes": ["class", "id"]},
            {"name": "br", "category": "inline", "description": "Line break", "example": "a<br>b"},
        ],
    })


@pytest.fixture
def nav_log():
    calls = []
    return calls, calls.append
