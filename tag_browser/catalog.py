# tag_browser/catalog.py
from __future__ import annotations
import functools, logging, os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .utils import load_yaml

log = logging.getLogger("catalog")

ALL_LABEL = "Все теги"


class CatalogError(ValueError):
    """The catalog file breaks one of the table invariants."""


@dataclass(frozen=True)
class Attribute:
    name: str
    description: str = ""


@dataclass(frozen=True)
class Example:
    title: str
    code: str


@dataclass(frozen=True)
class TagRecord:
    name: str
    category: str
    description: str
    example: str
    full_description: Optional[str] = None
    examples: Tuple[Example, ...] = ()
    attributes: Tuple[Attribute, ...] = ()
    browser_support: str = ""
    notes: Tuple[str, ...] = ()

    @property
    def detail_text(self) -> str:
        return self.full_description or self.description

    @property
    def attribute_names(self) -> Tuple[str, ...]:
        return tuple(a.name for a in self.attributes)

    @classmethod
    def from_dict(cls, rec: Dict[str, Any]) -> "TagRecord":
        missing = [k for k in ("name", "category", "description", "example") if not rec.get(k)]
        if missing:
            raise CatalogError(f"tag {rec.get('name') or '(unnamed)'!r} is missing {', '.join(missing)}")

        attributes: List[Attribute] = []
        for a in rec.get("attributes") or []:
            # summary-level records list bare attribute names
            if isinstance(a, str):
                attributes.append(Attribute(a))
            elif not isinstance(a, dict) or not a.get("name"):
                raise CatalogError(f"tag {rec['name']!r} has an attribute without a name")
            else:
                attributes.append(Attribute(str(a["name"]), str(a.get("description") or "")))

        return cls(
            name=str(rec["name"]),
            category=str(rec["category"]),
            description=str(rec["description"]),
            example=str(rec["example"]),
            full_description=rec.get("full_description") or None,
            examples=tuple(Example(str(e.get("title") or ""), str(e.get("code") or "")) for e in rec.get("examples") or []),
            attributes=tuple(attributes),
            browser_support=str(rec.get("browser_support") or ""),
            notes=tuple(str(n) for n in rec.get("notes") or [] if str(n).strip()),
        )


@dataclass(frozen=True)
class CategorySet:
    """Ordered tab labels. ``all_label`` is a filter bypass, not a partition."""

    all_label: str
    labels: Tuple[str, ...]

    @property
    def tabs(self) -> Tuple[str, ...]:
        return (self.all_label,) + self.labels

    def is_all(self, label: str) -> bool:
        return label == self.all_label

    def __contains__(self, label: object) -> bool:
        return label in self.labels


@dataclass(frozen=True)
class Catalog:
    records: Tuple[TagRecord, ...]
    categories: CategorySet
    _by_name: Mapping[str, TagRecord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.categories.all_label in self.categories.labels:
            raise CatalogError(f"all-label {self.categories.all_label!r} is also listed as a category")
        index: Dict[str, TagRecord] = {}
        for rec in self.records:
            if rec.name in index:
                raise CatalogError(f"duplicate tag name {rec.name!r}")
            if rec.category not in self.categories:
                raise CatalogError(f"tag {rec.name!r} has unknown category {rec.category!r}")
            index[rec.name] = rec
        object.__setattr__(self, "_by_name", MappingProxyType(index))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[TagRecord]:
        return iter(self.records)

    def get(self, name: str) -> Optional[TagRecord]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [r.name for r in self.records]

    def by_category(self, label: str) -> List[TagRecord]:
        return [r for r in self.records if r.category == label]

    def counts(self) -> Dict[str, int]:
        out = {label: 0 for label in self.categories.labels}
        for r in self.records:
            out[r.category] += 1
        return out


def catalog_from_dict(data: Dict[str, Any]) -> Catalog:
    labels = data.get("categories") or []
    if not labels:
        raise CatalogError("catalog defines no categories")
    categories = CategorySet(str(data.get("all_label") or ALL_LABEL), tuple(str(c) for c in labels))
    records = tuple(TagRecord.from_dict(t) for t in data.get("tags") or [])
    return Catalog(records, categories)


def load_catalog(path: str) -> Catalog:
    catalog = catalog_from_dict(load_yaml(path))
    log.info("Loaded %d tags in %d categories from %s", len(catalog), len(catalog.categories.labels), path)
    return catalog


@functools.lru_cache(maxsize=None)
def _load_cached(path: str) -> Catalog:
    return load_catalog(path)


def default_catalog(path: str) -> Catalog:
    """Process-wide catalog, read once per file path."""
    return _load_cached(os.path.abspath(path))
