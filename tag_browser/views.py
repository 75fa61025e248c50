# tag_browser/views.py
"""
Logical views for the list and detail pages.

Both builders are pure: they take the immutable catalog plus the transient
state (list filters, or the key taken from the address) and return plain
dataclasses. Rendering surfaces (Streamlit, the CLI) only lay these out.
Navigation is injected as ``navigate(path)``; nothing here knows how a
path becomes a page.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union
from urllib.parse import quote, unquote

from .catalog import Attribute, Catalog, Example, TagRecord
from .filters import category_counts, compute_visible

log = logging.getLogger("views")

Navigate = Callable[[str], None]

LIST_PATH = "/"
DETAIL_PREFIX = "/tag/"

COUNT_ALL = "Найдено тегов"
COUNT_CATEGORY = "Теги в категории"
EMPTY_TITLE = "Ничего не найдено"
EMPTY_HINT = "Попробуйте изменить поисковый запрос"

NOT_FOUND_TITLE = "Тег не найден"
NOT_FOUND_ACTION = "Вернуться к справочнику"
NO_ATTRIBUTES = "Нет специальных атрибутов"

SECTION_DESCRIPTION = "Описание"
SECTION_EXAMPLE = "Основной пример"
SECTION_EXAMPLES = "Примеры использования"
SECTION_ATTRIBUTES = "Атрибуты"
SECTION_BROWSERS = "Поддержка браузерами"
SECTION_NOTES = "Важные замечания"


# ───────────────────────────── Addresses ─────────────────────────────

def detail_path(name: str) -> str:
    return DETAIL_PREFIX + quote(name, safe="")


def parse_detail_path(path: str) -> Optional[str]:
    """Return the tag key embedded in a detail address, or None for any other path."""
    if not path.startswith(DETAIL_PREFIX):
        return None
    key = unquote(path[len(DETAIL_PREFIX):])
    return key or None


# ───────────────────────────── List page ─────────────────────────────

@dataclass
class ListState:
    search_text: str = ""
    selected_category: Optional[str] = None  # None means the catalog's all-label

    def on_search(self, text: str) -> None:
        self.search_text = text

    def on_category(self, label: str) -> None:
        self.selected_category = label

    def reset(self) -> None:
        self.search_text = ""
        self.selected_category = None


@dataclass(frozen=True)
class TagCard:
    name: str
    category: Optional[str]
    description: str
    example: str
    attributes: Tuple[str, ...]
    target: str

    @property
    def label(self) -> str:
        return f"<{self.name}>"


@dataclass(frozen=True)
class ListView:
    query: str
    category: str
    is_all: bool
    tabs: Tuple[Tuple[str, int], ...]
    cards: Tuple[TagCard, ...]
    records: Tuple[TagRecord, ...]
    heading: Optional[str]
    count_label: str
    empty_title: str = field(default=EMPTY_TITLE, init=False)
    empty_hint: str = field(default=EMPTY_HINT, init=False)

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def empty(self) -> bool:
        return not self.cards


def build_list_view(catalog: Catalog, state: ListState) -> ListView:
    cats = catalog.categories
    category = state.selected_category or cats.all_label
    if category not in cats.tabs:
        # stale or mistyped tab label; the list falls back to every tag
        log.warning("Unknown category %r, showing %r", category, cats.all_label)
        category = cats.all_label
    is_all = cats.is_all(category)

    visible = compute_visible(catalog, category, state.search_text, all_label=cats.all_label)

    # tab totals follow the query but ignore the active tab
    matching = compute_visible(catalog, cats.all_label, state.search_text, all_label=cats.all_label)
    per_cat = category_counts(matching, cats.labels)
    tabs = ((cats.all_label, len(matching)),) + tuple((label, per_cat[label]) for label in cats.labels)

    cards = tuple(
        TagCard(
            name=r.name,
            category=r.category if is_all else None,
            description=r.description,
            example=r.example,
            attributes=r.attribute_names,
            target=detail_path(r.name),
        )
        for r in visible
    )
    prefix = COUNT_ALL if is_all else COUNT_CATEGORY
    return ListView(
        query=state.search_text,
        category=category,
        is_all=is_all,
        tabs=tabs,
        cards=cards,
        records=tuple(visible),
        heading=None if is_all else category,
        count_label=f"{prefix}: {len(cards)}",
    )


def activate_card(name: str, navigate: Navigate) -> None:
    navigate(detail_path(name))


# ───────────────────────────── Detail page ─────────────────────────────

@dataclass(frozen=True)
class Section:
    title: str
    kind: str  # text | code | examples | attributes | notes
    text: str = ""
    examples: Tuple[Example, ...] = ()
    attributes: Tuple[Attribute, ...] = ()
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DetailView:
    record: TagRecord
    sections: Tuple[Section, ...]
    back_target: str = LIST_PATH

    @property
    def found(self) -> bool:
        return True

    @property
    def label(self) -> str:
        return f"<{self.record.name}>"


@dataclass(frozen=True)
class NotFoundView:
    key: str
    title: str = NOT_FOUND_TITLE
    action_label: str = NOT_FOUND_ACTION
    back_target: str = LIST_PATH

    @property
    def found(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f'Тег "{self.key}" не существует в справочнике'


def _sections(rec: TagRecord) -> Tuple[Section, ...]:
    out: List[Section] = [
        Section(SECTION_DESCRIPTION, "text", text=rec.detail_text),
        Section(SECTION_EXAMPLE, "code", text=rec.example),
    ]
    if rec.examples:
        out.append(Section(SECTION_EXAMPLES, "examples", examples=rec.examples))
    if rec.attributes:
        out.append(Section(SECTION_ATTRIBUTES, "attributes", attributes=rec.attributes))
    else:
        out.append(Section(SECTION_ATTRIBUTES, "text", text=NO_ATTRIBUTES))
    out.append(Section(SECTION_BROWSERS, "text", text=rec.browser_support))
    if rec.notes:
        out.append(Section(SECTION_NOTES, "notes", notes=rec.notes))
    return tuple(out)


def build_detail_view(catalog: Catalog, key: str) -> Union[DetailView, NotFoundView]:
    rec = catalog.get(key)
    if rec is None:
        log.info("Tag %r not in catalog", key)
        return NotFoundView(key)
    return DetailView(rec, _sections(rec))


def go_back(navigate: Navigate) -> None:
    navigate(LIST_PATH)
