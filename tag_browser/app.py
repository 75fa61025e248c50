# tag_browser/app.py
from __future__ import annotations

import argparse
import html
import logging
import pathlib
import sys
from typing import Union

import streamlit as st

# ──────────────────────────────────────────────────────────────────────────────
# Local imports (`streamlit run` executes this file as a script)
# ──────────────────────────────────────────────────────────────────────────────
_PKG_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(_PKG_ROOT) not in sys.path:
    sys.path.insert(0, str(_PKG_ROOT))

from tag_browser.catalog import Catalog, default_catalog
from tag_browser.config import load_settings
from tag_browser.export_utils import records_frame, render_export_buttons
from tag_browser.utils import setup_logging
from tag_browser.views import (
    NOT_FOUND_ACTION,
    DetailView,
    ListState,
    ListView,
    NotFoundView,
    activate_card,
    build_detail_view,
    build_list_view,
    go_back,
    parse_detail_path,
)

log = logging.getLogger("app")

SEARCH_KEY = "search_text"
CATEGORY_KEY = "category"


# ---------------- helpers ----------------

def _badge(label: str, color: str = "#64748b"):
    st.markdown(
        f"""
        <span style="
          display:inline-block;background:{color};color:white;
          padding:2px 8px;border-radius:12px;font-size:12px;margin-right:6px;">
          {html.escape(label)}
        </span>
        """,
        unsafe_allow_html=True,
    )

def _pills(labels):
    if not labels:
        return
    st.markdown(
        " ".join(
            f"<span style='display:inline-block;border:1px solid #cbd5e1;padding:1px 8px;"
            f"border-radius:10px;margin:2px;font-size:12px'>{html.escape(x)}</span>"
            for x in labels
        ),
        unsafe_allow_html=True,
    )

@st.cache_resource(show_spinner=False)
def _cached_catalog(path: str) -> Catalog:
    return default_catalog(path)


# ---------------- navigation ----------------

def navigate(path: str) -> None:
    """Map an address onto query params. Runs inside widget callbacks, so Streamlit reruns afterwards."""
    key = parse_detail_path(path)
    if key is not None:
        st.query_params["tag"] = key
        return
    st.query_params.clear()
    # back to the list's default state: empty search, all-label tab
    for k in (SEARCH_KEY, CATEGORY_KEY):
        st.session_state.pop(k, None)


# ---------------- pages ----------------

def render_list(catalog: Catalog, per_row: int) -> None:
    state = ListState(
        search_text=st.session_state.get(SEARCH_KEY, ""),
        selected_category=st.session_state.get(CATEGORY_KEY),
    )
    view: ListView = build_list_view(catalog, state)
    totals = dict(view.tabs)

    st.text_input(
        "Поиск",
        key=SEARCH_KEY,
        placeholder="Поиск по названию или описанию тега...",
        label_visibility="collapsed",
    )
    st.radio(
        "Категория",
        options=list(catalog.categories.tabs),
        key=CATEGORY_KEY,
        horizontal=True,
        format_func=lambda label: f"{label} ({totals.get(label, 0)})",
        label_visibility="collapsed",
    )

    if view.heading:
        st.subheader(view.heading)
    st.caption(view.count_label)

    if view.empty:
        st.markdown(f"### 🔍 {view.empty_title}")
        st.info(view.empty_hint)
        return

    for start in range(0, view.count, per_row):
        cols = st.columns(per_row)
        for col, card in zip(cols, view.cards[start:start + per_row]):
            with col, st.container(border=True):
                st.markdown(f"#### `{card.label}`")
                if card.category:
                    _badge(card.category)
                st.write(card.description)
                st.code(card.example, language="html")
                _pills(card.attributes)
                st.button(
                    "Открыть",
                    key=f"open_{card.name}",
                    on_click=activate_card,
                    args=(card.name, navigate),
                )

    st.divider()
    render_export_buttons(records_frame(view.records))


def render_detail(view: Union[DetailView, NotFoundView]) -> None:
    if isinstance(view, NotFoundView):
        st.markdown(f"## ⚠️ {view.title}")
        st.write(view.message)
        st.button(view.action_label, key="back_missing", on_click=go_back, args=(navigate,))
        return

    rec = view.record
    st.button("← Назад к справочнику", key="back_top", on_click=go_back, args=(navigate,))
    st.markdown(f"# `{view.label}`")
    _badge(rec.category)

    for section in view.sections:
        st.divider()
        st.subheader(section.title)
        if section.kind == "code":
            st.code(section.text, language="html")
        elif section.kind == "examples":
            for ex in section.examples:
                with st.container(border=True):
                    st.markdown(f"**{ex.title}**")
                    st.code(ex.code, language="html")
        elif section.kind == "attributes":
            for attr in section.attributes:
                c1, c2 = st.columns([1, 4])
                c1.code(attr.name, language=None)
                c2.write(attr.description or "—")
        elif section.kind == "notes":
            for note in section.notes:
                st.markdown(f"- ℹ️ {note}")
        else:
            st.write(section.text)

    st.divider()
    st.button(NOT_FOUND_ACTION, key="back_bottom", type="primary", on_click=go_back, args=(navigate,))


# ---------------- main ----------------

def main():
    # streamlit passes unknown args after "--"
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--config", default=None)
    args, _ = parser.parse_known_args()

    settings = load_settings(args.config)
    setup_logging(settings.logging_config())

    st.set_page_config(page_title=settings.PAGE_TITLE, page_icon="🧩", layout="wide")

    try:
        catalog = _cached_catalog(settings.CATALOG_FILE)
    except (OSError, ValueError) as e:
        log.error("Catalog could not be loaded: %s", e)
        st.error(f"Не удалось загрузить справочник: {e}")
        st.stop()

    key = st.query_params.get("tag")
    if key is not None:
        render_detail(build_detail_view(catalog, key))
        return

    st.title(settings.PAGE_TITLE)
    render_list(catalog, settings.CARDS_PER_ROW)


if __name__ == "__main__":
    main()
