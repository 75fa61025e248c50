# tag_browser/export_utils.py
from __future__ import annotations
import io, json
from typing import Iterable

import pandas as pd
import streamlit as st

from .catalog import TagRecord

COLUMNS = ["name", "category", "description", "example", "attributes"]


def records_frame(records: Iterable[TagRecord]) -> pd.DataFrame:
    rows = [
        {
            "name": r.name,
            "category": r.category,
            "description": r.description,
            "example": r.example,
            "attributes": ", ".join(r.attribute_names),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")


def to_jsonl_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    for rec in df.to_dict(orient="records"):
        buf.write(json.dumps(rec, ensure_ascii=False) + "\n")
    return buf.getvalue().encode("utf-8")


def render_export_buttons(df: pd.DataFrame):
    if df is None or df.empty:
        return
    c1, c2 = st.columns(2)
    c1.download_button(
        "Скачать CSV",
        data=to_csv_bytes(df),
        file_name="html_tags.csv",
        mime="text/csv",
    )
    c2.download_button(
        "Скачать JSONL",
        data=to_jsonl_bytes(df),
        file_name="html_tags.jsonl",
        mime="application/x-ndjson",
    )
