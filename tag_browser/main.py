# tag_browser/main.py
from __future__ import annotations

import argparse, json, logging, subprocess, sys
from typing import List, Optional

from .catalog import Catalog, default_catalog
from .config import HERE, load_settings
from .export_utils import records_frame
from .filters import compute_visible
from .utils import setup_logging
from .views import DetailView, build_detail_view

log = logging.getLogger("main")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser("tag-browser", description="HTML tag reference")
    p.add_argument("--config", default=None, help="Path to config.yaml")
    p.add_argument("--catalog", default=None, help="Catalog YAML (overrides config)")
    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List tags, optionally filtered")
    ls.add_argument("--category", default=None, help="Category label (default: all)")
    ls.add_argument("--query", "-q", default="", help="Substring of name or description")
    ls.add_argument("--format", choices=["table", "json", "csv"], default="table")

    show = sub.add_parser("show", help="Show the full entry for one tag")
    show.add_argument("name")

    sub.add_parser("categories", help="List category tabs with tag counts")

    serve = sub.add_parser("serve", help="Start the Streamlit browser")
    serve.add_argument("--port", type=int, default=None)
    return p.parse_args(argv)


def _cmd_list(catalog: Catalog, args: argparse.Namespace) -> int:
    category = args.category or catalog.categories.all_label
    if not catalog.categories.is_all(category) and category not in catalog.categories:
        log.warning("Unknown category %r", category)
    visible = compute_visible(catalog, category, args.query, all_label=catalog.categories.all_label)
    df = records_frame(visible)
    if args.format == "json":
        print(json.dumps(df.to_dict(orient="records"), ensure_ascii=False, indent=2))
    elif args.format == "csv":
        sys.stdout.write(df.to_csv(index=False))
    elif df.empty:
        print("Ничего не найдено")
    else:
        print(df[["name", "category", "description"]].to_string(index=False))
    return 0


def format_detail(view: DetailView) -> str:
    lines = [view.label, f"[{view.record.category}]"]
    for s in view.sections:
        lines.extend(["", f"== {s.title} =="])
        if s.kind == "examples":
            for ex in s.examples:
                lines.extend([f"-- {ex.title}", ex.code])
        elif s.kind == "attributes":
            lines.extend(f"  {a.name}: {a.description}" for a in s.attributes)
        elif s.kind == "notes":
            lines.extend(f"  * {n}" for n in s.notes)
        else:
            lines.append(s.text)
    return "\n".join(lines)


def _cmd_show(catalog: Catalog, args: argparse.Namespace) -> int:
    view = build_detail_view(catalog, args.name)
    if not view.found:
        print(f"{view.title}: {view.message}", file=sys.stderr)
        return 1
    print(format_detail(view))
    return 0


def _cmd_categories(catalog: Catalog) -> int:
    print(f"{catalog.categories.all_label}\t{len(catalog)}")
    for label, n in catalog.counts().items():
        print(f"{label}\t{n}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    cmd = [sys.executable, "-m", "streamlit", "run", str(HERE / "app.py")]
    if args.port:
        cmd += ["--server.port", str(args.port)]
    cmd += ["--"]
    if args.config:
        cmd += ["--config", args.config]
    log.info("Starting: %s", " ".join(cmd))
    return subprocess.call(cmd)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = load_settings(args.config)
    setup_logging(settings.logging_config())
    log.debug("Command %s", args.command)

    if args.command == "serve":
        return _cmd_serve(args)

    path = args.catalog or settings.CATALOG_FILE
    try:
        catalog = default_catalog(path)
    except (OSError, ValueError) as e:
        print(f"catalog error: {e}", file=sys.stderr)
        return 2

    if args.command == "list":
        return _cmd_list(catalog, args)
    if args.command == "show":
        return _cmd_show(catalog, args)
    return _cmd_categories(catalog)


if __name__ == "__main__":
    sys.exit(main())
