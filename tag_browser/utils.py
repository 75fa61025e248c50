# tag_browser/utils.py
from __future__ import annotations
import logging, os
from logging.handlers import RotatingFileHandler
from typing import Any, Dict

import yaml

log = logging.getLogger("utils")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# ───────────────────────────── YAML loader ─────────────────────────────

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return data

# ───────────────────────────── Filesystem helpers ─────────────────────────────

def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)

# ───────────────────────────── Logging ─────────────────────────────

def setup_logging(cfg: Dict[str, Any]) -> None:
    lg = cfg.get("logging") or {}
    level = getattr(logging, str(lg.get("level", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    if lg.get("to_file"):
        file_path = lg.get("file_path") or "./output_files/tag_browser.log"
        root = logging.getLogger()
        for h in root.handlers:
            # streamlit re-runs the script on every interaction
            if isinstance(h, RotatingFileHandler) and h.baseFilename == os.path.abspath(file_path):
                return
        ensure_dir(os.path.dirname(file_path))
        rotate_bytes = int(lg.get("rotate_bytes", 1_048_576))
        backups = int(lg.get("backups", 3))
        fh = RotatingFileHandler(file_path, maxBytes=rotate_bytes, backupCount=backups, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(fh)
        log.debug("File logging enabled at %s", file_path)
