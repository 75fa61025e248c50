# tag_browser/config.py
from __future__ import annotations
import logging, os, pathlib
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .utils import load_yaml

log = logging.getLogger("config")

HERE = pathlib.Path(__file__).resolve().parent

def _default_catalog_file() -> str:
    env = os.getenv("CATALOG_FILE")
    if env and os.path.isfile(env): return env
    return str(HERE / "data" / "catalog.yaml")

def _default_config_file() -> str:
    return os.getenv("CONFIG_FILE", str(HERE.parent / "config.yaml"))

class Settings(BaseModel):
    CATALOG_FILE: str = Field(default_factory=_default_catalog_file)
    CONFIG_FILE: str = Field(default_factory=_default_config_file)

    PAGE_TITLE: str = Field(default_factory=lambda: os.getenv("PAGE_TITLE", "HTML Справочник"))
    CARDS_PER_ROW: int = 3

    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    LOG_TO_FILE: bool = False
    LOG_FILE: Optional[str] = None
    LOG_ROTATE_BYTES: int = 1_048_576
    LOG_BACKUPS: int = 3

    def load_yaml_overrides(self) -> None:
        path = pathlib.Path(self.CONFIG_FILE)
        if not path.exists(): return
        try:
            data: Dict[str, Any] = load_yaml(str(path))
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable config %s: %s", path, e)
            return

        cat = (data.get("catalog") or {})
        if isinstance(cat.get("file"), str) and cat["file"].strip():
            p = pathlib.Path(cat["file"])
            if not p.is_absolute():
                p = path.parent / p
            self.CATALOG_FILE = str(p)

        ui = (data.get("ui") or {})
        self.PAGE_TITLE = str(ui.get("page_title", self.PAGE_TITLE))
        try:
            per_row = int(ui.get("cards_per_row", self.CARDS_PER_ROW))
        except (TypeError, ValueError):
            per_row = self.CARDS_PER_ROW
        self.CARDS_PER_ROW = min(4, max(1, per_row))

        lg = (data.get("logging") or {})
        self.LOG_LEVEL = str(lg.get("level", self.LOG_LEVEL)).upper()
        if "to_file" in lg and isinstance(lg["to_file"], bool):
            self.LOG_TO_FILE = lg["to_file"]
        self.LOG_FILE = lg.get("file_path", self.LOG_FILE)
        try:
            self.LOG_ROTATE_BYTES = max(0, int(lg.get("rotate_bytes", self.LOG_ROTATE_BYTES)))
            self.LOG_BACKUPS = max(0, int(lg.get("backups", self.LOG_BACKUPS)))
        except (TypeError, ValueError):
            log.warning("Ignoring non-numeric log rotation settings in %s", path)

    def logging_config(self) -> Dict[str, Any]:
        """Shape expected by utils.setup_logging."""
        return {"logging": {
            "level": self.LOG_LEVEL,
            "to_file": self.LOG_TO_FILE,
            "file_path": self.LOG_FILE,
            "rotate_bytes": self.LOG_ROTATE_BYTES,
            "backups": self.LOG_BACKUPS,
        }}

def load_settings(config_file: Optional[str] = None) -> Settings:
    s = Settings(CONFIG_FILE=config_file) if config_file else Settings()
    s.load_yaml_overrides()
    return s
