from __future__ import annotations
import os
from pathlib import Path
import yaml
from dotenv import load_dotenv

load_dotenv()

BASE = Path(__file__).resolve().parent.parent
CONFIG_PATH = Path(os.getenv("BLOG_CONFIG", BASE / "config.yaml"))
CONTENT_DIR = Path(os.getenv("BLOG_CONTENT_DIR", BASE / "content" / "posts"))

DEFAULTS = {
    "locales": ["en", "es", "ja"],
    "default_locale": "en",
    "words_per_minute": 200,
    "categories": ["tutorials", "guides", "news", "case-studies"],
    "difficulties": ["beginner", "intermediate", "advanced"],
}


def load_config(path: str | Path | None = None) -> dict:
    """Read the YAML config over DEFAULTS. A missing file just means defaults."""
    p = Path(path) if path else CONFIG_PATH
    cfg = dict(DEFAULTS)
    if p.exists():
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{p}: expected a mapping at the top level")
        cfg.update({k: v for k, v in data.items() if v is not None})
    if cfg["default_locale"] not in cfg["locales"]:
        raise ValueError(f"default_locale {cfg['default_locale']!r} is not in locales {cfg['locales']}")
    return cfg


CONFIG = load_config()
