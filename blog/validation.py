from __future__ import annotations
from blog.config import CONFIG

REQUIRED_FRONTMATTER_FIELDS = ("title", "description", "publishedAt", "author", "category", "tags")
VALID_LOCALES = tuple(CONFIG["locales"])
VALID_CATEGORIES = tuple(CONFIG["categories"])
VALID_DIFFICULTIES = tuple(CONFIG["difficulties"])


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_frontmatter(fm: dict) -> dict:
    """Check that every required front matter field is present and non-blank.

    Returns ``{"success": bool, "missing_fields": [...]}`` with the missing
    fields in REQUIRED_FRONTMATTER_FIELDS order.
    """
    missing = [f for f in REQUIRED_FRONTMATTER_FIELDS if _is_missing(fm.get(f))]
    return {"success": not missing, "missing_fields": missing}
