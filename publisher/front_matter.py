from __future__ import annotations
import datetime
import yaml
from blog.headings import generate_heading_id

FENCE = "---"


def _iso(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


def split_front_matter(text: str) -> tuple[dict, str]:
    """Split a `---` fenced YAML header off a document.

    Returns (front_matter, body). A document without an opening fence has an
    empty header and the whole text as body.
    """
    text = text.removeprefix("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != FENCE:
        return {}, text
    for i, line in enumerate(lines[1:], 1):
        if line.rstrip("\r\n") == FENCE:
            fm = yaml.safe_load("".join(lines[1:i])) or {}
            if not isinstance(fm, dict):
                raise ValueError(f"front matter must be a mapping, got {type(fm).__name__}")
            # yaml turns bare 2024-01-15 into a date object
            fm = {k: _iso(v) for k, v in fm.items()}
            return fm, "".join(lines[i + 1:])
    raise ValueError("front matter has no closing '---'")


def build_front_matter_dict(
    *,
    title: str,
    description: str = "",
    author: str = "",
    category: str = "",
    tags: list[str] | None = None,
    date: datetime.date | None = None,
    difficulty: str | None = None,
    featured_image: str | None = None,
):
    tags = [str(t) for t in (tags or [])]
    dt = date or datetime.date.today()
    slug = generate_heading_id(title)[:80].rstrip("-")

    fm = {
        "title": str(title),
        "description": description,
        "publishedAt": dt.isoformat(),
        "author": author,
        "category": category,
        "tags": tags,
    }
    if difficulty:
        fm["difficulty"] = difficulty
    if featured_image:
        fm["featuredImage"] = featured_image
    return fm, slug


def front_matter_text(fm_dict: dict) -> str:
    yaml_txt = yaml.safe_dump(
        fm_dict, allow_unicode=True, sort_keys=False, default_flow_style=False, width=1000
    )
    return f"{FENCE}\n{yaml_txt}{FENCE}\n\n"
