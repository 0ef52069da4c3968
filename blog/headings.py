from __future__ import annotations
import re

# line ends: CRLF, LF, lone CR, U+2028, U+2029
_LINE_BREAK_RE = re.compile(r"\r\n|[\n\r\u2028\u2029]")
# 2-4 markers, whitespace, then the rest of the line
_HEADING_RE = re.compile(r"(#{2,4})\s+(.+)")
_NOT_SLUG_RE = re.compile(r"[^a-z0-9\s-]")
_SPACES_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")

FALLBACK_ID = "heading"


def generate_heading_id(text: str) -> str:
    """Turn heading text into an anchor id ("Hello World" -> "hello-world")."""
    s = _NOT_SLUG_RE.sub("", text.lower())
    s = _SPACES_RE.sub("-", s)
    s = _HYPHENS_RE.sub("-", s)
    s = s.removeprefix("-").removesuffix("-")
    return s or FALLBACK_ID


def make_unique_id(base_id: str, seen: dict[str, int]) -> str:
    """Return base_id, or base_id-N on its Nth use. `seen` is updated in place.

    Counts are keyed by base id only, so a heading literally titled "Foo 2"
    after two "Foo" headings gets "foo-2" a second time.
    """
    if base_id in seen:
        seen[base_id] += 1
        return f"{base_id}-{seen[base_id]}"
    seen[base_id] = 1
    return base_id


def extract_headings(content: str) -> list[dict]:
    """Collect h2-h4 headings from Markdown/MDX for a table of contents.

    Returns dicts with ``id``, ``text`` and ``level`` in document order.
    Lines are matched one by one, fenced code blocks included.
    """
    headings, seen = [], {}
    for line in _LINE_BREAK_RE.split(content):
        m = _HEADING_RE.fullmatch(line)
        if m is None:
            continue
        text = m.group(2).strip()
        headings.append({
            "id": make_unique_id(generate_heading_id(text), seen),
            "text": text,
            "level": len(m.group(1)),
        })
    return headings
