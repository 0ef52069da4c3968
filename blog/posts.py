from __future__ import annotations
import datetime
from pathlib import Path
from blog.config import CONFIG, CONTENT_DIR
from blog.headings import extract_headings
from blog.reading_time import calculate_reading_time
from blog.validation import validate_frontmatter
from publisher.front_matter import split_front_matter

POST_EXT = ".mdx"

# front matter key -> post meta key, for the optional fields
_OPTIONAL = {
    "updatedAt": "updated_at",
    "featuredImage": "featured_image",
    "difficulty": "difficulty",
    "relatedPosts": "related_posts",
}


def _check_locale(locale: str):
    if locale not in CONFIG["locales"]:
        raise ValueError(f"Unknown locale {locale!r}; expected one of {CONFIG['locales']}")


def get_post_path(locale: str, slug: str, content_dir: str | Path | None = None) -> Path:
    return Path(content_dir or CONTENT_DIR) / locale / f"{slug}{POST_EXT}"


def post_exists(locale: str, slug: str, content_dir: str | Path | None = None) -> bool:
    return get_post_path(locale, slug, content_dir).is_file()


def parse_post_file(path: str | Path, locale: str) -> dict | None:
    """Load one post file into a post dict, or None if it can't be used.

    Failures are reported on stdout and never raised.
    """
    path = Path(path)
    try:
        fm, content = split_front_matter(path.read_text(encoding="utf-8"))

        validation = validate_frontmatter(fm)
        if not validation["success"]:
            print(f">> Invalid frontmatter in {path}: missing fields {', '.join(validation['missing_fields'])}", flush=True)
            return None

        post = {
            "title": str(fm["title"]),
            "description": str(fm["description"]),
            "slug": path.stem,
            "published_at": str(fm["publishedAt"]),
            "author": str(fm["author"]),
            "category": fm["category"],
            "tags": [str(t) for t in fm["tags"]] if isinstance(fm["tags"], list) else [str(fm["tags"])],
            "reading_time": calculate_reading_time(content),
            "locale": locale,
        }
        for key, name in _OPTIONAL.items():
            post[name] = fm.get(key)
        post["content"] = content
        post["headings"] = extract_headings(content)
        return post
    except Exception as e:
        print(f">> Error parsing post file {path}: {e}", flush=True)
        return None


def get_blog_post(slug: str, locale: str = "en", content_dir: str | Path | None = None) -> dict | None:
    """Fetch a post by slug, falling back to the default locale's copy."""
    _check_locale(locale)
    requested = get_post_path(locale, slug, content_dir)
    if requested.is_file():
        return parse_post_file(requested, locale)

    default = CONFIG["default_locale"]
    if locale != default:
        fallback = get_post_path(default, slug, content_dir)
        if fallback.is_file():
            print(f">> {slug}: no {locale} version, using {default}", flush=True)
            # keeps the fallback's own locale so callers can tell
            return parse_post_file(fallback, default)

    return None


def get_post_locales(slug: str, content_dir: str | Path | None = None) -> list[str]:
    return [loc for loc in CONFIG["locales"] if post_exists(loc, slug, content_dir)]


_OLDEST = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


def _published_key(post: dict):
    """(parsed?, UTC datetime) so unparseable dates sort last when reversed."""
    try:
        dt = datetime.datetime.fromisoformat(str(post["published_at"]).replace("Z", "+00:00"))
    except (KeyError, ValueError):
        return (False, _OLDEST)
    # bare dates and naive times count as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    return (True, dt.astimezone(datetime.timezone.utc))


def sort_posts_by_date(posts: list[dict]) -> list[dict]:
    """Newest first by actual instant. Stable, so equal dates keep their order."""
    return sorted(posts, key=_published_key, reverse=True)


def _meta(post: dict) -> dict:
    return {k: v for k, v in post.items() if k not in ("content", "headings")}


def get_blog_posts(locale: str = "en", content_dir: str | Path | None = None) -> list[dict]:
    """Metadata of every loadable post in one locale, newest first."""
    _check_locale(locale)
    folder = Path(content_dir or CONTENT_DIR) / locale
    if not folder.is_dir():
        return []
    posts = []
    for path in sorted(folder.glob(f"*{POST_EXT}")):
        post = parse_post_file(path, locale)
        if post is not None:
            posts.append(_meta(post))
    return sort_posts_by_date(posts)
