import pytest

from publisher.front_matter import front_matter_text

VALID_FM = {
    "title": "Hello",
    "description": "A first post",
    "publishedAt": "2024-01-15",
    "author": "Ada",
    "category": "tutorials",
    "tags": ["intro"],
}


def write_post(root, locale, slug, body="## Intro\n\nSome words here.\n", **fm):
    path = root / locale / f"{slug}.mdx"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(front_matter_text({**VALID_FM, **fm}) + body, encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path):
    return tmp_path / "posts"
