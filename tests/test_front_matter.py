import datetime

import pytest
import yaml

from publisher.front_matter import build_front_matter_dict, front_matter_text, split_front_matter


def test_split_front_matter():
    fm, body = split_front_matter("---\ntitle: Hi\ntags: [a, b]\n---\n\n## Body\n")
    assert fm == {"title": "Hi", "tags": ["a", "b"]}
    assert body == "\n## Body\n"


def test_no_front_matter_returns_whole_text():
    assert split_front_matter("## Only body\n") == ({}, "## Only body\n")
    assert split_front_matter("") == ({}, "")


def test_empty_front_matter():
    assert split_front_matter("---\n---\nbody") == ({}, "body")


def test_dates_become_iso_strings():
    fm, _ = split_front_matter("---\npublishedAt: 2024-01-15\n---\n")
    assert fm["publishedAt"] == "2024-01-15"


def test_bom_and_crlf():
    fm, body = split_front_matter("\ufeff---\r\ntitle: Hi\r\n---\r\nbody\r\n")
    assert fm == {"title": "Hi"}
    assert body == "body\r\n"


def test_unterminated_front_matter():
    with pytest.raises(ValueError):
        split_front_matter("---\ntitle: Hi\n\n## Body\n")


def test_non_mapping_front_matter():
    with pytest.raises(ValueError):
        split_front_matter("---\n- a\n- b\n---\n")


def test_malformed_yaml():
    with pytest.raises(yaml.YAMLError):
        split_front_matter("---\ntitle: [unclosed\n---\n")


def test_front_matter_text_round_trip():
    fm = {"title": "Día uno", "tags": ["a"]}
    text = front_matter_text(fm)
    assert text.startswith("---\n") and text.endswith("---\n\n")
    assert "Día uno" in text
    assert split_front_matter(text + "body") == (fm, "\nbody")


def test_build_front_matter_dict():
    fm, slug = build_front_matter_dict(
        title="Hello, World!", description="d", author="a", category="news",
        tags=["x", 1], date=datetime.date(2024, 5, 6), difficulty="beginner",
    )
    assert slug == "hello-world"
    assert fm == {
        "title": "Hello, World!",
        "description": "d",
        "publishedAt": "2024-05-06",
        "author": "a",
        "category": "news",
        "tags": ["x", "1"],
        "difficulty": "beginner",
    }
