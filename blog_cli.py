import argparse, json, sys
from pathlib import Path
import yaml
from blog.config import CONFIG, CONTENT_DIR
from blog.headings import extract_headings
from blog.posts import get_blog_post, get_blog_posts, get_post_locales, get_post_path
from publisher.front_matter import build_front_matter_dict, front_matter_text, split_front_matter


def format_toc(headings: list[dict]) -> str:
    # h2 flush left, each deeper level indented two more spaces
    return "\n".join(f"{'  ' * (h['level'] - 2)}- [{h['text']}](#{h['id']})" for h in headings)


def cmd_toc(args) -> int:
    try:
        _fm, body = split_front_matter(Path(args.path).read_text(encoding="utf-8"))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f">> Cannot read {args.path}: {e}", flush=True)
        return 1
    toc = format_toc(extract_headings(body))
    if toc:
        print(toc)
    return 0


def cmd_show(args) -> int:
    post = get_blog_post(args.slug, args.locale, args.content_dir)
    if post is None:
        print(f">> Post not found: {args.slug} ({args.locale})", flush=True)
        return 1
    post.pop("content")
    print(json.dumps(post, ensure_ascii=False, indent=2))
    return 0


def cmd_list(args) -> int:
    posts = get_blog_posts(args.locale, args.content_dir)
    print(f">> {len(posts)} post(s) in {args.locale}", flush=True)
    for p in posts:
        print(f"{p['published_at']}  {p['slug']}  ({p['reading_time']} min)  {p['title']}")
    return 0


def cmd_locales(args) -> int:
    locales = get_post_locales(args.slug, args.content_dir)
    if not locales:
        print(f">> Post not found: {args.slug}", flush=True)
        return 1
    print(" ".join(locales))
    return 0


def cmd_new(args) -> int:
    fm, slug = build_front_matter_dict(
        title=args.title,
        description=args.description,
        author=args.author,
        category=args.category,
        tags=args.tag,
        difficulty=args.difficulty,
    )
    path = get_post_path(args.locale, slug, args.content_dir)
    if path.exists():
        print(f">> Refusing to overwrite {path}", flush=True)
        return 1
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(front_matter_text(fm) + f"## {args.title}\n", encoding="utf-8")
    print(f">> Wrote {path}", flush=True)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blog", description="Blog content tools")
    parser.add_argument("--content-dir", default=str(CONTENT_DIR), help="root of <locale>/<slug>.mdx files")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("toc", help="print the table of contents of a Markdown file")
    p.add_argument("path")
    p.set_defaults(func=cmd_toc)

    p = sub.add_parser("show", help="print a post's metadata and headings as JSON")
    p.add_argument("slug")
    p.add_argument("--locale", default=CONFIG["default_locale"], choices=CONFIG["locales"])
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("list", help="list posts newest first")
    p.add_argument("--locale", default=CONFIG["default_locale"], choices=CONFIG["locales"])
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("locales", help="locales a post is available in")
    p.add_argument("slug")
    p.set_defaults(func=cmd_locales)

    p = sub.add_parser("new", help="scaffold a new post")
    p.add_argument("title")
    p.add_argument("--locale", default=CONFIG["default_locale"], choices=CONFIG["locales"])
    p.add_argument("--description", required=True)
    p.add_argument("--author", required=True)
    p.add_argument("--category", default=CONFIG["categories"][0], choices=CONFIG["categories"])
    p.add_argument("--tag", action="append", default=[])
    p.add_argument("--difficulty", choices=CONFIG["difficulties"])
    p.set_defaults(func=cmd_new)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
