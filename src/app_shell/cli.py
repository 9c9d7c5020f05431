import argparse
import json
import logging
import sys
from pathlib import Path

from src.adapters.link_rules import LinkRulesAdapter
from src.components.links import (
    ClassifiedLink,
    MergeLinksInput,
    UserLinksInput,
    icon_for_link,
    run,
    run_user_links,
)
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: Path) -> LinkRulesAdapter:
    if not path.exists():
        logger.error(f"Rules file {path} not found.")
        sys.exit(1)

    try:
        rules = load_rules(path)
    except ValueError as e:
        logger.error(f"Invalid rules file {path}: {e}")
        sys.exit(1)
    return LinkRulesAdapter(rules)


def link_to_dict(link: ClassifiedLink) -> dict[str, str | None]:
    return {
        "url": link.url,
        "category": link.category,
        "title": link.title,
        "icon": icon_for_link(link),
    }


def print_links(links: tuple[ClassifiedLink, ...]) -> None:
    print(json.dumps([link_to_dict(link) for link in links], indent=2))


def handle_page(args: argparse.Namespace) -> None:
    rules = get_rules(Path(args.rules))
    result = run(
        MergeLinksInput(
            page_identifier=args.page_identifier,
            page_urls=args.page_urls,
            user_urls=args.user_urls,
        ),
        rules,
    )
    for link in result.dropped:
        logger.info(f"Dropped duplicate {link.category} link: {link.url}")
    print_links(result.links)


def handle_user(args: argparse.Namespace) -> None:
    result = run_user_links(UserLinksInput(urls=args.urls))
    print_links(result.links)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Link Resolver CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # page
    page_parser = subparsers.add_parser("page", help="Resolve the links shown on a page")
    page_parser.add_argument("page_identifier", help="Page path, e.g. /alice/my-page")
    page_parser.add_argument(
        "--page-url",
        dest="page_urls",
        action="append",
        default=[],
        help="URL from the page's frontmatter (repeatable)",
    )
    page_parser.add_argument(
        "--user-url",
        dest="user_urls",
        action="append",
        default=[],
        help="URL from the user's home page frontmatter (repeatable)",
    )
    page_parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")

    # user
    user_parser = subparsers.add_parser("user", help="Resolve the links on a user's home page")
    user_parser.add_argument("urls", nargs="*", help="URLs from the user's home page")

    args = parser.parse_args(argv)

    if args.command == "page":
        handle_page(args)
    elif args.command == "user":
        handle_user(args)


if __name__ == "__main__":
    main()
