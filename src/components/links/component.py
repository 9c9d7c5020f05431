"""
Links component - Link classification and merging.

Classifies raw URLs against a fixed set of known domains and merges the
links declared on a page, its source link, and the links declared on the
owning user's home page into one deduplicated list.

Invariants:
- category is always a KnownDomain member or None
- title is never the empty string
- A merged list never holds two links with the same category
- Unclassified links are never deduplicated
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TypeGuard, assert_never

from ._domains import domain_with_suffix, domain_without_suffix
from .models import (
    KNOWN_DOMAINS,
    ClassifiedLink,
    InputURLs,
    KnownDomain,
    LinkIcon,
    MergeLinksInput,
    MergeLinksOutput,
    UserLinksInput,
    UserLinksOutput,
)
from .ports import LinkRulesPort

logger = logging.getLogger(__name__)

# --- Default Configuration ---

DEFAULT_SOURCE_URL_TEMPLATE = (
    "https://github.com/mrmr-io/m/tree/main/users{page_identifier}"
)

SOURCE_LINK_TITLE = "View source on GitHub"


# --- Pure Functions (Functional Core) ---


def is_known_domain(s: str) -> TypeGuard[KnownDomain]:
    """Check whether s is one of the known domains (exact match)."""
    return s in KNOWN_DOMAINS


def title_for_known_domain(domain: KnownDomain) -> str:
    """Human readable title for a known domain."""
    match domain:
        case "github":
            return "GitHub"
        case "twitter":
            return "Twitter"
        case "instagram":
            return "Instagram"
        case "youtube":
            return "YouTube"
        case "reddit":
            return "Reddit"
        case _:
            assert_never(domain)


def icon_for_link(link: ClassifiedLink) -> LinkIcon:
    """Icon to render for a link; "link" is the generic fallback."""
    category = link.category
    match category:
        case None:
            return "link"
        case "github" | "twitter" | "instagram" | "youtube" | "reddit":
            return category
        case _:
            assert_never(category)


def classify(url: str) -> ClassifiedLink:
    """
    Classify a single URL.

    Known domains get their special cased title, anything else uses the
    domain itself (including the suffix) as the title.

    Args:
        url: Any string; malformed input yields no category and no title

    Returns:
        ClassifiedLink wrapping the unmodified url
    """
    domain = domain_without_suffix(url)
    if domain is not None and is_known_domain(domain):
        return ClassifiedLink(
            url=url, category=domain, title=title_for_known_domain(domain)
        )
    return ClassifiedLink(url=url, category=None, title=domain_with_suffix(url))


def classify_all(urls: InputURLs) -> list[ClassifiedLink]:
    """Classify a list of URLs, skipping missing entries."""
    if not urls:
        return []
    return [classify(url) for url in urls if url is not None]


# The user's home page applies no extra business logic.
classify_user_links = classify_all


def build_source_url(
    page_identifier: str,
    template: str = DEFAULT_SOURCE_URL_TEMPLATE,
) -> str:
    """
    Build the URL of a page's source in the canonical repository.

    Args:
        page_identifier: Path-like page identifier (e.g., "/alice/my-page")
        template: URL template with a {page_identifier} field

    Returns:
        Source URL
    """
    return template.format(page_identifier=page_identifier)


def build_source_link(
    page_identifier: str,
    template: str = DEFAULT_SOURCE_URL_TEMPLATE,
    title: str = SOURCE_LINK_TITLE,
) -> ClassifiedLink:
    """Classified source link, with its title always overridden."""
    link = classify(build_source_url(page_identifier, template))
    return replace(link, title=title)


def dedupe_by_category(
    links: list[ClassifiedLink],
) -> tuple[list[ClassifiedLink], list[ClassifiedLink]]:
    """
    Keep the first link of each known domain.

    Returns:
        Tuple of (kept, dropped), both in input order
    """
    seen: set[KnownDomain] = set()
    kept: list[ClassifiedLink] = []
    dropped: list[ClassifiedLink] = []

    for link in links:
        category = link.category
        if category is not None:
            if category in seen:
                dropped.append(link)
                continue
            seen.add(category)
        kept.append(link)

    return kept, dropped


def _resolve_page_links(
    page_urls: InputURLs,
    user_urls: InputURLs,
    page_identifier: str,
    source_url_template: str,
    source_title: str,
) -> tuple[list[ClassifiedLink], list[ClassifiedLink], ClassifiedLink]:
    """Returns (kept, dropped, source_link)."""
    source_link = build_source_link(page_identifier, source_url_template, source_title)
    kept, dropped = dedupe_by_category(
        [*classify_all(page_urls), source_link, *classify_all(user_urls)]
    )
    return kept, dropped, source_link


def merge_page_links(
    page_urls: InputURLs,
    user_urls: InputURLs,
    page_identifier: str,
    *,
    source_url_template: str = DEFAULT_SOURCE_URL_TEMPLATE,
    source_title: str = SOURCE_LINK_TITLE,
) -> list[ClassifiedLink]:
    """
    Merge the links shown on a page.

    Order is page links, then the page's source link, then the user's home
    page links. Only the first link of each known domain survives, so a page
    that already links to GitHub drops its source link entirely.

    Args:
        page_urls: URLs from the page's frontmatter
        user_urls: URLs from the user's home page frontmatter
        page_identifier: Page path, used only to build the source link
        source_url_template: Template for the source link URL
        source_title: Title override for the source link

    Returns:
        Deduplicated links in merge order
    """
    kept, _, _ = _resolve_page_links(
        page_urls, user_urls, page_identifier, source_url_template, source_title
    )
    return kept


# --- Component Entry Points (Shell Layer) ---


def run(inp: MergeLinksInput, rules: LinkRulesPort | None = None) -> MergeLinksOutput:
    """
    Resolve the links shown on a page.

    Uses the source link template and title from rules when given,
    the module defaults otherwise.
    """
    template = DEFAULT_SOURCE_URL_TEMPLATE
    title = SOURCE_LINK_TITLE
    if rules is not None:
        template = rules.get_source_url_template()
        title = rules.get_source_link_title()

    kept, dropped, source_link = _resolve_page_links(
        inp.page_urls, inp.user_urls, inp.page_identifier, template, title
    )

    logger.debug(
        f"Resolved {len(kept)} links for {inp.page_identifier} "
        f"({len(dropped)} duplicate known domains dropped)"
    )

    return MergeLinksOutput(
        links=tuple(kept),
        dropped=tuple(dropped),
        source_link=source_link,
    )


def run_user_links(inp: UserLinksInput) -> UserLinksOutput:
    """Resolve the links shown on a user's home page."""
    links = tuple(classify_user_links(inp.urls))
    return UserLinksOutput(links=links)
