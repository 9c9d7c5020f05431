"""
Links component - Link classification and merging.

Classifies page and user profile URLs against known domains and merges
them, with the page's source link, into one deduplicated list.
"""

from .component import (
    DEFAULT_SOURCE_URL_TEMPLATE,
    SOURCE_LINK_TITLE,
    build_source_link,
    build_source_url,
    classify,
    classify_all,
    classify_user_links,
    dedupe_by_category,
    icon_for_link,
    is_known_domain,
    merge_page_links,
    run,
    run_user_links,
    title_for_known_domain,
)
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

__all__ = [
    # Entry points
    "run",
    "run_user_links",
    # Pure functions
    "classify",
    "classify_all",
    "classify_user_links",
    "merge_page_links",
    "dedupe_by_category",
    "build_source_url",
    "build_source_link",
    "is_known_domain",
    "title_for_known_domain",
    "icon_for_link",
    # Constants
    "DEFAULT_SOURCE_URL_TEMPLATE",
    "SOURCE_LINK_TITLE",
    "KNOWN_DOMAINS",
    # Models
    "ClassifiedLink",
    "InputURLs",
    "KnownDomain",
    "LinkIcon",
    "MergeLinksInput",
    "MergeLinksOutput",
    "UserLinksInput",
    "UserLinksOutput",
    # Ports
    "LinkRulesPort",
]
