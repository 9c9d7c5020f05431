"""
Links component - Data models.

Classified links and the input/output DTOs for link resolution.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, get_args

# --- Types ---

# Domains with special casing (custom icons and titles).
KnownDomain = Literal["github", "twitter", "instagram", "youtube", "reddit"]

KNOWN_DOMAINS: frozenset[str] = frozenset(get_args(KnownDomain))

LinkIcon = Literal["github", "twitter", "instagram", "youtube", "reddit", "link"]

InputURLs = Sequence[str | None] | None


# --- Core Record ---


@dataclass(frozen=True)
class ClassifiedLink:
    """
    A link with the known domain (if any) deduced from its URL.

    title is the tooltip/accessibility text: the display name of the known
    domain, else the bare domain with its suffix, else None.
    """

    url: str
    category: KnownDomain | None = None
    title: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class MergeLinksInput:
    """Input for resolving the links shown on a page."""

    page_identifier: str  # e.g. "/alice/my-page"
    page_urls: InputURLs = None
    user_urls: InputURLs = None


@dataclass(frozen=True)
class UserLinksInput:
    """Input for resolving the links shown on a user's home page."""

    urls: InputURLs = None


# --- Output Models ---


@dataclass(frozen=True)
class MergeLinksOutput:
    """Output from page link resolution."""

    links: tuple[ClassifiedLink, ...]
    dropped: tuple[ClassifiedLink, ...]
    source_link: ClassifiedLink

    @property
    def total(self) -> int:
        return len(self.links)


@dataclass(frozen=True)
class UserLinksOutput:
    """Output from user home page link resolution."""

    links: tuple[ClassifiedLink, ...]

    @property
    def total(self) -> int:
        return len(self.links)
