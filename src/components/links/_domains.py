"""
Registrable domain extraction.

Wraps tldextract with the bundled public suffix snapshot held in memory, so
extraction neither fetches the live list nor writes a disk cache. Malformed
input yields None, never an error.
"""

from __future__ import annotations

import re

import tldextract


def build_extractor() -> tldextract.TLDExtract:
    """Extractor over the bundled snapshot, with no disk cache."""
    return tldextract.TLDExtract(cache_dir=None, suffix_list_urls=())


_EXTRACTOR = build_extractor()

_LABEL_RE = re.compile(r"^[\w-]+$")


def split_domain(url: str) -> tuple[str, str] | None:
    """
    Split the hostname of url into (domain, public suffix).

    Examples:
        "https://api.github.com/x" -> ("github", "com")
        "https://x.example"        -> ("x", "example")
        "http://127.0.0.1"         -> None
        "localhost"                -> None
    """
    ext = _EXTRACTOR(url)
    if ext.ipv4 or ext.ipv6:
        return None

    domain = ext.domain.lower()
    suffix = ext.suffix.lower()

    # Suffix not on the list: the rightmost label is the suffix.
    if not suffix and ext.subdomain:
        suffix = domain
        domain = ext.subdomain.rsplit(".", 1)[-1].lower()

    if not domain or not suffix:
        return None

    if not all(_LABEL_RE.match(label) for label in (domain, *suffix.split("."))):
        return None

    return domain, suffix


def domain_without_suffix(url: str) -> str | None:
    """Registrable domain without its public suffix ("github")."""
    parts = split_domain(url)
    return parts[0] if parts else None


def domain_with_suffix(url: str) -> str | None:
    """Registrable domain including its public suffix ("github.com")."""
    parts = split_domain(url)
    return f"{parts[0]}.{parts[1]}" if parts else None
