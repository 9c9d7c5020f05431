"""
Links component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class LinkRulesPort(Protocol):
    """Port for link resolution rules configuration."""

    def get_source_url_template(self) -> str:
        """Template for the page source URL, with a {page_identifier} field."""
        ...

    def get_source_link_title(self) -> str:
        """Title shown on the page source link."""
        ...
