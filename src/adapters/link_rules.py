"""
Adapter mapping loaded Rules onto the links component's LinkRulesPort.
"""

from __future__ import annotations

from src.rules.models import Rules


class LinkRulesAdapter:
    """Adapter to map generic Rules to Links component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.links.source_link

    def get_source_url_template(self) -> str:
        return self._rules.url_template

    def get_source_link_title(self) -> str:
        return self._rules.title
