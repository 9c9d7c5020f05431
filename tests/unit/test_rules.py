"""
Rules schema validation tests.

Verifies that the rules loader validates rules.yaml structure and that the
adapter exposes the source link settings to the links component.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.link_rules import LinkRulesAdapter
from src.components.links import (
    DEFAULT_SOURCE_URL_TEMPLATE,
    SOURCE_LINK_TITLE,
    MergeLinksInput,
    run,
)
from src.rules.loader import load_rules

VALID_RULES = """\
project:
  slug: test
  rules_version: "1"
links:
  source_link:
    url_template: "https://example.com/src{page_identifier}"
    title: "Source"
"""


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_project_rules_file(self, project_rules_path: Path) -> None:
        """Shipped rules file matches the built-in defaults."""
        rules = load_rules(project_rules_path)
        assert rules.project.slug == "link-resolver"
        assert rules.links.source_link.url_template == DEFAULT_SOURCE_URL_TEMPLATE
        assert rules.links.source_link.title == SOURCE_LINK_TITLE

    def test_load_valid_rules(self, write_rules) -> None:
        rules = load_rules(write_rules(VALID_RULES))
        assert rules.links.source_link.title == "Source"

    def test_load_nonexistent_file_raises(self) -> None:
        """Loading nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_rules(Path("/nonexistent/path/rules.yaml"))

    def test_load_invalid_yaml_raises(self, write_rules) -> None:
        """Loading invalid YAML raises ValueError."""
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write_rules("invalid: yaml: content: ["))

    def test_markdown_fence_stripped(self, write_rules) -> None:
        """YAML inside a markdown code fence is extracted."""
        content = f"# Link rules\n\nSome notes.\n\n```yaml\n{VALID_RULES}```\n\nMore notes.\n"
        rules = load_rules(write_rules(content, name="rules.md"))
        assert rules.project.slug == "test"


class TestRulesSchemaValidation:
    """Test rules schema validation."""

    def test_missing_section_fails(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules('project:\n  slug: test\n  rules_version: "1"\n'))

    def test_template_without_page_identifier_fails(self, write_rules) -> None:
        content = VALID_RULES.replace("src{page_identifier}", "src")
        with pytest.raises(ValueError, match="page_identifier"):
            load_rules(write_rules(content))

    def test_template_with_unknown_field_fails(self, write_rules) -> None:
        content = VALID_RULES.replace("/src{", "/{repo}{")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules(content))

    def test_empty_title_fails(self, write_rules) -> None:
        content = VALID_RULES.replace('title: "Source"', 'title: ""')
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules(content))


class TestLinkRulesAdapter:
    """Test mapping Rules onto the links component port."""

    def test_adapter_exposes_source_link(self, write_rules) -> None:
        adapter = LinkRulesAdapter(load_rules(write_rules(VALID_RULES)))
        assert adapter.get_source_url_template() == (
            "https://example.com/src{page_identifier}"
        )
        assert adapter.get_source_link_title() == "Source"

    def test_adapter_drives_run(self, write_rules) -> None:
        adapter = LinkRulesAdapter(load_rules(write_rules(VALID_RULES)))
        result = run(MergeLinksInput(page_identifier="/a/p"), adapter)
        assert result.source_link.url == "https://example.com/src/a/p"
        assert result.source_link.title == "Source"
