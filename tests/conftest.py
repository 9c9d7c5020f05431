from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules_path() -> Path:
    """Path to the rules.yaml shipped at the project root."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def write_rules(tmp_path):
    """
    Returns a helper writing a rules file into a temp dir.
    """

    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
