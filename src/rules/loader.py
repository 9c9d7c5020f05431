from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules


def _strip_yaml_fence(content: str) -> str:
    """
    Return the body of the first ```yaml fenced block, if any.

    Rules files may be written as markdown with the YAML in a code fence;
    plain YAML files are returned unchanged.
    """
    yaml_lines: list[str] = []
    in_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if not in_block and s_line.startswith("```yaml"):
            in_block = True
            continue
        if in_block and s_line.startswith("```"):
            return "\n".join(yaml_lines)
        if in_block:
            yaml_lines.append(line)

    # Unterminated fence: take everything after the opener
    if in_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the link rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_yaml_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e
