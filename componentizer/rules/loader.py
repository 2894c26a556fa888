from pathlib import Path

import yaml
from pydantic import ValidationError

from componentizer.rules.models import ComponentizerConfig


def _extract_yaml(content: str) -> str:
    """Return the first ```yaml fenced block, or the whole content if there is none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def parse_config(content: str) -> ComponentizerConfig:
    """
    Parse and validate configuration text.
    Raises ValueError on YAML syntax or schema errors.
    """
    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    try:
        return ComponentizerConfig.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e


def load_config(path: Path) -> ComponentizerConfig:
    """
    Load and validate the config file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")

    with open(path) as f:
        content = f.read()

    return parse_config(content)
