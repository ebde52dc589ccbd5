import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from tokensync.rules.models import BuildRules

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "tokensync.yaml"
RULES_ENV_VAR = "TOKENSYNC_RULES"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """Explicit path, then $TOKENSYNC_RULES, then tokensync.yaml at the project root."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(RULES_ENV_VAR)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def load_rules(path: Path) -> BuildRules:
    """
    Load and validate the build rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return BuildRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def resolve_relative(rules_path: Path, target: str) -> Path:
    """Resolve a path from the rules file relative to the file's directory."""
    candidate = Path(target)
    if candidate.is_absolute():
        return candidate
    return rules_path.parent / candidate
