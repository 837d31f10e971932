"""
Seed loader utility for DesignDesk.

Loads the YAML fixtures used to populate the store on first run.
"""

from pathlib import Path
from typing import Any
import yaml


# Default seed file shipped with the package
SEED_DIR = Path(__file__).parent.parent / "data"
DEFAULT_SEED_NAME = "seed"


def load_seed(name: str = DEFAULT_SEED_NAME, seed_dir: Path | None = None) -> dict[str, Any]:
    """
    Load a seed fixture by name.

    Args:
        name: Seed name without .yaml extension (e.g., "seed")
        seed_dir: Optional custom seed directory

    Returns:
        Dict of camelCase collections (designers, skills, learningModules,
        projects, tests, lessons). Collections absent from the file are
        simply missing; the store fills them with empty lists.

    Raises:
        FileNotFoundError: If seed file doesn't exist
        ValueError: If the file is not a YAML mapping
        yaml.YAMLError: If YAML parsing fails
    """
    dir_path = seed_dir or SEED_DIR
    file_path = dir_path / f"{name}.yaml"

    if not file_path.exists():
        raise FileNotFoundError(f"Seed fixture not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Seed fixture must be a mapping: {file_path}")
    return data


def get_available_seeds(seed_dir: Path | None = None) -> list[str]:
    """List all available seed fixtures (without .yaml extension)."""
    dir_path = seed_dir or SEED_DIR
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))
