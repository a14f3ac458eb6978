from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError as PydanticValidationError

from chartlock_common.errors import ChartlockError, ValidationError
from chartlock_common.logger import get_logger
from chartlock_schema import HelmState

from ..utils.yaml_loader import load_yaml

logger = get_logger(__name__)


def load_state(path: str) -> HelmState:
    """Load and validate a state file from the filesystem.

    Templated state files (``.gotmpl``) are read as plain YAML; rendering
    templates is left to the tool that produced the file.

    Args:
        path: Path to the state file (typically "helmfile.yaml")

    Returns:
        Validated HelmState with ``file_path`` set to ``path``

    Raises:
        ValidationError: If the file is missing, is not valid YAML, or does
            not match the state schema

    Example:
        >>> state = load_state("helmfile.yaml")
        >>> [r.chart for r in state.releases]
        ['stable/envoy', './charts/app']
    """
    file_path = Path(path)
    if not file_path.exists():
        raise ValidationError(
            f"State file not found: {path}\n"
            f"Make sure the file exists and the path is correct."
        )

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = load_yaml(f)
    except yaml.YAMLError as e:
        raise ValidationError(
            f"Invalid YAML in state file: {path}\n"
            f"Error: {str(e)}"
        ) from e
    except OSError as e:
        raise ValidationError(f"Failed to read state file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError(
            f"State file {path} must contain a mapping at the top level, "
            f"got {type(data).__name__}"
        )

    try:
        state = HelmState.model_validate(data)
    except ValidationError:
        raise
    except (PydanticValidationError, ChartlockError) as e:
        raise ValidationError(f"Invalid state file {path}:\n{e}") from e

    logger.debug("Loaded state file", path=path, releases=len(state.releases))
    return state.model_copy(update={"file_path": str(file_path)})


def dump_state(state: HelmState) -> str:
    """Render a state document back to YAML (``file_path`` is omitted)."""
    data: Dict[str, Any] = state.model_dump(exclude_none=True)
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
