"""
Config Loader - YAML configuration loading with Pydantic validation.

Game configurations are plain YAML mappings whose keys match the fields of
the game's pydantic config model. Unknown keys and out-of-range values are
rejected by the model itself.

Examples:
    >>> from games.Hammer.config import HammerConfig
    >>> config = load_model("frantic.yaml", HammerConfig)
"""
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

import yaml
from pydantic import BaseModel

from rectsim.logging import get_logger

log = get_logger('config_loader')

M = TypeVar('M', bound=BaseModel)


def read_yaml_mapping(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML file that must contain a mapping.

    Args:
        path: YAML file path

    Returns:
        Parsed mapping (empty dict for an empty file)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is not a mapping
        yaml.YAMLError: If the YAML syntax is malformed
    """
    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Config file '{yaml_path}' must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_model(path: Union[str, Path], model_cls: Type[M], **overrides: Any) -> M:
    """Load a YAML file and validate it into `model_cls`.

    Args:
        path: YAML file path
        model_cls: Pydantic model to validate against
        **overrides: Values that take precedence over the file

    Returns:
        Validated model instance

    Raises:
        FileNotFoundError, ValueError, yaml.YAMLError: See read_yaml_mapping
        pydantic.ValidationError: If the values violate the model
    """
    data = read_yaml_mapping(path)
    data.update(overrides)
    log.debug("loaded %s from %s", model_cls.__name__, path)
    return model_cls.model_validate(data)
