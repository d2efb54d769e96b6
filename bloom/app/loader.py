from __future__ import annotations
import dataclasses
import logging
from pathlib import Path
import yaml
from typing import Tuple, Dict, Any

from bloom.api.config import EngineConfig
from bloom.api.params import ParameterStore

logger = logging.getLogger(__name__)

ANIMATION_KEYS = ("duration_ms", "easing", "fps")


def load_preset(path: Path) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Reads a preset YAML and returns (params, animation):

        params:
          repeat_count: 35
          amplitude: 300
          color1: "#ff111c"
        animation:
          duration_ms: 8000
          easing: cubic_in_out

    Both sections are optional. Unknown keys are rejected.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing preset file {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    unknown = set(data) - {"params", "animation"}
    if unknown:
        raise ValueError(f"{path}: unknown sections {sorted(unknown)}")

    params = data.get("params") or {}
    animation = data.get("animation") or {}
    if not isinstance(params, dict) or not isinstance(animation, dict):
        raise ValueError(f"{path}: 'params' and 'animation' must be mappings")

    bad = set(params) - set(ParameterStore.names())
    if bad:
        raise ValueError(f"{path}: unknown params {sorted(bad)}")
    bad = set(animation) - set(ANIMATION_KEYS)
    if bad:
        raise ValueError(f"{path}: unknown animation keys {sorted(bad)}")

    logger.debug("loaded preset %s", path)
    return params, animation


def apply_animation(cfg: EngineConfig, animation: Dict[str, Any]) -> EngineConfig:
    """Returns a copy of cfg with the preset's animation values applied."""
    changes = {}
    if "duration_ms" in animation:
        changes["duration_ms"] = float(animation["duration_ms"])
    if "easing" in animation:
        changes["easing"] = str(animation["easing"])
    if "fps" in animation:
        changes["fps"] = int(animation["fps"])
    return dataclasses.replace(cfg, **changes)
