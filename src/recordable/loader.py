from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

import yaml

from .action_types import ActionTypes, DEFAULT_ACTION_TYPES

logger = logging.getLogger(__name__)


def load_action_types(path: Optional[str | Path]) -> ActionTypes:
    """
    Load control-action identifiers from a YAML file.

    The four keys may sit under an `action_types:` section or at top level:

        action_types:
          BACK: UNDO
          FORWARD: REDO
          TOGGLE_RECORDING: PAUSE_HISTORY
          CLEAR_RECORDING: RESET_HISTORY

    No path, or a path that does not exist, yields the defaults. A partial
    mapping raises IncompleteActionTypesError.
    """
    if not path:
        return DEFAULT_ACTION_TYPES
    p = Path(path)
    if not p.exists():
        logger.warning("action-type config not found: %s (using defaults)", p)
        return DEFAULT_ACTION_TYPES

    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a mapping at top level")
    section = data.get("action_types", data)
    if not isinstance(section, dict):
        raise ValueError(f"{p}: 'action_types' must be a mapping")

    types = ActionTypes.from_mapping(section)
    logger.info("Loaded action types from %s", p)
    return types
