# composer_core/data/policy.py
from __future__ import annotations

import logging
from pathlib import Path

from composer_core.data.loader import load_yaml_typed
from composer_core.models.policy import ComposerPolicy

DEFAULT_POLICY_PATH = Path("doctrine/composer-policy.yaml")

_logger = logging.getLogger("composer.policy")


def load_composer_policy_typed(path: str | Path) -> ComposerPolicy:
    """Strongly-typed policy loader (Pydantic v2). Raises if the file is missing or malformed."""
    return load_yaml_typed(Path(path), model=ComposerPolicy)


def load_composer_policy(path: str | Path | None = None) -> ComposerPolicy:
    """Load the composer policy, falling back to built-in defaults.

    An explicit ``path`` must exist. Without one, ``doctrine/composer-policy.yaml``
    is used when present and the defaults otherwise.
    """
    if path is not None:
        policy = load_composer_policy_typed(path)
        _logger.debug("Loaded composer policy from %s: %s", path, policy.memory)
        return policy

    if DEFAULT_POLICY_PATH.is_file():
        policy = load_composer_policy_typed(DEFAULT_POLICY_PATH)
        _logger.debug("Loaded composer policy from %s: %s", DEFAULT_POLICY_PATH, policy.memory)
        return policy

    _logger.debug("No policy at %s; using built-in defaults", DEFAULT_POLICY_PATH)
    return ComposerPolicy()
