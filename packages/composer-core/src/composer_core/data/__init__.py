from .loader import load_yaml_typed
from .policy import DEFAULT_POLICY_PATH, load_composer_policy, load_composer_policy_typed

__all__ = [
    "DEFAULT_POLICY_PATH",
    "load_composer_policy",
    "load_composer_policy_typed",
    "load_yaml_typed",
]
