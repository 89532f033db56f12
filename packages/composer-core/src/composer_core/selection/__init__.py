from .rules import NO_MATCH_RULE, SELECTION_RULES, SelectionRule, match_rule, select_server_models

__all__ = [
    "NO_MATCH_RULE",
    "SELECTION_RULES",
    "SelectionRule",
    "match_rule",
    "select_server_models",
]
