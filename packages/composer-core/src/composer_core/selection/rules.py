"""
Server model selection rules.

Rules are evaluated top to bottom and the first match wins. Order matters:
rule 2 matches every POWER configuration without a GPU, so rules 3a/3b only
ever fire for X86.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from composer_core.codebase.debug import spy_trace
from composer_core.models.hardware import CPUModel, ServerModel

_logger = logging.getLogger("composer.selection")

HIGH_DENSITY_MIN_MB = 524288
MAINFRAME_MIN_MB = 2048
RACK_SERVER_MIN_MB = 131072

Predicate = Callable[[CPUModel, int, bool], bool]


@dataclass(frozen=True)
class SelectionRule:
    code: str
    description: str
    applies: Predicate
    models: Tuple[ServerModel, ...]


SELECTION_RULES: Tuple[SelectionRule, ...] = (
    SelectionRule(
        code="1",
        description=f"GPU card, ARM CPU, memory >= {HIGH_DENSITY_MIN_MB:,} MB",
        applies=lambda cpu, mem, gpu: gpu and cpu is CPUModel.ARM and mem >= HIGH_DENSITY_MIN_MB,
        models=(ServerModel.HIGH_DENSITY_SERVER,),
    ),
    SelectionRule(
        code="2",
        description=f"No GPU card, Power CPU, memory >= {MAINFRAME_MIN_MB:,} MB",
        applies=lambda cpu, mem, gpu: not gpu and cpu is CPUModel.POWER and mem >= MAINFRAME_MIN_MB,
        models=(ServerModel.MAINFRAME, ServerModel.RACK_SERVER, ServerModel.TOWER_SERVER),
    ),
    SelectionRule(
        code="3a",
        description=f"No GPU card, Power or X86 CPU, memory >= {RACK_SERVER_MIN_MB:,} MB",
        applies=lambda cpu, mem, gpu: (
            not gpu and cpu in (CPUModel.POWER, CPUModel.X86) and mem >= RACK_SERVER_MIN_MB
        ),
        models=(ServerModel.TOWER_SERVER, ServerModel.RACK_SERVER),
    ),
    SelectionRule(
        code="3b",
        description=f"No GPU card, Power or X86 CPU, memory < {RACK_SERVER_MIN_MB:,} MB",
        applies=lambda cpu, mem, gpu: (
            not gpu and cpu in (CPUModel.POWER, CPUModel.X86) and mem < RACK_SERVER_MIN_MB
        ),
        models=(ServerModel.TOWER_SERVER,),
    ),
)

NO_MATCH_RULE = SelectionRule(
    code="5",
    description="No other rule matched",
    applies=lambda cpu, mem, gpu: True,
    models=(ServerModel.NO_OPTIONS,),
)


@spy_trace
def match_rule(cpu: CPUModel, memory_mb: int, gpu: bool) -> SelectionRule:
    """Return the first rule that applies, or the no-match rule."""
    cpu = CPUModel(cpu)
    for rule in SELECTION_RULES:
        if rule.applies(cpu, memory_mb, gpu):
            _logger.debug("Rule %s matched cpu=%s memory_mb=%d gpu=%s", rule.code, cpu, memory_mb, gpu)
            return rule
    _logger.debug("No rule matched cpu=%s memory_mb=%d gpu=%s", cpu, memory_mb, gpu)
    return NO_MATCH_RULE


def select_server_models(cpu: CPUModel, memory_mb: int, gpu: bool) -> List[ServerModel]:
    """Recommend server models for an already-validated configuration."""
    return list(match_rule(cpu, memory_mb, gpu).models)
