"""
Engine module - strategy resolution and the self-healing facade.
"""

from healing_locators.engine.strategy_resolver import (
    AttemptSource,
    Candidate,
    StrategyAttempt,
    LocateResult,
    StrategyResolver,
)
from healing_locators.engine.self_healing import (
    ResolutionState,
    Resolution,
    SelfHealingResolver,
    create_resolver,
)

__all__ = [
    "AttemptSource",
    "Candidate",
    "StrategyAttempt",
    "LocateResult",
    "StrategyResolver",
    "ResolutionState",
    "Resolution",
    "SelfHealingResolver",
    "create_resolver",
]
