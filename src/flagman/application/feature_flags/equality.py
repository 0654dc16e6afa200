"""Application feature flags – structural equality between flag definitions."""
from __future__ import annotations

from collections.abc import Sequence

from flagman.application.feature_flags.feature_flag import FeatureFlag, Scope, Strategy
from flagman.kernel.types import values_equal


def structurally_equal(a: FeatureFlag, b: FeatureFlag) -> bool:
    """Return ``True`` when *a* and *b* describe the same remote state.

    Name, description and active state must match. Strategies are compared
    pairwise by position (their order is significant); within a strategy the
    parameters must be deep-equal and the scopes must cover the same set of
    environments regardless of order.
    """
    if a.name != b.name or a.description != b.description or a.active != b.active:
        return False
    if len(a.strategies) != len(b.strategies):
        return False
    return all(_strategies_equal(x, y) for x, y in zip(a.strategies, b.strategies))


def _strategies_equal(a: Strategy, b: Strategy) -> bool:
    if a.name != b.name:
        return False
    if not values_equal(a.parameters, b.parameters):
        return False
    return scopes_equal(a.scopes, b.scopes)


def scopes_equal(a: Sequence[Scope], b: Sequence[Scope]) -> bool:
    """Equal length and the same set of environments.

    Containment is checked in both directions so that duplicate
    environments on one side cannot hide a missing one:
    ``[prod, prod]`` and ``[prod, staging]`` are not equal.
    """
    if len(a) != len(b):
        return False
    return {scope.environment for scope in a} == {scope.environment for scope in b}


__all__ = ["scopes_equal", "structurally_equal"]
