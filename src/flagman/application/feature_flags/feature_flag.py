"""Application feature flags – FeatureFlag, Strategy and Scope value objects.

The dict shape used by :meth:`FeatureFlag.from_dict` / :meth:`FeatureFlag.to_dict`
is the GitLab feature-flag payload, which is also the shape of each entry in
the desired-state YAML document::

    name: new_checkout
    description: New checkout flow
    active: true
    strategies:
      - name: gradualRolloutUserId
        parameters: {percentage: "50", groupId: default}
        scopes:
          - environment_scope: production
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from flagman.kernel.types import Value


@dataclasses.dataclass(frozen=True)
class Scope:
    """Environment a strategy applies to."""
    environment: str

    @classmethod
    def from_dict(cls, data: Any) -> "Scope":
        if not isinstance(data, Mapping):
            raise TypeError(f"scope must be a mapping, got {type(data).__name__}")
        return cls(environment=_string(data.get("environment_scope"), "environment_scope"))

    def to_dict(self) -> dict[str, Any]:
        return {"environment_scope": self.environment}


@dataclasses.dataclass(frozen=True)
class Strategy:
    """Rollout strategy: name, free-form parameters and environment scopes."""
    name: str
    parameters: Mapping[str, Value] = dataclasses.field(default_factory=dict)
    scopes: tuple[Scope, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Strategy":
        if not isinstance(data, Mapping):
            raise TypeError(f"strategy must be a mapping, got {type(data).__name__}")
        raw_parameters = data.get("parameters")
        if raw_parameters is None:
            raw_parameters = {}
        if not isinstance(raw_parameters, Mapping):
            raise TypeError(f"strategy parameters must be a mapping, got {type(raw_parameters).__name__}")
        parameters: dict[str, Value] = {}
        for key, item in raw_parameters.items():
            if not isinstance(key, str):
                raise TypeError(f"parameter names must be strings, got {key!r}")
            parameters[key] = Value.of(item)
        return cls(
            name=_string(data.get("name"), "strategy name"),
            parameters=parameters,
            scopes=tuple(Scope.from_dict(scope) for scope in _sequence(data.get("scopes"), "scopes")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "parameters": {key: value.to_plain() for key, value in self.parameters.items()},
            "scopes": [scope.to_dict() for scope in self.scopes],
        }


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """A feature flag definition, keyed by ``name``.

    Dataclass equality is plain field equality; use
    :func:`~flagman.application.feature_flags.equality.structurally_equal`
    to decide whether a remote flag needs replacing.
    """
    name: str
    description: str = ""
    active: bool = False
    strategies: tuple[Strategy, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "FeatureFlag":
        """Build a flag from decoded JSON/YAML data.

        Unknown keys (ids, versions, timestamps returned by the service) are
        ignored. Raises :class:`TypeError` or :class:`ValueError` on a
        malformed payload.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"feature flag must be a mapping, got {type(data).__name__}")
        name = _string(data.get("name"), "name")
        if not name:
            raise ValueError("feature flag name must not be empty")
        active = data.get("active", False)
        if not isinstance(active, bool):
            raise TypeError(f"flag {name!r}: active must be a boolean, got {active!r}")
        return cls(
            name=name,
            description=_string(data.get("description"), "description"),
            active=active,
            strategies=tuple(
                Strategy.from_dict(strategy)
                for strategy in _sequence(data.get("strategies"), "strategies")
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "active": self.active,
            "strategies": [strategy.to_dict() for strategy in self.strategies],
        }


def _string(value: Any, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}")
    return value


def _sequence(value: Any, field: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{field} must be a list, got {type(value).__name__}")
    return value


__all__ = ["FeatureFlag", "Scope", "Strategy"]
