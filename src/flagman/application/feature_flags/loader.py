"""Application feature flags – desired-state loader (YAML document)."""
from __future__ import annotations

import pathlib
from typing import Any

import yaml

from flagman.application.feature_flags.feature_flag import FeatureFlag
from flagman.kernel.errors import DesiredStateError

YAML_SUFFIXES = (".yaml", ".yml")


def parse_desired_flags(document: Any) -> list[FeatureFlag]:
    """Turn an already-decoded YAML document into flags.

    The document must be a list of flag mappings; an empty document
    (``None``) is an empty desired set. Flag names must be unique.
    """
    if document is None:
        return []
    if not isinstance(document, list):
        raise DesiredStateError(
            f"error unmarshalling YAML: expected a list of flags, got {type(document).__name__}"
        )
    flags: list[FeatureFlag] = []
    seen: set[str] = set()
    for index, entry in enumerate(document):
        try:
            flag = FeatureFlag.from_dict(entry)
        except (TypeError, ValueError) as exc:
            raise DesiredStateError(
                f"error unmarshalling YAML: flag #{index + 1}: {exc}",
                detail={"index": index},
                cause=exc,
            ) from exc
        if flag.name in seen:
            raise DesiredStateError(
                f"duplicate feature flag name {flag.name!r}",
                detail={"name": flag.name},
            )
        seen.add(flag.name)
        flags.append(flag)
    return flags


def load_desired_flags(path: str | pathlib.Path) -> list[FeatureFlag]:
    """Read the desired flag set from a ``.yaml`` file.

    Raises:
        DesiredStateError: wrong extension, unreadable file, invalid YAML or
            a document that does not describe a list of flags.
    """
    path = pathlib.Path(path)
    if path.suffix not in YAML_SUFFIXES:
        raise DesiredStateError("flags file must have .yaml extension", detail={"path": str(path)})
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DesiredStateError(f"error opening file: {exc}", detail={"path": str(path)}, cause=exc) from exc
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise DesiredStateError(f"error unmarshalling YAML: {exc}", detail={"path": str(path)}, cause=exc) from exc
    return parse_desired_flags(document)


__all__ = ["YAML_SUFFIXES", "load_desired_flags", "parse_desired_flags"]
