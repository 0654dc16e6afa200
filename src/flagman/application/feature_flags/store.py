"""Application feature flags – FlagStore port."""
from __future__ import annotations

import abc

from flagman.application.feature_flags.feature_flag import FeatureFlag
from flagman.application.pagination.pagination import Pagination


class FlagStore(abc.ABC):
    """Port: the remote service holding the current flag set.

    Every method raises :class:`~flagman.kernel.errors.RemoteError` when the
    call does not succeed.
    """

    @abc.abstractmethod
    async def list_page(self, page: int, per_page: int) -> tuple[list[FeatureFlag], Pagination]: ...

    @abc.abstractmethod
    async def create(self, flag: FeatureFlag) -> None: ...

    @abc.abstractmethod
    async def delete_by_name(self, name: str) -> None:
        """Delete *name*; a flag that does not exist counts as deleted."""


__all__ = ["FlagStore"]
