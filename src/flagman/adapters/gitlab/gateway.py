"""GitLab adapter – GitLabFlagGateway (feature flags REST API).

Endpoints, relative to the API base URL::

    GET    /projects/:id/feature_flags?page=N&per_page=M   200
    POST   /projects/:id/feature_flags                     201
    DELETE /projects/:id/feature_flags/:name               200/204, 404 is fine
"""
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from flagman.adapters.http import HttpxHttpClient
from flagman.application.feature_flags import FeatureFlag, FlagStore
from flagman.application.pagination import Pagination
from flagman.config import SyncSettings
from flagman.kernel.errors import RemoteError

TOKEN_HEADER = "PRIVATE-TOKEN"

logger = logging.getLogger(__name__)


class GitLabFlagGateway(FlagStore):
    """:class:`FlagStore` backed by a GitLab project's feature flags."""

    def __init__(self, settings: SyncSettings, http: HttpxHttpClient | None = None) -> None:
        self._settings = settings
        self._http = http or HttpxHttpClient(
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            headers={TOKEN_HEADER: settings.token},
        )
        self._flags_path = f"/projects/{quote(settings.project_id, safe='')}/feature_flags"

    async def __aenter__(self) -> "GitLabFlagGateway":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._http.__aexit__(*args)

    async def list_page(self, page: int, per_page: int) -> tuple[list[FeatureFlag], Pagination]:
        response = await self._http.get(
            self._flags_path,
            params={"page": page, "per_page": per_page},
            operation="list",
            target=page,
        )
        try:
            pagination = Pagination.from_headers(response.headers)
        except ValueError as exc:
            raise RemoteError(
                f"malformed pagination metadata on page {page}: {exc}",
                operation="list",
                target=page,
                cause=exc,
            ) from exc
        flags = self._decode_flags(response, page)
        logger.debug("gitlab.page_fetched page=%d flags=%d total_pages=%d", page, len(flags), pagination.total_pages)
        return flags, pagination

    async def create(self, flag: FeatureFlag) -> None:
        await self._http.post(
            self._flags_path,
            json=flag.to_dict(),
            operation="create",
            target=flag.name,
            expected=(201,),
        )
        logger.debug("gitlab.flag_created name=%s", flag.name)

    async def delete_by_name(self, name: str) -> None:
        response = await self._http.delete(
            f"{self._flags_path}/{quote(name, safe='')}",
            operation="delete",
            target=name,
            expected=(200, 204, 404),
        )
        if response.status_code == 404:
            logger.debug("gitlab.flag_already_absent name=%s", name)
        else:
            logger.debug("gitlab.flag_deleted name=%s", name)

    @staticmethod
    def _decode_flags(response: httpx.Response, page: int) -> list[FeatureFlag]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteError(
                f"failed to decode feature flags response for page {page}: {exc}",
                operation="list",
                target=page,
                cause=exc,
            ) from exc
        if not isinstance(payload, list):
            raise RemoteError(
                f"failed to decode feature flags response for page {page}: expected a JSON array",
                operation="list",
                target=page,
            )
        try:
            return [FeatureFlag.from_dict(item) for item in payload]
        except (TypeError, ValueError) as exc:
            raise RemoteError(
                f"failed to decode feature flags response for page {page}: {exc}",
                operation="list",
                target=page,
                cause=exc,
            ) from exc


__all__ = ["TOKEN_HEADER", "GitLabFlagGateway"]
