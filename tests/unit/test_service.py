"""Unit tests – synchronize() end to end against a respx-mocked GitLab."""
from __future__ import annotations

import asyncio
from typing import Any

import httpx
import respx

from flagman.application.feature_flags import FeatureFlag
from flagman.config import SyncSettings
from flagman.service import synchronize

BASE = "https://gitlab.test/api/v4"
FLAGS_URL = f"{BASE}/projects/7/feature_flags"

_HEADERS = {
    "X-Page": "1",
    "X-Next-Page": "",
    "X-Prev-Page": "",
    "X-Per-Page": "100",
    "X-Total-Pages": "1",
    "X-Total": "2",
}


def _settings(**overrides: Any) -> SyncSettings:
    values: dict[str, Any] = {"token": "t", "project_id": "7", "base_url": BASE}
    values.update(overrides)
    return SyncSettings(**values)


def _remote() -> list[dict[str, Any]]:
    return [
        {"name": "keep", "description": "", "active": True, "strategies": []},
        {"name": "stale", "description": "", "active": True, "strategies": []},
    ]


def _desired() -> list[FeatureFlag]:
    return [
        FeatureFlag(name="keep", active=True),
        FeatureFlag(name="fresh", active=False),
    ]


class TestSynchronize:
    @respx.mock
    def test_dry_run_only_reads(self) -> None:
        respx.get(url__startswith=FLAGS_URL).mock(
            return_value=httpx.Response(200, json=_remote(), headers=_HEADERS)
        )
        create = respx.post(FLAGS_URL).mock(return_value=httpx.Response(201, json={}))
        delete = respx.delete(f"{FLAGS_URL}/stale").mock(return_value=httpx.Response(204))

        plan = asyncio.run(synchronize(_settings(dry_run=True), _desired()))

        assert plan.to_delete == ["stale"]
        assert [f.name for f in plan.to_add] == ["fresh"]
        assert plan.unchanged == ["keep"]
        assert not create.called
        assert not delete.called

    @respx.mock
    def test_applies_plan(self) -> None:
        respx.get(url__startswith=FLAGS_URL).mock(
            return_value=httpx.Response(200, json=_remote(), headers=_HEADERS)
        )
        create = respx.post(FLAGS_URL).mock(return_value=httpx.Response(201, json={}))
        delete = respx.delete(f"{FLAGS_URL}/stale").mock(return_value=httpx.Response(204))

        plan = asyncio.run(synchronize(_settings(), _desired()))

        assert plan.total == 2
        assert delete.call_count == 1
        assert create.call_count == 1
        assert create.calls.last.request.headers["PRIVATE-TOKEN"] == "t"
