"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

from flagman.kernel.errors import (
    AggregationError,
    ApplicationError,
    BaseError,
    BatchError,
    DesiredStateError,
    InfrastructureError,
    RemoteError,
    SyncError,
    SyncStage,
)


class TestBaseError:
    def test_str_appends_detail(self) -> None:
        err = BaseError("boom", detail={"page": 3, "status_code": None})
        assert str(err) == "boom (page=3)"
        assert str(BaseError("plain")) == "plain"

    def test_root_cause_follows_chain(self) -> None:
        inner = ConnectionError("reset")
        middle = RemoteError("failed", operation="list", cause=inner)
        outer = SyncError(SyncStage.FETCH, cause=middle)
        assert outer.root_cause() is inner

    def test_cause_is_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert "cause" in err.to_dict()

    def test_repr(self) -> None:
        assert repr(BaseError("x")) == "BaseError(code='base_error', message='x')"


class TestRemoteError:
    def test_is_infrastructure_error(self) -> None:
        assert isinstance(RemoteError("x", operation="list"), InfrastructureError)

    def test_carries_operation_context(self) -> None:
        err = RemoteError("failed", operation="create", target="flag-a", status_code=400)
        assert err.operation == "create"
        assert err.target == "flag-a"
        assert err.status_code == 400
        assert err.detail == {"operation": "create", "target": "flag-a", "status_code": 400}
        assert err.code == "remote_error"

    def test_status_code_omitted_when_unknown(self) -> None:
        err = RemoteError("timeout", operation="list", target=3)
        assert "status_code" not in err.detail


class TestStageErrors:
    def test_application_errors(self) -> None:
        for cls in (AggregationError, BatchError, SyncError, DesiredStateError):
            assert issubclass(cls, ApplicationError)

    def test_batch_error_counts(self) -> None:
        err = BatchError("2 of 5 failed", failed=2, total=5)
        assert (err.failed, err.total) == (2, 5)
        assert err.detail == {"failed": 2, "total": 5}

    def test_sync_error_default_message_names_stage(self) -> None:
        assert SyncError(SyncStage.UPDATE).message == "failed to update feature flags"
        assert SyncError(SyncStage.FETCH).message == "failed to retrieve existing feature flags"

    def test_sync_error_stage_in_detail(self) -> None:
        cause = BatchError("x", failed=1, total=1)
        err = SyncError(SyncStage.DELETE, cause=cause)
        assert err.stage is SyncStage.DELETE
        assert err.detail == {"stage": "delete"}
        assert err.cause is cause
        assert err.code == "sync_failed"
