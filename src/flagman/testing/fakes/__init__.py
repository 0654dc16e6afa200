"""Testing fakes – in-memory doubles for application ports."""
from flagman.testing.fakes.gateway import FakeFlagGateway

__all__ = ["FakeFlagGateway"]
