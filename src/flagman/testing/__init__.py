"""Testing helpers – fakes for the flag store port."""
from flagman.testing.fakes import FakeFlagGateway

__all__ = ["FakeFlagGateway"]
