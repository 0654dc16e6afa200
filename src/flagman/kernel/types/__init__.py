"""Kernel value types."""

from flagman.kernel.types.value import Value, ValueKind, values_equal

__all__ = ["Value", "ValueKind", "values_equal"]
