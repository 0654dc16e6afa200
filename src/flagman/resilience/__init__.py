"""Resilience primitives."""
