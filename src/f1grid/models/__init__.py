"""F1 Grid data models."""

from f1grid.models.driver import DriverRecord

__all__ = ["DriverRecord"]
