"""Framework registry, builder, and the built-in family tables."""

from scaffoldctl.frameworks.builder import FrameworkBuilder
from scaffoldctl.frameworks.registry import (
    FrameworkRegistry,
    UnknownFrameworkError,
    default_registry,
)

__all__ = ["FrameworkBuilder", "FrameworkRegistry", "UnknownFrameworkError", "default_registry"]
