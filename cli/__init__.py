"""CLI package for pushing and reading sensor values over HTTP."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)

# ``cli.app`` must keep resolving to the module so tests can patch attributes
# on it; the Typer instance is not re-exported here.

__all__ = []
