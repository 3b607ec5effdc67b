"""Installed distribution version."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("contributor-welcome")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
