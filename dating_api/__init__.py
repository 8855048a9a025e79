"""
dating_api
----------

HTTP API for the Dating App: account registration / login and member
listing over a SQLite credential store.

This package exposes:

- ``create_app()``: application factory returning a FastAPI instance.
- ``__version__``: the installed distribution version.

The module-level ASGI application lives in ``dating_api.main:app``.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("dating-app")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


def create_app(*args, **kwargs):
    """
    Lazy proxy to ``dating_api.main.create_app`` so importing the package
    does not build an application.
    """
    from .main import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = ["__version__", "create_app"]
