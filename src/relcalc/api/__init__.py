"""HTTP API for expression evaluation."""

from .app import create_app

__all__ = ["create_app"]
