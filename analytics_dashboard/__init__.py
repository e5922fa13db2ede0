"""Google Analytics dashboard behind Google sign-in."""

from .app import create_app

__all__ = ["create_app"]
