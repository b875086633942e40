"""Chirpy: short-message backend over a single JSON document.

Expose :func:`chirpy.factory.create_app` so callers (``flask --app chirpy``,
gunicorn) can ``from chirpy import create_app``.
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
