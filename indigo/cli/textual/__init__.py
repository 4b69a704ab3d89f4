"""Textual front-end for Indigo."""

from .app import IndigoTextualApp, run_textual_app

__all__ = ["IndigoTextualApp", "run_textual_app"]
