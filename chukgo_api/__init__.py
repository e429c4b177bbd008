"""
Top‑level package for the Chukgo Lessons API.

This file makes ``chukgo_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``chukgo_api.app.main``.  The package provides no public exports; all
functionality lives in submodules under ``app``.
"""

__all__ = []
