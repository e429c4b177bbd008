"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (coaches, lessons, bookings, reviews, etc.)
has a service in ``services`` and exposes a router defined in
``api/v1/endpoints``.  Versioning is handled by grouping routers under
the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
