"""
Pydantic schema definitions for API payloads.

Each domain (users, coaches, lessons, bookings, etc.) defines its own
Pydantic models for request and response bodies.  Schemas are
separated from the store records so the API representation can differ
from what is kept in memory (for example, password hashes never leave
the service layer).
"""
