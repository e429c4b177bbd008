"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on an
explicit ``EntityStore`` passed in by the caller.  Lookups that miss,
and aggregated views whose foreign keys cannot be resolved, come back
as ``None`` (or are left out of lists); services never raise for a
missing record.  Business rule violations raise ``ValueError`` for the
API layer to translate into HTTP errors.
"""
