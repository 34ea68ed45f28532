"""
Service layer.

Each service encapsulates the business rules for one resource and talks
to storage only through ``CampRepository``.  Services raise the typed
errors from ``core.errors``; translating them into HTTP responses is
the API layer's job.
"""
