"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persistent entities in ``data`` so the
wire representation can change without touching storage.
"""
