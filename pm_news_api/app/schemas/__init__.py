"""
Pydantic schema definitions for API payloads.

Each collection (news items, PM resources, users) defines its own
Pydantic models for request and response bodies.  Attributes are
snake_case in Python and camelCase on the wire, which is what the
single‑page client sends and expects.
"""
