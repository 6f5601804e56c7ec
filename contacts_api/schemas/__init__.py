"""Pydantic Schemas — request/response contracts for the HTTP surface.

Design Decisions:
    - Separate from stored documents: schemas are API contracts, documents are persistence
"""
