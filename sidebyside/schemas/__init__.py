"""Pydantic Schemas — response models for the read-only API.

Invariants:
    - Schemas are API contracts; core dataclasses stay framework-free
"""
