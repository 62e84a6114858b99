"""Core Layer — pure content logic: model, validation, store, Markdown codec.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic; no filesystem access
"""
