"""Infrastructure Layer — filesystem access, loaded document, logging setup.

Invariants:
    - OS-level failures mapped to DocumentIOError before leaving this layer
"""
