"""Services Layer — rendering dispatch and the build pass.

Invariants:
    - Services orchestrate core functions around infrastructure IO
    - Format dispatch uses an explicit dict mapping (no auto-discovery)
"""
