"""Core Layer — pure contact rules and the error hierarchy, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions take the clock as an argument (deterministic under test)
"""
