"""Infrastructure Layer — document store lifecycle and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Driver exceptions are mapped to core/errors.py types at this boundary
"""
