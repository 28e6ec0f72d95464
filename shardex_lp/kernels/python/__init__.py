"""
Production Python kernels.

These modules are designed to be:
- deterministic (integer-only, no floats anywhere),
- explicit about rounding direction at every division,
- small surface-area (pure functions, typed results).
"""
