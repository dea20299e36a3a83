"""
Transformation Layer - Pure, Deterministic Functions

This layer contains the statistics aggregation.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""
