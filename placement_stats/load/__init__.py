"""
Load Layer - Data Persistence

This layer writes computed statistics to local files.
- JSON for the full result, Parquet for company statistics
- No business logic, just I/O operations
"""
