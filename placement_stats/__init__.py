"""
Placement Stats

Campus placement statistics from static JSON data.

Layers:
- extract: Load placement records from a file or URL (pure I/O)
- transformation: Aggregate records into summary and company statistics
- load: Persist computed statistics (JSON, Parquet)
- presentation: Formatting helpers and text rendering
- orchestration: Wire the layers together
"""

__version__ = "1.0.0"
