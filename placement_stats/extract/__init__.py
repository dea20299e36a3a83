"""
Extract Layer - Pure I/O for Placement Data

This layer loads placement records from a static JSON source.
- No imports from transform or load layers
- Returns validated PlacementRecord sequences
- Fails with DataUnavailable / DataMalformed, never partially
"""
