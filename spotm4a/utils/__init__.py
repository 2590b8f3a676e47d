"""
Shared helpers for file naming and human-readable formatting.
"""
