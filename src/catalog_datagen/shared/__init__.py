"""
Shared utilities for the catalog data generator.
"""
