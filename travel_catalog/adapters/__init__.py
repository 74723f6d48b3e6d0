"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Catalog sources (JSON file, in-memory)
- User-side storage (JSON files, in-memory)
"""
