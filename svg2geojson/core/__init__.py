"""Core utilities and shared infrastructure.

- config: Conversion options and environment loading
- constants: Namespaces, element kinds, flattening constants
- exceptions: Custom exception hierarchy
"""
