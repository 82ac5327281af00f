"""
High-level use cases for the Records API.

Routers call these services instead of touching a store adapter directly.
"""
