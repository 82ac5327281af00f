"""
Core utilities shared across the Records API.

Configuration, logging setup and the response envelope live here so that
routers and services never read os.environ or build JSON shapes by hand.
"""
