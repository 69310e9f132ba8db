"""
Top-level package for the Items API.

The FastAPI application lives in ``items_api.app``; a small ``requests``
based client for the same API lives in ``items_api.client``.
"""

__all__ = []
