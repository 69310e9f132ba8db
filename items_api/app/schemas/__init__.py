"""Pydantic schemas used by the API and the service layer."""

from .item import Item, ItemBase, ItemCreate  # noqa: F401
