"""Catalog tool registrations grouped by domain.

Import order is catalog order.
"""

from . import inference, models  # noqa: F401

__all__ = ["inference", "models"]
