"""Domain policies package."""

from .category_policies import can_delete_category

__all__ = ["can_delete_category"]
