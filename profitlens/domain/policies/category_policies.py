"""Policies governing category lifecycle."""

from profitlens.domain.models import Category


def can_delete_category(category: Category) -> bool:
    """Default categories are protected against deletion."""
    return not category.is_default


__all__ = ["can_delete_category"]
