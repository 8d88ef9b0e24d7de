"""Lookup of categories and tags by id."""

from collections.abc import Iterable, Mapping

from profitlens.domain.models import Category, Tag

CategoriesInput = Iterable[Category] | Mapping[str, Category]
TagsInput = Iterable[Tag] | Mapping[str, Tag]


def build_category_lookup(categories: CategoriesInput) -> dict[str, Category]:
    """Index categories by id; the first occurrence of a duplicate id wins."""
    if isinstance(categories, Mapping):
        return dict(categories)
    lookup: dict[str, Category] = {}
    for category in categories:
        lookup.setdefault(category.id, category)
    return lookup


def build_tag_lookup(tags: TagsInput) -> dict[str, Tag]:
    """Index tags by id; the first occurrence of a duplicate id wins."""
    if isinstance(tags, Mapping):
        return dict(tags)
    lookup: dict[str, Tag] = {}
    for tag in tags:
        lookup.setdefault(tag.id, tag)
    return lookup


def resolve_category(
    lookup: Mapping[str, Category],
    category_id: str,
) -> Category:
    """Return the category for ``category_id`` or the Unknown fallback."""
    category = lookup.get(category_id)
    if category is None:
        return Category.unknown(category_id)
    return category


def category_display_name(
    lookup: Mapping[str, Category],
    category_id: str,
) -> str:
    return resolve_category(lookup, category_id).name


def resolve_tag(lookup: Mapping[str, Tag], tag_id: str | None) -> Tag | None:
    """Return the tag for ``tag_id``; None for orphaned or missing ids."""
    if not tag_id:
        return None
    return lookup.get(tag_id)


__all__ = [
    "CategoriesInput",
    "TagsInput",
    "build_category_lookup",
    "build_tag_lookup",
    "resolve_category",
    "category_display_name",
    "resolve_tag",
]
