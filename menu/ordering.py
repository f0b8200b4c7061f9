"""
Menu grouping and ordering reconciliation.

Items are grouped into a three level tree (category -> subcategory -> item)
keyed by slugs derived from their free-text labels. A persisted ordering
document records explicit display order per level; anything it does not
mention falls back to a label sort.
"""
import copy
import re
from dataclasses import dataclass, field

ORDERING_KEY_SEPARATOR = '::'

DEFAULT_CATEGORY_LABEL = 'Uncategorized'
DEFAULT_SUBCATEGORY_LABEL = 'General'

_INVALID_SLUG_CHARS = re.compile(r'[^a-z0-9\s-]')
_WHITESPACE = re.compile(r'\s+')
_HYPHENS = re.compile(r'-+')


def slugify(value):
    """Derive a lowercase, hyphenated slug from a free-text label."""
    value = (value or '').strip().lower()
    value = _INVALID_SLUG_CHARS.sub('', value)
    value = _WHITESPACE.sub('-', value)
    value = _HYPHENS.sub('-', value)
    return value.strip('-')


def ordering_key(category_slug, subcategory_slug):
    return f"{category_slug}{ORDERING_KEY_SEPARATOR}{subcategory_slug}"


def _clean(value):
    return value.strip() if isinstance(value, str) else ''


def item_labels(item):
    """Return the (category, subcategory) display labels for an item."""
    category = _clean(item.category)
    subcategory = _clean(item.subcategory)
    return (
        category or DEFAULT_CATEGORY_LABEL,
        subcategory or category or DEFAULT_SUBCATEGORY_LABEL,
    )


def item_slugs(item):
    """Return the (category_slug, subcategory_slug) bucket of an item."""
    category = _clean(item.category)
    subcategory = _clean(item.subcategory)
    return (
        slugify(category or 'uncategorized'),
        slugify(subcategory or category or 'general'),
    )


def _string_list(value):
    if not isinstance(value, (list, tuple)):
        return []
    return [entry for entry in value if isinstance(entry, str)]


def _string_list_map(value):
    if not isinstance(value, dict):
        return {}
    return {
        key: _string_list(entries)
        for key, entries in value.items()
        if isinstance(key, str) and isinstance(entries, (list, tuple))
    }


@dataclass
class MenuOrdering:
    category_order: list = field(default_factory=list)
    subcategory_order: dict = field(default_factory=dict)
    item_order: dict = field(default_factory=dict)

    @classmethod
    def from_payload(cls, value):
        """Build an ordering from its camelCase wire form, dropping malformed entries."""
        if not isinstance(value, dict):
            return cls()
        return cls(
            category_order=_string_list(value.get('categoryOrder')),
            subcategory_order=_string_list_map(value.get('subcategoryOrder')),
            item_order=_string_list_map(value.get('itemOrder')),
        )

    def to_payload(self):
        return {
            'categoryOrder': list(self.category_order),
            'subcategoryOrder': {key: list(entries) for key, entries in self.subcategory_order.items()},
            'itemOrder': {key: list(entries) for key, entries in self.item_order.items()},
        }

    def copy(self):
        return copy.deepcopy(self)


@dataclass
class MenuSubCategory:
    id: str
    label: str
    items: list = field(default_factory=list)


@dataclass
class MenuCategory:
    id: str
    label: str
    sub_categories: list = field(default_factory=list)


class _Bucket:
    def __init__(self, slug, label):
        self.slug = slug
        self.label = label
        self.children = {}


def _collect(items):
    """Bucket items by category and subcategory slug, keeping first-seen labels."""
    categories = {}
    for item in items:
        category_slug, subcategory_slug = item_slugs(item)
        category_label, subcategory_label = item_labels(item)
        category = categories.get(category_slug)
        if category is None:
            category = categories[category_slug] = _Bucket(category_slug, category_label)
        subcategory = category.children.get(subcategory_slug)
        if subcategory is None:
            subcategory = category.children[subcategory_slug] = _Bucket(subcategory_slug, subcategory_label)
        subcategory.children[item.item_id] = item
    return categories


def _ordered(persisted, candidates, sort_key):
    """Persisted entries still present (first occurrence wins), then the rest sorted."""
    kept = []
    seen = set()
    for entry in persisted or ():
        if entry in candidates and entry not in seen:
            kept.append(entry)
            seen.add(entry)
    remainder = sorted((entry for entry in candidates if entry not in seen), key=sort_key)
    return kept + remainder


def _bucket_sort_key(buckets):
    return lambda slug: (buckets[slug].label, slug)


def _item_sort_key(items):
    return lambda item_id: (items[item_id].title or '', item_id)


def group_menu_items(items, ordering=None):
    """
    Group a flat item list into ordered categories and subcategories.

    Never raises: unknown ordering entries are ignored and blank labels fall
    into the "Uncategorized" / "General" buckets.
    """
    ordering = ordering or MenuOrdering()
    categories = _collect(items)

    result = []
    for category_slug in _ordered(ordering.category_order, categories, _bucket_sort_key(categories)):
        category = categories[category_slug]
        sub_categories = []
        subcategory_ids = _ordered(
            ordering.subcategory_order.get(category_slug),
            category.children,
            _bucket_sort_key(category.children),
        )
        for subcategory_slug in subcategory_ids:
            subcategory = category.children[subcategory_slug]
            bucket_items = subcategory.children
            item_ids = _ordered(
                ordering.item_order.get(ordering_key(category_slug, subcategory_slug)),
                bucket_items,
                _item_sort_key(bucket_items),
            )
            sub_categories.append(MenuSubCategory(
                id=subcategory_slug,
                label=subcategory.label,
                items=[bucket_items[item_id] for item_id in item_ids],
            ))
        result.append(MenuCategory(id=category_slug, label=category.label, sub_categories=sub_categories))
    return result


def flatten(categories):
    return [
        item
        for category in categories
        for subcategory in category.sub_categories
        for item in subcategory.items
    ]


def reconcile_ordering(items, ordering):
    """
    Repair an ordering document against the live item set.

    Returns ``(repaired, changed)``. Stale slugs and ids are pruned, survivors
    keep their positions and anything unlisted is appended in display order.
    """
    ordering = ordering or MenuOrdering()
    repaired = MenuOrdering()
    for category in group_menu_items(items, ordering):
        repaired.category_order.append(category.id)
        repaired.subcategory_order[category.id] = [sub.id for sub in category.sub_categories]
        for sub in category.sub_categories:
            repaired.item_order[ordering_key(category.id, sub.id)] = [item.item_id for item in sub.items]
    return repaired, repaired != ordering


def append_item(ordering, item):
    """Make sure the item's category, subcategory and id are listed, appending at the end."""
    result = ordering.copy()
    category_slug, subcategory_slug = item_slugs(item)
    if category_slug not in result.category_order:
        result.category_order.append(category_slug)
    subcategories = result.subcategory_order.setdefault(category_slug, [])
    if subcategory_slug not in subcategories:
        subcategories.append(subcategory_slug)
    item_ids = result.item_order.setdefault(ordering_key(category_slug, subcategory_slug), [])
    if item.item_id not in item_ids:
        item_ids.append(item.item_id)
    return result


def remove_item(ordering, item_id, key=None):
    """Drop an item id from one bucket list, or from every bucket when no key is given."""
    result = ordering.copy()
    keys = [key] if key is not None else list(result.item_order)
    for bucket_key in keys:
        if bucket_key in result.item_order:
            result.item_order[bucket_key] = [entry for entry in result.item_order[bucket_key] if entry != item_id]
    return result


def _clamp(index, upper):
    return min(max(index, 0), upper)


def array_move(entries, from_index, to_index):
    moved = list(entries)
    entry = moved.pop(from_index)
    moved.insert(to_index, entry)
    return moved


def move_category(ordering, category_id, to_index):
    if category_id not in ordering.category_order:
        return ordering.copy()
    result = ordering.copy()
    entries = result.category_order
    result.category_order = array_move(
        entries, entries.index(category_id), _clamp(to_index, len(entries) - 1)
    )
    return result


def move_subcategory(ordering, category_id, subcategory_id, to_index):
    entries = ordering.subcategory_order.get(category_id, [])
    if subcategory_id not in entries:
        return ordering.copy()
    result = ordering.copy()
    result.subcategory_order[category_id] = array_move(
        entries, entries.index(subcategory_id), _clamp(to_index, len(entries) - 1)
    )
    return result


def move_item(ordering, item_id, source_key, target_key, to_index):
    """
    Move an item id from one bucket list to a position in another (or the same) list.

    The caller is responsible for rewriting the item's category fields when
    the buckets differ.
    """
    source = ordering.item_order.get(source_key, [])
    if item_id not in source:
        return ordering.copy()
    result = ordering.copy()
    if source_key == target_key:
        result.item_order[source_key] = array_move(
            source, source.index(item_id), _clamp(to_index, len(source) - 1)
        )
        return result

    result.item_order[source_key] = [entry for entry in source if entry != item_id]
    target = [entry for entry in result.item_order.get(target_key, []) if entry != item_id]
    target.insert(_clamp(to_index, len(target)), item_id)
    result.item_order[target_key] = target
    return result
