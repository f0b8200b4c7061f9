"""
Menu persistence operations.

This is the single place where the ordering document is written: list reads
repair drifted orderings, upserts append new items, deletes prune them and
moves update the ordering and the moved item together in one transaction.
"""
import logging

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from .models import MenuItem, MenuOrderingDocument
from .ordering import (
    MenuOrdering, append_item, group_menu_items, move_category,
    move_item, move_subcategory, ordering_key, reconcile_ordering, remove_item,
)

logger = logging.getLogger(__name__)


def _items_for(tenant):
    return list(MenuItem.objects.filter(tenant=tenant))


def _ordering_document(tenant, lock=False):
    queryset = MenuOrderingDocument.objects
    if lock:
        queryset = queryset.select_for_update()
    document, _ = queryset.get_or_create(tenant=tenant)
    return document


def _save_ordering(document, ordering):
    document.apply(ordering)
    document.save()
    return ordering


def get_menu_item(tenant, item_id):
    try:
        return MenuItem.objects.get(tenant=tenant, item_id=item_id)
    except MenuItem.DoesNotExist:
        raise NotFound('Menu item not found')


def load_menu_state(tenant):
    """
    Return ``(items, ordering)`` for display.

    When the stored ordering has drifted from the live items it is rewritten
    with the repaired version before returning.
    """
    items = _items_for(tenant)
    document = _ordering_document(tenant)
    repaired, changed = reconcile_ordering(items, document.to_ordering())
    if changed:
        items, repaired = _repair_ordering(tenant)
    return items, repaired


@transaction.atomic
def _repair_ordering(tenant):
    # Re-read under the row lock so a write committed since the first read is not overwritten
    document = _ordering_document(tenant, lock=True)
    items = _items_for(tenant)
    repaired, changed = reconcile_ordering(items, document.to_ordering())
    if changed:
        _save_ordering(document, repaired)
        logger.info(f"Repaired menu ordering for tenant {tenant.tenant_code}")
    return items, repaired


def load_menu_tree(tenant):
    items, ordering = load_menu_state(tenant)
    return group_menu_items(items, ordering), ordering


@transaction.atomic
def replace_ordering(tenant, ordering):
    """Overwrite the ordering document; the stored result is reconciled against live items."""
    document = _ordering_document(tenant, lock=True)
    repaired, _ = reconcile_ordering(_items_for(tenant), ordering)
    return _save_ordering(document, repaired)


@transaction.atomic
def upsert_menu_item(tenant, data):
    """
    Create or update an item and keep the ordering document in step.

    New items (and items moved to another bucket) land at the end of their
    bucket. Existing items keep their original creation time.
    """
    document = _ordering_document(tenant, lock=True)
    ordering, _ = reconcile_ordering(_items_for(tenant), document.to_ordering())

    item_id = data.get('item_id')
    item = None
    if item_id:
        item = MenuItem.objects.filter(tenant=tenant, item_id=item_id).first()

    previous_key = None
    if item is None:
        item = MenuItem(tenant=tenant)
        if item_id:
            item.item_id = item_id
    else:
        previous_key = ordering_key(*item.slugs)

    item.title = data['title']
    item.category = data['category']
    item.subcategory = data.get('subcategory') or ''
    item.description = data.get('description') or None
    item.video_url = data.get('video_url') or None
    item.steps = list(data.get('steps') or [])
    item.save()

    if previous_key is not None and previous_key != ordering_key(*item.slugs):
        ordering = remove_item(ordering, item.item_id, previous_key)

    ordering = append_item(ordering, item)
    ordering, _ = reconcile_ordering(_items_for(tenant), ordering)
    _save_ordering(document, ordering)

    logger.info(f"Saved menu item {item.item_id} for tenant {tenant.tenant_code}")
    return item


@transaction.atomic
def delete_menu_item(tenant, item_id):
    """Delete an item; its ordering reference is removed and the playlist is pruned by signal."""
    item = get_menu_item(tenant, item_id)
    document = _ordering_document(tenant, lock=True)
    ordering = remove_item(document.to_ordering(), item.item_id, ordering_key(*item.slugs))
    item.delete()

    ordering, _ = reconcile_ordering(_items_for(tenant), ordering)
    _save_ordering(document, ordering)
    logger.info(f"Deleted menu item {item_id} for tenant {tenant.tenant_code}")


def _locate(categories, category_id, subcategory_id=None):
    for category in categories:
        if category.id != category_id:
            continue
        if subcategory_id is None:
            return category, None
        for subcategory in category.sub_categories:
            if subcategory.id == subcategory_id:
                return category, subcategory
    return None, None


@transaction.atomic
def move_menu_entry(tenant, move):
    """
    Apply a single drag-reorder gesture.

    ``move`` carries ``type`` ("category", "subcategory" or "item"), the ids
    of the dragged entry, optional target category/subcategory ids and the
    target ``index``. Cross-bucket item moves also rewrite the item's
    category and subcategory so the next repair pass keeps the move.
    """
    document = _ordering_document(tenant, lock=True)
    items = _items_for(tenant)
    ordering, _ = reconcile_ordering(items, document.to_ordering())
    categories = group_menu_items(items, ordering)

    move_type = move['type']
    category_id = move['category_id']
    to_index = move['index']

    if move_type == 'category':
        category, _ = _locate(categories, category_id)
        if category is None:
            raise ValidationError({'categoryId': 'Unknown category'})
        ordering = move_category(ordering, category_id, to_index)

    elif move_type == 'subcategory':
        _, subcategory = _locate(categories, category_id, move['subcategory_id'])
        if subcategory is None:
            raise ValidationError({'subcategoryId': 'Unknown subcategory'})
        ordering = move_subcategory(ordering, category_id, move['subcategory_id'], to_index)

    else:
        source_category, source_subcategory = _locate(categories, category_id, move['subcategory_id'])
        if source_subcategory is None:
            raise ValidationError({'subcategoryId': 'Unknown subcategory'})
        item = next((entry for entry in source_subcategory.items if entry.item_id == move['item_id']), None)
        if item is None:
            raise ValidationError({'itemId': 'Item is not in the source subcategory'})

        target_category_id = move.get('target_category_id') or category_id
        target_subcategory_id = move.get('target_subcategory_id') or move['subcategory_id']
        target_category, target_subcategory = _locate(categories, target_category_id, target_subcategory_id)
        if target_subcategory is None:
            raise ValidationError({'targetSubcategoryId': 'Unknown target subcategory'})

        source_key = ordering_key(source_category.id, source_subcategory.id)
        target_key = ordering_key(target_category.id, target_subcategory.id)
        ordering = move_item(ordering, item.item_id, source_key, target_key, to_index)

        if source_key != target_key:
            item.category = target_category.label
            item.subcategory = target_subcategory.label
            item.save(update_fields=['category', 'subcategory', 'updated_at'])
            items = _items_for(tenant)
            logger.info(
                f"Moved menu item {item.item_id} to {target_category.label} / {target_subcategory.label}"
            )

    ordering, _ = reconcile_ordering(items, ordering)
    return _save_ordering(document, ordering)


@transaction.atomic
def apply_sample_menu(tenant, sample_menu):
    """
    Seed a tenant with sample content and its explicit ordering.

    Sample items reuse fixed ids, so applying twice updates in place.
    """
    ordering = MenuOrdering()
    for category in sample_menu:
        if category['id'] not in ordering.category_order:
            ordering.category_order.append(category['id'])
        ordering.subcategory_order[category['id']] = [sub['id'] for sub in category['subcategories']]
        for subcategory in category['subcategories']:
            key = ordering_key(category['id'], subcategory['id'])
            ordering.item_order[key] = [entry['id'] for entry in subcategory['items']]
            for entry in subcategory['items']:
                upsert_menu_item(tenant, {
                    'item_id': entry['id'],
                    'title': entry['title'],
                    'category': category['label'],
                    'subcategory': subcategory['label'],
                    'description': entry.get('description'),
                    'video_url': entry.get('video_url'),
                    'steps': entry.get('steps', []),
                })

    return replace_ordering(tenant, ordering)


def menu_summary(tenant):
    categories, _ = load_menu_tree(tenant)
    return {
        'total_categories': len(categories),
        'total_subcategories': sum(len(category.sub_categories) for category in categories),
        'total_items': sum(
            len(subcategory.items) for category in categories for subcategory in category.sub_categories
        ),
        'items_with_video': MenuItem.objects.filter(tenant=tenant, video_url__isnull=False).count(),
    }
