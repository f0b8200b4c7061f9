import logging

from django.db import transaction
from rest_framework.exceptions import NotFound

from menu.models import MenuItem
from .models import TrainingPlaylist, TrainingProgress

logger = logging.getLogger(__name__)


def _dedupe(item_ids):
    seen = set()
    result = []
    for item_id in item_ids:
        if isinstance(item_id, str) and item_id not in seen:
            seen.add(item_id)
            result.append(item_id)
    return result


def _live_items(tenant, item_ids):
    items = MenuItem.objects.filter(tenant=tenant, item_id__in=item_ids)
    return {item.item_id: item for item in items}


def load_playlist(tenant):
    """
    Return ``(item_ids, items)`` in playlist order.

    Ids whose items no longer exist are dropped and the pruned list is saved.
    """
    playlist, _ = TrainingPlaylist.objects.get_or_create(tenant=tenant)
    lookup = _live_items(tenant, playlist.item_ids)
    item_ids = [item_id for item_id in _dedupe(playlist.item_ids) if item_id in lookup]
    if item_ids != playlist.item_ids:
        playlist.item_ids = item_ids
        playlist.save(update_fields=['item_ids', 'updated_at'])
        logger.info(f"Pruned training playlist for tenant {tenant.tenant_code}")
    return item_ids, [lookup[item_id] for item_id in item_ids]


@transaction.atomic
def replace_playlist(tenant, item_ids):
    playlist, _ = TrainingPlaylist.objects.select_for_update().get_or_create(tenant=tenant)
    lookup = _live_items(tenant, item_ids)
    playlist.item_ids = [item_id for item_id in _dedupe(item_ids) if item_id in lookup]
    playlist.save()
    return playlist.item_ids, [lookup[item_id] for item_id in playlist.item_ids]


@transaction.atomic
def add_to_playlist(tenant, item_id):
    playlist, _ = TrainingPlaylist.objects.select_for_update().get_or_create(tenant=tenant)
    if item_id not in playlist.item_ids:
        playlist.item_ids = playlist.item_ids + [item_id]
        playlist.save()
    return playlist.item_ids


def remove_from_playlist(tenant, item_id):
    playlist = TrainingPlaylist.objects.filter(tenant=tenant).first()
    if playlist is None or item_id not in playlist.item_ids:
        return
    playlist.item_ids = [entry for entry in playlist.item_ids if entry != item_id]
    playlist.save(update_fields=['item_ids', 'updated_at'])


def progress_summary(completed, item_ids):
    total = len(item_ids)
    completed_count = sum(1 for item_id in item_ids if completed.get(item_id))
    percent = 0
    if total:
        percent = min(100, max(0, int(completed_count * 100 / total + 0.5)))
    return {
        'completed': completed,
        'completedCount': completed_count,
        'total': total,
        'percent': percent,
    }


def _clean_completion(completed, item_ids):
    valid = set(item_ids)
    return {
        item_id: True
        for item_id, value in (completed or {}).items()
        if value is True and item_id in valid
    }


def load_progress(tenant, user):
    """Completion map for one user, pruned to the items still on the playlist"""
    item_ids, _ = load_playlist(tenant)
    progress, _ = TrainingProgress.objects.get_or_create(tenant=tenant, user=user)
    completed = _clean_completion(progress.completed, item_ids)
    if completed != progress.completed:
        progress.completed = completed
        progress.save(update_fields=['completed', 'updated_at'])
    return progress_summary(completed, item_ids)


def replace_progress(tenant, user, completed):
    item_ids, _ = load_playlist(tenant)
    progress, _ = TrainingProgress.objects.get_or_create(tenant=tenant, user=user)
    progress.completed = _clean_completion(completed, item_ids)
    progress.save()
    return progress_summary(progress.completed, item_ids)


def toggle_progress(tenant, user, item_id):
    item_ids, _ = load_playlist(tenant)
    if item_id not in item_ids:
        raise NotFound('Item is not on the training playlist')
    progress, _ = TrainingProgress.objects.get_or_create(tenant=tenant, user=user)
    completed = _clean_completion(progress.completed, item_ids)
    if completed.get(item_id):
        del completed[item_id]
    else:
        completed[item_id] = True
    progress.completed = completed
    progress.save()
    return progress_summary(completed, item_ids)
