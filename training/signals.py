# Signal to keep the training playlist in step with menu item deletes
from django.db.models.signals import post_delete
from django.dispatch import receiver

from menu.models import MenuItem
from .services import remove_from_playlist


@receiver(post_delete, sender=MenuItem)
def remove_deleted_item_from_playlist(sender, instance, **kwargs):
    """Drop a deleted item from its tenant's training playlist"""
    remove_from_playlist(instance.tenant_id, instance.item_id)
