from django.conf import settings
from django.db import models

from authentication.models import Tenant, TimeStampedModel


class TrainingPlaylist(TimeStampedModel):
    """Ordered list of menu items selected for staff training - one per tenant"""
    tenant = models.OneToOneField(Tenant, on_delete=models.CASCADE, related_name='training_playlist')
    item_ids = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = 'training_playlists'

    def __str__(self):
        return f"Training playlist for {self.tenant} ({len(self.item_ids)} items)"


class TrainingProgress(TimeStampedModel):
    """Per-user completion flags for a tenant's training playlist"""
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='training_progress')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='training_progress')
    completed = models.JSONField(default=dict, blank=True)  # {"item-id": true}

    class Meta:
        db_table = 'training_progress'
        unique_together = ['tenant', 'user']

    def __str__(self):
        return f"Training progress of {self.user} @ {self.tenant.tenant_code}"
