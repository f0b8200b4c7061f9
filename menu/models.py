import uuid

from django.db import models

from authentication.models import Tenant, TimeStampedModel
from .ordering import MenuOrdering, item_labels, item_slugs


def generate_item_id():
    return str(uuid.uuid4())


class MenuItem(TimeStampedModel):
    """A training card - tenant specific"""
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='menu_items')
    item_id = models.CharField(max_length=128, default=generate_item_id)

    title = models.CharField(max_length=255)
    category = models.CharField(max_length=255)
    subcategory = models.CharField(max_length=255, blank=True)
    description = models.TextField(null=True, blank=True)
    video_url = models.URLField(max_length=1000, null=True, blank=True)
    steps = models.JSONField(default=list, blank=True)  # ordered list of step strings

    class Meta:
        db_table = 'menu_items'
        unique_together = ['tenant', 'item_id']
        ordering = ['category', 'subcategory', 'title']

    def __str__(self):
        return f"{self.title} ({self.category} / {self.subcategory})"

    def save(self, *args, **kwargs):
        if not (self.subcategory or '').strip():
            self.subcategory = item_labels(self)[1]
        super().save(*args, **kwargs)

    @property
    def slugs(self):
        return item_slugs(self)


class MenuOrderingDocument(models.Model):
    """Persisted display order for a tenant's menu tree"""
    tenant = models.OneToOneField(Tenant, on_delete=models.CASCADE, related_name='menu_ordering')
    category_order = models.JSONField(default=list, blank=True)
    subcategory_order = models.JSONField(default=dict, blank=True)  # {"food": ["mains", "sides"]}
    item_order = models.JSONField(default=dict, blank=True)  # {"food::mains": ["item-1", ...]}
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'menu_orderings'

    def __str__(self):
        return f"Menu ordering for {self.tenant}"

    def to_ordering(self):
        return MenuOrdering.from_payload({
            'categoryOrder': self.category_order,
            'subcategoryOrder': self.subcategory_order,
            'itemOrder': self.item_order,
        })

    def apply(self, ordering):
        self.category_order = list(ordering.category_order)
        self.subcategory_order = {key: list(value) for key, value in ordering.subcategory_order.items()}
        self.item_order = {key: list(value) for key, value in ordering.item_order.items()}
