from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal

from authentication.models import TimeStampedModel


class Status(models.TextChoices):
    """Lifecycle of catalog rows. Rows are never deleted, only made inactive."""
    ACTIVE = 'ACTIVE', 'Active'
    INACTIVE = 'INACTIVE', 'Inactive'


class CatalogQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=Status.ACTIVE)


class Category(TimeStampedModel):
    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE)

    objects = CatalogQuerySet.as_manager()

    def __str__(self):
        return str(self.name)

    @property
    def is_active(self):
        return self.status == Status.ACTIVE

    def soft_delete(self):
        self.status = Status.INACTIVE
        self.save(update_fields=['status', 'updated_at'])

    class Meta:
        db_table = 'categories'
        verbose_name_plural = "Categories"
        ordering = ['name']


class MenuItem(TimeStampedModel):
    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    price = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name='items')
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE)
    image_url = models.CharField(max_length=500, null=True, blank=True)

    objects = CatalogQuerySet.as_manager()

    def __str__(self):
        return self.name

    @property
    def is_available(self):
        return self.status == Status.ACTIVE

    def soft_delete(self):
        self.status = Status.INACTIVE
        self.save(update_fields=['status', 'updated_at'])

    class Meta:
        db_table = 'menu_items'
        ordering = ['name']
