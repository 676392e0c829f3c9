from django.db import models
from django.contrib.auth.models import AbstractUser, BaseUserManager


class UserManager(BaseUserManager):
    def create_user(self, username, password=None, **extra_fields):
        if not username:
            raise ValueError('The Username field must be set')
        username = self.model.normalize_username(username)
        user = self.model(username=username, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', User.Role.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(username, password, **extra_fields)


class TimeStampedModel(models.Model):
    """Base model with created_at and updated_at fields"""
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# =============== USER MANAGEMENT ===============

class User(AbstractUser):
    """Café staff account. ADMIN runs the back office, KASIR works the till."""

    class Role(models.TextChoices):
        ADMIN = 'ADMIN', 'Admin'
        KASIR = 'KASIR', 'Kasir'

    role = models.CharField(max_length=10, choices=Role.choices, default=Role.KASIR)
    full_name = models.CharField(max_length=255)
    updated_at = models.DateTimeField(auto_now=True)

    REQUIRED_FIELDS = ['full_name']
    objects = UserManager()

    class Meta:
        db_table = 'users'
        ordering = ['username']

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def created_at(self):
        return self.date_joined

    @property
    def is_admin(self):
        return self.role == self.Role.ADMIN

    def has_capability(self, capability):
        from .permissions import ROLE_CAPABILITIES

        return capability in ROLE_CAPABILITIES.get(self.role, ())
