from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class Role(models.TextChoices):
    USER  = 'user',  'User'
    ADMIN = 'admin', 'Admin'


class UserManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('An email address is required.')
        user = self.model(email=self.normalize_email(email), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', Role.USER)
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', Role.ADMIN)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Platform account, identified by email.

    `role` is fixed at registration. Admin accounts can never be blocked or
    deleted through the moderation endpoints.
    """
    username   = None
    first_name = None
    last_name  = None

    full_name           = models.CharField(max_length=50)
    email               = models.EmailField(unique=True)
    role                = models.CharField(max_length=10, choices=Role.choices, default=Role.USER)
    is_blocked          = models.BooleanField(default=False)
    is_profile_complete = models.BooleanField(default=False)

    USERNAME_FIELD  = 'email'
    REQUIRED_FIELDS = ['full_name']

    objects = UserManager()

    class Meta:
        ordering = ['-date_joined']

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    def __str__(self):
        return self.email


def is_profile_complete(profession, skills, description):
    """A profile is complete when profession, skills and description are all filled in."""
    return bool(
        profession and profession.strip()
        and skills and any(str(skill).strip() for skill in skills)
        and description and description.strip()
    )


class Profile(models.Model):
    user = models.OneToOneField(
        User, on_delete=models.CASCADE, related_name='profile'
    )
    profession          = models.CharField(max_length=100, blank=True)
    skills              = models.JSONField(default=list, blank=True)
    description         = models.TextField(blank=True)
    years_of_experience = models.PositiveSmallIntegerField(null=True, blank=True)

    linkedin = models.URLField(blank=True)
    github   = models.URLField(blank=True)
    fiverr   = models.URLField(blank=True)
    whatsapp = models.CharField(max_length=30, blank=True)

    profile_image = models.URLField(max_length=500, blank=True)
    certificates  = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def is_complete(self):
        return is_profile_complete(self.profession, self.skills, self.description)

    def __str__(self):
        return f'Profile({self.user.email})'
