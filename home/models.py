import uuid

from django.db import models


ABOUT_US_DEFAULT_TITLE = 'About Us'


class HomePage(models.Model):
    """
    The single homepage document.

    Exactly one row exists, keyed by a fixed unique value, so concurrent
    first reads all land on the same record. It carries the about-us block
    and owns the carousel, category and testimonial collections.
    """
    SINGLETON_KEY = 'homepage'

    key               = models.CharField(max_length=20, unique=True, default=SINGLETON_KEY, editable=False)
    about_title       = models.CharField(max_length=200, default=ABOUT_US_DEFAULT_TITLE)
    about_description = models.TextField(blank=True)
    about_image       = models.URLField(max_length=500, blank=True)
    created_at        = models.DateTimeField(auto_now_add=True)
    updated_at        = models.DateTimeField(auto_now=True)

    @classmethod
    def load(cls):
        homepage, _ = cls.objects.get_or_create(key=cls.SINGLETON_KEY)
        return homepage

    def reset_about_us(self):
        self.about_title       = ABOUT_US_DEFAULT_TITLE
        self.about_description = ''
        self.about_image       = ''

    def __str__(self):
        return 'HomePage'


class HomeEntry(models.Model):
    """Common shape of the homepage collections: a generated sub-identifier plus timestamps."""
    id         = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['created_at']


class CarouselImage(HomeEntry):
    homepage    = models.ForeignKey(HomePage, on_delete=models.CASCADE, related_name='carousel_images')
    title       = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image       = models.URLField(max_length=500)

    def __str__(self):
        return self.title


class Category(HomeEntry):
    homepage    = models.ForeignKey(HomePage, on_delete=models.CASCADE, related_name='categories')
    title       = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image       = models.URLField(max_length=500)

    class Meta(HomeEntry.Meta):
        verbose_name_plural = 'Categories'

    def __str__(self):
        return self.title


class Testimonial(HomeEntry):
    homepage = models.ForeignKey(HomePage, on_delete=models.CASCADE, related_name='testimonials')
    name     = models.CharField(max_length=100, blank=True)
    feedback = models.TextField(blank=True)
    image    = models.URLField(max_length=500, blank=True)

    def __str__(self):
        return self.name or 'Testimonial'
