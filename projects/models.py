from django.db   import models
from django.conf import settings


class Project(models.Model):
    """
    A work sample owned by one user.

    The owner link carries no database cascade or constraint: removing a
    user's projects is the job of whoever deletes the user.
    """
    user        = models.ForeignKey(
                      settings.AUTH_USER_MODEL,
                      on_delete=models.DO_NOTHING,
                      db_constraint=False,
                      related_name='projects',
                  )
    title       = models.CharField(max_length=100)
    summary     = models.CharField(max_length=300, blank=True)
    skills      = models.JSONField(default=list, blank=True)
    description = models.TextField(blank=True)
    link        = models.URLField(blank=True)
    thumbnail   = models.URLField(max_length=500, blank=True)
    images      = models.JSONField(default=list, blank=True)
    created_at  = models.DateTimeField(auto_now_add=True)
    updated_at  = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.title} ({self.user_id})'
