"""
URL configuration for the portfolio platform API.
"""
from django.contrib import admin
from django.urls import path, include

API_PREFIX = 'api/v1/'

urlpatterns = [
    path('admin/', admin.site.urls),

    # ── Auth ───────────────────────────────────────
    path(API_PREFIX + 'auth/', include('users.urls')),

    # ── Admin moderation ───────────────────────────
    path(API_PREFIX + 'admin/', include('moderation.urls')),

    # ── Profiles / Projects ────────────────────────
    path(API_PREFIX + 'profile/', include('profiles.urls')),
    path(API_PREFIX + 'projects/', include('projects.urls')),

    # ── Homepage content ───────────────────────────
    path(API_PREFIX + 'home/', include('home.urls')),
]

handler404 = 'core.views.not_found'
handler500 = 'core.views.server_error'
