from django.urls import path
from .views import (
    ProfileListView,
    ProfileCreateView,
    ProfileDetailView,
    ProfileUpdateView,
    ProfileImageUpdateView,
    CertificatesUpdateView,
    ProfileDeleteView,
    ProfileCompletenessView,
)

urlpatterns = [
    # Admin-only
    path('',                                    ProfileListView.as_view(),         name='profile_list'),
    path('delete/<int:user_id>/',               ProfileDeleteView.as_view(),       name='profile_delete'),

    # Owner or admin
    path('add/<int:user_id>/',                  ProfileCreateView.as_view(),       name='profile_create'),
    path('update/<int:user_id>/',               ProfileUpdateView.as_view(),       name='profile_update'),
    path('update-image/<int:user_id>/',         ProfileImageUpdateView.as_view(),  name='profile_update_image'),
    path('update-certificates/<int:user_id>/',  CertificatesUpdateView.as_view(),  name='profile_update_certificates'),
    path('check-completeness/<int:user_id>/',   ProfileCompletenessView.as_view(), name='profile_completeness'),

    # Public
    path('<int:user_id>/',                      ProfileDetailView.as_view(),       name='profile_detail'),
]
