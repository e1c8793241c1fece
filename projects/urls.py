from django.urls import path
from .views import ProjectCreateView, UserProjectListView, ProjectDetailView

urlpatterns = [
    path('',                        ProjectCreateView.as_view(),   name='project_create'),
    path('user/<int:user_id>/',     UserProjectListView.as_view(), name='user_projects'),
    path('<int:pk>/',               ProjectDetailView.as_view(),   name='project_detail'),
]
