from django.urls import path
from .views import (
    UserListView,
    UserDetailView,
    BlockUserView,
    UnblockUserView,
    DeleteUserView,
    DashboardView,
    ProjectUpdateView,
    ProjectDeleteView,
)

urlpatterns = [
    # Public
    path('user/<int:user_id>/',         UserDetailView.as_view(),        name='admin_user_detail'),

    # Admin-only
    path('users/',                      UserListView.as_view(),          name='admin_user_list'),
    path('block/<int:user_id>/',        BlockUserView.as_view(),         name='admin_block_user'),
    path('unblock/<int:user_id>/',      UnblockUserView.as_view(),       name='admin_unblock_user'),
    path('delete-user/<int:user_id>/',  DeleteUserView.as_view(),        name='admin_delete_user'),
    path('dashboard/',                  DashboardView.as_view(),         name='admin_dashboard'),
    path('update-project/<int:pk>/',    ProjectUpdateView.as_view(),     name='admin_update_project'),
    path('delete-project/<int:pk>/',    ProjectDeleteView.as_view(),     name='admin_delete_project'),
]
