import logging

from rest_framework             import generics
from rest_framework.permissions import AllowAny
from rest_framework.views       import APIView

from core.exceptions   import ClientError
from core.permissions  import IsAdmin
from core.responses    import success_response
from projects.models   import Project
from projects.queries  import get_project_or_404
from projects.serializers import ProjectInputSerializer, ProjectSerializer
from projects.uploads  import apply_project_uploads
from users.models      import Profile, Role, User
from users.queries     import get_user_or_404
from users.serializers import UserSerializer, UserSummarySerializer

logger = logging.getLogger(__name__)


# ─── Users ────────────────────────────────────────────────────────────────────

class UserListView(generics.ListAPIView):
    """GET /api/v1/admin/users/  — Admin only, newest first."""
    queryset           = User.objects.select_related('profile')
    serializer_class   = UserSerializer
    permission_classes = [IsAdmin]

    def list(self, request, *args, **kwargs):
        users = self.get_serializer(self.get_queryset(), many=True).data
        return success_response('Users retrieved successfully', {
            'users': users,
            'count': len(users),
        })


class UserDetailView(generics.RetrieveAPIView):
    """GET /api/v1/admin/user/<user_id>/  — Public"""
    queryset           = User.objects.all()
    serializer_class   = UserSerializer
    permission_classes = [AllowAny]

    def get_object(self):
        user = get_user_or_404(self.kwargs['user_id'])
        self.check_object_permissions(self.request, user)
        return user

    def retrieve(self, request, *args, **kwargs):
        return success_response('User retrieved successfully', {
            'user': self.get_serializer(self.get_object()).data,
        })


class BlockUserView(APIView):
    """PUT /api/v1/admin/block/<user_id>/  — Admin only; admin accounts cannot be blocked."""
    permission_classes = [IsAdmin]

    def put(self, request, user_id):
        user = get_user_or_404(user_id)
        if user.role == Role.ADMIN:
            raise ClientError('Cannot block admin users')

        user.is_blocked = True
        user.save(update_fields=['is_blocked'])
        logger.info('User %s blocked by admin %s', user.pk, request.user.pk)
        return success_response('User blocked successfully', {
            'user': UserSummarySerializer(user).data,
        })


class UnblockUserView(APIView):
    """PUT /api/v1/admin/unblock/<user_id>/  — Admin only"""
    permission_classes = [IsAdmin]

    def put(self, request, user_id):
        user = get_user_or_404(user_id)
        user.is_blocked = False
        user.save(update_fields=['is_blocked'])
        logger.info('User %s unblocked by admin %s', user.pk, request.user.pk)
        return success_response('User unblocked successfully', {
            'user': UserSummarySerializer(user).data,
        })


class DeleteUserView(APIView):
    """
    DELETE /api/v1/admin/delete-user/<user_id>/  — Admin only

    Removes the profile, then the projects, then the account. The three
    steps are independent writes: a failure part-way leaves the earlier
    deletions in place.
    """
    permission_classes = [IsAdmin]

    def delete(self, request, user_id):
        user = get_user_or_404(user_id)
        if user.role == Role.ADMIN:
            raise ClientError('Cannot delete admin users')

        Profile.objects.filter(user_id=user.pk).delete()
        Project.objects.filter(user_id=user.pk).delete()
        User.objects.filter(pk=user.pk).delete()

        logger.info('User %s and associated data deleted by admin %s', user_id, request.user.pk)
        return success_response('User and all associated data deleted successfully')


# ─── Dashboard ────────────────────────────────────────────────────────────────

class DashboardView(APIView):
    """GET /api/v1/admin/dashboard/  — Admin only"""
    permission_classes = [IsAdmin]

    def get(self, request):
        stats = {
            'total_users':    User.objects.filter(role=Role.USER).count(),
            'total_profiles': Profile.objects.count(),
            'total_projects': Project.objects.count(),
            'blocked_users':  User.objects.filter(is_blocked=True).count(),
        }
        return success_response('Dashboard stats retrieved successfully', {'stats': stats})


# ─── Projects ─────────────────────────────────────────────────────────────────

class ProjectUpdateView(APIView):
    """PUT /api/v1/admin/update-project/<pk>/  — Admin only, partial update."""
    permission_classes = [IsAdmin]

    def put(self, request, pk):
        project = get_project_or_404(pk)
        serializer = ProjectInputSerializer(project, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        for field, value in serializer.validated_data.items():
            setattr(project, field, value)
        apply_project_uploads(project, request.FILES)
        project.save()

        logger.info('Project %s updated by admin %s', project.pk, request.user.pk)
        return success_response('Project updated successfully by admin', {
            'project': ProjectSerializer(project).data,
        })


class ProjectDeleteView(APIView):
    """DELETE /api/v1/admin/delete-project/<pk>/  — Admin only"""
    permission_classes = [IsAdmin]

    def delete(self, request, pk):
        project = get_project_or_404(pk)
        project.delete()
        logger.info('Project %s deleted by admin %s', pk, request.user.pk)
        return success_response('Project deleted successfully by admin')
