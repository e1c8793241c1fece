import logging

from rest_framework             import generics
from rest_framework.permissions import AllowAny
from rest_framework.views       import APIView

from core.permissions import IsMember
from core.responses   import created_response, success_response
from users.queries    import get_user_or_404
from .models          import Project
from .queries         import get_project_or_404
from .serializers     import ProjectInputSerializer, ProjectSerializer
from .uploads         import apply_project_uploads

logger = logging.getLogger(__name__)


class ProjectCreateView(APIView):
    """POST /api/v1/projects/  — creates a project owned by the caller."""
    permission_classes = [IsMember]

    def post(self, request):
        serializer = ProjectInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = Project(user=request.user, **serializer.validated_data)
        apply_project_uploads(project, request.FILES)
        project.save()

        logger.info('Project %s created by user %s', project.pk, request.user.pk)
        return created_response('Project created successfully', {
            'project': ProjectSerializer(project).data,
        })


class UserProjectListView(generics.ListAPIView):
    """GET /api/v1/projects/user/<user_id>/  — Public"""
    serializer_class   = ProjectSerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        user = get_user_or_404(self.kwargs['user_id'])
        return Project.objects.filter(user=user)

    def list(self, request, *args, **kwargs):
        projects = self.get_serializer(self.get_queryset(), many=True).data
        return success_response('Projects retrieved successfully', {
            'projects': projects,
            'count':    len(projects),
        })


class ProjectDetailView(generics.RetrieveAPIView):
    """GET /api/v1/projects/<pk>/  — Public"""
    queryset           = Project.objects.all()
    serializer_class   = ProjectSerializer
    permission_classes = [AllowAny]

    def get_object(self):
        project = get_project_or_404(self.kwargs['pk'])
        self.check_object_permissions(self.request, project)
        return project

    def retrieve(self, request, *args, **kwargs):
        return success_response('Project retrieved successfully', {
            'project': self.get_serializer(self.get_object()).data,
        })
