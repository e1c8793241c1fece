from core.exceptions import ResourceNotFound
from .models         import Project


def get_project_or_404(pk):
    try:
        return Project.objects.get(pk=pk)
    except Project.DoesNotExist:
        raise ResourceNotFound('Project')
