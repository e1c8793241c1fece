from rest_framework import serializers

from core.fields import CommaSeparatedListField
from .models     import Project


class ProjectSerializer(serializers.ModelSerializer):
    """Used for reading projects."""
    skills = CommaSeparatedListField(read_only=True)

    class Meta:
        model  = Project
        fields = (
            'id', 'user', 'title', 'summary', 'skills', 'description',
            'link', 'thumbnail', 'images', 'created_at', 'updated_at',
        )
        read_only_fields = fields


class ProjectInputSerializer(serializers.ModelSerializer):
    """Body fields for create / update; `thumbnail` and `images` arrive as uploads."""
    skills = CommaSeparatedListField(required=False)

    class Meta:
        model  = Project
        fields = ('title', 'summary', 'skills', 'description', 'link')
