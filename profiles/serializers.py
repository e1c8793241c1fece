from rest_framework import serializers

from core.fields import CommaSeparatedListField


class ProfileInputSerializer(serializers.Serializer):
    """
    Body fields accepted by profile create/update.

    Every field is optional: on create the missing ones fall back to the
    model defaults, on update they leave the stored value untouched.
    Uploaded files (`profile_image`, `certificates`) are handled by the view.
    """
    profession          = serializers.CharField(max_length=100, required=False, allow_blank=True)
    skills              = CommaSeparatedListField(required=False)
    description         = serializers.CharField(required=False, allow_blank=True)
    years_of_experience = serializers.IntegerField(min_value=0, max_value=80, required=False, allow_null=True)
    linkedin            = serializers.URLField(required=False, allow_blank=True)
    github              = serializers.URLField(required=False, allow_blank=True)
    fiverr              = serializers.URLField(required=False, allow_blank=True)
    whatsapp            = serializers.CharField(max_length=30, required=False, allow_blank=True)
