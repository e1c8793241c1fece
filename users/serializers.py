from django.db      import IntegrityError, transaction
from rest_framework import serializers

from core.fields import CommaSeparatedListField
from .models     import Profile, Role, User


PASSWORD_PATTERN = r'^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[!@#$%^&*])(?=.{8,})'
PASSWORD_RULES = (
    'Password must contain at least one uppercase letter, one lowercase letter, '
    'one number, and one special character (!@#$%^&*), and be at least 8 characters long.'
)


# ─── Register ─────────────────────────────────────────────────────────────────

class RegisterSerializer(serializers.Serializer):
    full_name = serializers.CharField(
        min_length=3,
        max_length=50,
        error_messages={
            'min_length': 'Full name must be at least 3 characters long',
            'max_length': 'Full name cannot be more than 50 characters long',
            'required':   'Full name is required',
            'blank':      'Full name is required',
        },
    )
    email = serializers.EmailField(
        max_length=30,
        error_messages={
            'invalid':    'Invalid email format',
            'max_length': 'Email cannot be more than 30 characters long',
            'required':   'Email is required',
            'blank':      'Email is required',
        },
    )
    password = serializers.RegexField(
        PASSWORD_PATTERN,
        write_only=True,
        trim_whitespace=False,
        error_messages={
            'invalid':  PASSWORD_RULES.replace('%', '%%'),
            'required': 'Password is required',
            'blank':    'Password is required',
        },
    )
    role = serializers.ChoiceField(
        choices=Role.choices,
        required=False,
        error_messages={'invalid_choice': 'Role must be either user or admin'},
    )

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('This email is already registered.')
        return value.lower()

    def create(self, validated_data):
        try:
            with transaction.atomic():
                return User.objects.create_user(
                    email=validated_data['email'],
                    password=validated_data['password'],
                    full_name=validated_data['full_name'],
                    role=validated_data.get('role', Role.USER),
                )
        except IntegrityError:
            # Registered concurrently after validate_email ran.
            raise serializers.ValidationError({'email': 'This email is already registered.'})


class LoginSerializer(serializers.Serializer):
    email    = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


# ─── Profile ──────────────────────────────────────────────────────────────────

class ProfileSerializer(serializers.ModelSerializer):
    skills = CommaSeparatedListField(read_only=True)

    class Meta:
        model  = Profile
        fields = (
            'profession', 'skills', 'description', 'years_of_experience',
            'linkedin', 'github', 'fiverr', 'whatsapp',
            'profile_image', 'certificates', 'created_at', 'updated_at',
        )
        read_only_fields = fields


# ─── User projections (never expose the password hash) ────────────────────────

class UserSerializer(serializers.ModelSerializer):
    profile = ProfileSerializer(read_only=True, allow_null=True)

    class Meta:
        model  = User
        fields = (
            'id', 'full_name', 'email', 'role', 'is_blocked',
            'is_profile_complete', 'date_joined', 'profile',
        )
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model  = User
        fields = ('id', 'full_name', 'email', 'role', 'is_blocked', 'is_profile_complete')
        read_only_fields = fields
