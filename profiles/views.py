import logging

from django.db                  import IntegrityError, transaction
from rest_framework.permissions import AllowAny
from rest_framework.views       import APIView

from core.exceptions  import ClientError
from core.media       import upload_file, upload_files
from core.permissions import IsAdmin, IsMember, IsSelfOrAdmin
from core.responses   import created_response, success_response
from users.models     import Profile, User
from users.queries    import get_profile_or_404, get_user_or_404
from users.serializers import ProfileSerializer, UserSerializer, UserSummarySerializer
from .serializers     import ProfileInputSerializer

logger = logging.getLogger(__name__)

PROFILE_IMAGE_FOLDER = 'profiles'
CERTIFICATE_FOLDER   = 'certificates'


def _sync_completeness(user, profile):
    """Store the completeness predicate on the user when it changed."""
    complete = profile.is_complete()
    if user.is_profile_complete != complete:
        user.is_profile_complete = complete
        user.save(update_fields=['is_profile_complete'])
        logger.info('User %s profile completeness set to %s', user.pk, complete)


def _profile_payload(user, profile):
    return {
        'user':    UserSerializer(user).data,
        'profile': ProfileSerializer(profile).data,
    }


# ─── Create ───────────────────────────────────────────────────────────────────

class ProfileCreateView(APIView):
    """POST /api/v1/profile/add/<user_id>/"""
    permission_classes = [IsMember, IsSelfOrAdmin]

    def post(self, request, user_id):
        serializer = ProfileInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = get_user_or_404(user_id)
        if Profile.objects.filter(user=user).exists():
            raise ClientError('Profile already exists for this user. Use the update endpoint.')

        profile = Profile(user=user, **serializer.validated_data)
        image = request.FILES.get('profile_image')
        if image:
            profile.profile_image = upload_file(image, PROFILE_IMAGE_FOLDER)
        profile.certificates = upload_files(request.FILES.getlist('certificates'), CERTIFICATE_FOLDER)

        try:
            with transaction.atomic():
                profile.save()
        except IntegrityError:
            # Lost a race against a concurrent create for the same user.
            raise ClientError('Profile already exists for this user. Use the update endpoint.')

        _sync_completeness(user, profile)
        logger.info('Profile created for user %s by %s', user.pk, request.user.pk)
        return created_response('Profile created successfully', _profile_payload(user, profile))


# ─── Read ─────────────────────────────────────────────────────────────────────

class ProfileDetailView(APIView):
    """GET /api/v1/profile/<user_id>/  — Public"""
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        user = get_user_or_404(user_id)
        profile = get_profile_or_404(user)
        return success_response('Profile retrieved successfully', {
            'user':    UserSummarySerializer(user).data,
            'profile': ProfileSerializer(profile).data,
        })


class ProfileListView(APIView):
    """GET /api/v1/profile/  — Admin only: every user that has a profile."""
    permission_classes = [IsAdmin]

    def get(self, request):
        users = User.objects.filter(profile__isnull=False).select_related('profile')
        profiles = UserSerializer(users, many=True).data
        return success_response('Profiles retrieved successfully', {
            'profiles': profiles,
            'count':    len(profiles),
        })


class ProfileCompletenessView(APIView):
    """GET /api/v1/profile/check-completeness/<user_id>/"""
    permission_classes = [IsMember, IsSelfOrAdmin]

    def get(self, request, user_id):
        user = get_user_or_404(user_id)
        profile = get_profile_or_404(user)
        return success_response('Profile completeness checked', {
            'is_complete': profile.is_complete(),
        })


# ─── Update ───────────────────────────────────────────────────────────────────

class ProfileUpdateView(APIView):
    """
    PUT /api/v1/profile/update/<user_id>/

    Partial merge: only the supplied fields change. New uploads replace the
    stored image / certificate list.
    """
    permission_classes = [IsMember, IsSelfOrAdmin]

    def put(self, request, user_id):
        serializer = ProfileInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = get_user_or_404(user_id)
        profile = get_profile_or_404(user)

        for field, value in serializer.validated_data.items():
            setattr(profile, field, value)

        image = request.FILES.get('profile_image')
        if image:
            profile.profile_image = upload_file(image, PROFILE_IMAGE_FOLDER)
        certificates = request.FILES.getlist('certificates')
        if certificates:
            profile.certificates = upload_files(certificates, CERTIFICATE_FOLDER)

        profile.save()
        _sync_completeness(user, profile)
        logger.info('Profile updated for user %s by %s', user.pk, request.user.pk)
        return success_response('Profile updated successfully', _profile_payload(user, profile))


class ProfileImageUpdateView(APIView):
    """PUT /api/v1/profile/update-image/<user_id>/"""
    permission_classes = [IsMember, IsSelfOrAdmin]

    def put(self, request, user_id):
        image = request.FILES.get('profile_image')
        if not image:
            raise ClientError('Profile image is required')

        user = get_user_or_404(user_id)
        profile = get_profile_or_404(user)

        profile.profile_image = upload_file(image, PROFILE_IMAGE_FOLDER)
        profile.save(update_fields=['profile_image', 'updated_at'])
        return success_response('Profile image updated successfully', {
            'profile_image': profile.profile_image,
            'profile':       ProfileSerializer(profile).data,
        })


class CertificatesUpdateView(APIView):
    """PUT /api/v1/profile/update-certificates/<user_id>/"""
    permission_classes = [IsMember, IsSelfOrAdmin]

    def put(self, request, user_id):
        files = request.FILES.getlist('certificates')
        if not files:
            raise ClientError('At least one certificate file is required')

        user = get_user_or_404(user_id)
        profile = get_profile_or_404(user)

        profile.certificates = upload_files(files, CERTIFICATE_FOLDER)
        profile.save(update_fields=['certificates', 'updated_at'])
        return success_response('Profile certificates updated successfully', {
            'certificates': profile.certificates,
            'profile':      ProfileSerializer(profile).data,
        })


# ─── Delete ───────────────────────────────────────────────────────────────────

class ProfileDeleteView(APIView):
    """DELETE /api/v1/profile/delete/<user_id>/  — Admin only"""
    permission_classes = [IsAdmin]

    def delete(self, request, user_id):
        user = get_user_or_404(user_id)
        Profile.objects.filter(user=user).delete()
        user.is_profile_complete = False
        user.save(update_fields=['is_profile_complete'])
        logger.info('Profile of user %s deleted by %s', user.pk, request.user.pk)
        return success_response('Profile deleted successfully')
