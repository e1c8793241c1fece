from core.exceptions import ResourceNotFound
from .models         import Profile, User


def get_user_or_404(user_id):
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist:
        raise ResourceNotFound('User')


def get_profile_or_404(user):
    try:
        return user.profile
    except Profile.DoesNotExist:
        raise ResourceNotFound('Profile')
