"""
Bearer-token authentication gate.

simplejwt does the header parsing, signature and expiry checks; on top of
that a blocked account is treated as unauthenticated.
"""
from rest_framework.exceptions                import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication


class BearerJWTAuthentication(JWTAuthentication):

    def get_user(self, validated_token):
        user = super().get_user(validated_token)
        if getattr(user, 'is_blocked', False):
            raise AuthenticationFailed('Your account has been blocked.', code='user_blocked')
        return user
