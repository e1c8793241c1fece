import logging

from django.contrib.auth                      import authenticate
from rest_framework.exceptions                import AuthenticationFailed, PermissionDenied
from rest_framework.permissions               import AllowAny, IsAuthenticated
from rest_framework.views                     import APIView
from rest_framework_simplejwt.exceptions      import TokenError
from rest_framework_simplejwt.tokens          import RefreshToken

from core.exceptions import ClientError
from core.responses  import created_response, success_response
from .serializers    import LoginSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)


def _token_pair(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access':  str(refresh.access_token),
    }


# ─── Register ─────────────────────────────────────────────────────────────────

class RegisterView(APIView):
    """POST /api/v1/auth/register/"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info('Registered user %s with role %s', user.pk, user.role)

        return created_response('Account created successfully', {
            'user':   UserSerializer(user).data,
            'tokens': _token_pair(user),
        })


# ─── Login ────────────────────────────────────────────────────────────────────

class LoginView(APIView):
    """POST /api/v1/auth/login/"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            email=serializer.validated_data['email'].lower(),
            password=serializer.validated_data['password'],
        )
        if user is None:
            raise AuthenticationFailed('Invalid credentials.')
        if user.is_blocked:
            raise PermissionDenied('Your account has been blocked. Please contact support.')

        return success_response('Logged in successfully', {
            'user':   UserSerializer(user).data,
            'tokens': _token_pair(user),
        })


# ─── Logout ───────────────────────────────────────────────────────────────────

class LogoutView(APIView):
    """POST /api/v1/auth/logout/  — blacklists the refresh token."""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        refresh_token = request.data.get('refresh')
        if not refresh_token:
            raise ClientError('Refresh token is required.')
        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError:
            raise ClientError('Invalid or already-blacklisted token.')
        return success_response('Logged out successfully')


# ─── Current user ─────────────────────────────────────────────────────────────

class MeView(APIView):
    """GET /api/v1/auth/me/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return success_response('User retrieved successfully', {
            'user': UserSerializer(request.user).data,
        })
