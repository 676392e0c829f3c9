import logging

from rest_framework import generics, status, permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth.models import update_last_login
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiExample

from .models import User
from .serializers import UserSerializer, UserCreateSerializer, LoginSerializer, LoginResponseSerializer
from .permissions import CanManageUsers

logger = logging.getLogger(__name__)


# =============== AUTHENTICATION VIEWS ===============

class LoginView(APIView):
    """
    Username/password login returning a JWT pair and the user's profile.
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Login",
        request=LoginSerializer,
        responses={200: LoginResponseSerializer},
        description="Returns a JWT pair carrying role and full_name claims. "
                    "Unknown user, wrong password and inactive accounts answer 400.",
        examples=[
            OpenApiExample(
                'Cashier Login',
                value={"username": "kasir1", "password": "rahasia123"}
            )
        ]
    )
    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data['user']
        update_last_login(None, user)

        refresh = RefreshToken.for_user(user)
        refresh['role'] = user.role
        refresh['full_name'] = user.full_name

        logger.info("User %s logged in", user.username)

        return Response({
            'refresh': str(refresh),
            'access': str(refresh.access_token),
            'user': UserSerializer(user).data,
        }, status=status.HTTP_200_OK)


class MyProfileView(generics.RetrieveAPIView):
    """Profile of the authenticated user, including role"""
    serializer_class = UserSerializer

    def get_object(self):
        return self.request.user


# =============== USER MANAGEMENT ===============

class UserListCreateView(generics.ListCreateAPIView):
    """
    get: List all user accounts
    post: Create a user account (ADMIN or KASIR)
    """
    queryset = User.objects.all().order_by('username')
    permission_classes = [CanManageUsers]
    pagination_class = None

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return UserCreateSerializer
        return UserSerializer

    @extend_schema(summary="Create user", request=UserCreateSerializer, responses={201: UserSerializer})
    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        logger.info("User %s created by %s", response.data['username'], request.user.username)
        return response


# =============== SYSTEM ===============

@extend_schema(summary="Health check", responses={200: {'type': 'object'}})
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health_check(request):
    return Response({
        'status': 'ok',
        'timestamp': timezone.now().isoformat(),
    })
