"""
DRF authentication backed by SessionService tokens.
"""
from django.contrib.auth import get_user_model
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from core.base.exceptions import TokenMalformed

from .identity import Identity
from .services import SessionService

AUTH_SCHEME = b'bearer'


class SessionTokenAuthentication(BaseAuthentication):
    """
    Reads `Authorization: Bearer <token>`.

    Requests without the header stay anonymous (the permission layer then
    answers 401). A header that is present but invalid or expired fails
    immediately with TokenMalformed / TokenExpired.

    On success request.user is the active User and request.auth is the
    caller's Identity.
    """
    www_authenticate_realm = 'api'

    def authenticate(self, request):
        header = get_authorization_header(request).split()
        if not header or header[0].lower() != AUTH_SCHEME:
            return None
        if len(header) != 2:
            raise TokenMalformed('Authorization header must be "Bearer <token>".')

        try:
            raw_token = header[1].decode()
        except UnicodeError:
            raise TokenMalformed()

        identity = SessionService().verify(raw_token)

        User = get_user_model()
        try:
            user = User.objects.get(pk=identity.user_id)
        except User.DoesNotExist:
            raise TokenMalformed('User no longer active.')

        return user, Identity.for_user(user)

    def authenticate_header(self, request):
        return f'Bearer realm="{self.www_authenticate_realm}"'
