# apps/core/authentication.py

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication


class CookieJWTAuthentication(JWTAuthentication):
    """
    JWT 인증 (httpOnly 쿠키 우선)

    - 로그인 시 발급된 jwtToken 쿠키를 먼저 본다
    - 쿠키가 없으면 Authorization: Bearer 헤더로 폴백
    - authenticate_header 를 유지하므로 미인증 요청은 401
    """

    def authenticate(self, request):
        raw_token = request.COOKIES.get(settings.JWT_AUTH_COOKIE)
        if not raw_token:
            return super().authenticate(request)

        validated_token = self.get_validated_token(raw_token.encode())
        return self.get_user(validated_token), validated_token
