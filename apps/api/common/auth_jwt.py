# PATH: apps/api/common/auth_jwt.py
# 로그인/가입 시 JWT 발급 + httpOnly 쿠키 설정.
from __future__ import annotations

from django.conf import settings
from rest_framework_simplejwt.tokens import AccessToken


def issue_access_token(user) -> str:
    """{id, role, userName} 클레임을 담은 access token (수명은 SIMPLE_JWT 설정)"""
    token = AccessToken.for_user(user)
    token["role"] = user.role
    token["userName"] = user.name
    return str(token)


def set_jwt_cookie(response, token: str):
    lifetime = settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]
    response.set_cookie(
        settings.JWT_AUTH_COOKIE,
        token,
        max_age=int(lifetime.total_seconds()),
        httponly=True,
        secure=settings.JWT_COOKIE_SECURE,
        samesite=settings.JWT_COOKIE_SAMESITE,
        path="/",
    )
    return response


def clear_jwt_cookie(response):
    response.delete_cookie(
        settings.JWT_AUTH_COOKIE,
        path="/",
        samesite=settings.JWT_COOKIE_SAMESITE,
    )
    return response
