# PATH: apps/api/config/settings/dev.py
from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS += [
    "debug_toolbar",
]

MIDDLEWARE.insert(0, "debug_toolbar.middleware.DebugToolbarMiddleware")

INTERNAL_IPS = [
    "127.0.0.1",
]

# 개발 중에는 Swagger 세션 로그인 허용
SWAGGER_SETTINGS["USE_SESSION_AUTH"] = True
