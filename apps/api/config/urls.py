# PATH: apps/api/config/urls.py
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
import sys

from django.conf.urls.static import static
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework.permissions import AllowAny

from apps.api.common.views import health_check
from apps.core.urls import auth_urlpatterns, ctrl_urlpatterns


schema_view = get_schema_view(
    openapi.Info(
        title="Universe API",
        default_version="v1",
        description="Exams / Courses / Language / QR payment",
    ),
    public=True,
    permission_classes=[AllowAny],
)

handler404 = "apps.api.common.views.not_found"


urlpatterns = [
    # =========================
    # Admin
    # =========================
    path("admin/", admin.site.urls),

    # =========================
    # Ops
    # =========================
    path("api/health/", health_check, name="health-check"),
    path("swagger/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
    path("redoc/", schema_view.with_ui("redoc", cache_timeout=0), name="schema-redoc"),

    # =========================
    # Identity (JWT 쿠키)
    # =========================
    path("api/auth/", include(auth_urlpatterns)),
    path("api/ctrl/", include(ctrl_urlpatterns)),

    # =========================
    # Domain APIs
    # =========================
    path("api/exam/", include("apps.domains.exams.urls")),
    path("api/view/", include("apps.domains.courses.urls")),
    path("api/language/", include("apps.domains.languages.urls")),
    path("api/qr/", include("apps.domains.payments.urls")),
]

# =========================
# Debug Toolbar (DEBUG only)
# =========================
if settings.DEBUG and "runserver" in sys.argv:
    import debug_toolbar
    urlpatterns += [
        path("__debug__/", include(debug_toolbar.urls)),
    ]

# =========================
# DEV ONLY: media static
# =========================
if settings.DEBUG:
    urlpatterns += static(
        settings.MEDIA_URL,
        document_root=settings.MEDIA_ROOT,
    )
