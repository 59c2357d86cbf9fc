# PATH: apps/domains/teachers/views.py
from drf_yasg.utils import swagger_auto_schema
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.pagination import EnvelopeListMixin
from apps.core.permissions import IsAdminOrStudent, IsSuperAdminOrAdmin

from .filters import TeacherFilter
from .models import Teacher
from .serializers import TeacherRegisterSerializer, TeacherSerializer


class TeacherRegisterView(APIView):
    """POST /api/auth/teacher/register (superAdmin / admin)"""

    permission_classes = [IsSuperAdminOrAdmin]

    @swagger_auto_schema(request_body=TeacherRegisterSerializer)
    def post(self, request):
        serializer = TeacherRegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(
            {"message": "Successfully Registered"},
            status=status.HTTP_201_CREATED,
        )


class TeachersDashView(EnvelopeListMixin, generics.ListAPIView):
    """GET /api/ctrl/teachers/dash   ?userName=&subjectId=&page=&perPage="""

    queryset = Teacher.objects.select_related("user", "subject").order_by("-created_at")
    serializer_class = TeacherSerializer
    filterset_class = TeacherFilter
    permission_classes = [IsAdminOrStudent]
    collection_name = "teachers"
