# PATH: apps/domains/payments/views.py
from django.http import HttpResponse
from drf_yasg.utils import swagger_auto_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsStudent, IsSuperAdminOrAdmin

from .serializers import ProcessPaymentSerializer
from .services.qr_payment import build_qr_payload, issue_qr_token, redeem_qr_token, render_qr_svg
from .services.targets import PurchaseTarget


class GenerateQrView(APIView):
    """
    GET /api/qr/generate-qr/<type>/<id>
    1회용 코드 발급 후 QR SVG 이미지로 응답
    """

    permission_classes = [IsSuperAdminOrAdmin]

    @swagger_auto_schema(responses={200: "image/svg+xml"})
    def get(self, request, kind, entity_id):
        target = PurchaseTarget.parse(kind, entity_id)
        payment = issue_qr_token(target, issued_by=request.user)
        svg = render_qr_svg(build_qr_payload(payment))
        return HttpResponse(svg, content_type="image/svg+xml")


class ProcessPaymentView(APIView):
    """POST /api/qr/process-payment   {qrData}"""

    permission_classes = [IsStudent]

    @swagger_auto_schema(request_body=ProcessPaymentSerializer)
    def post(self, request):
        serializer = ProcessPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        target = redeem_qr_token(
            serializer.validated_data["qrData"],
            student=request.user.student_profile,
        )
        return Response({"message": f"{target.label} purchased successfully."})
