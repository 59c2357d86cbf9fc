from rest_framework import serializers


class ProcessPaymentSerializer(serializers.Serializer):
    """qrData: QR 에 담긴 JSON 문자열 {type, entityId, uniqueCode} (객체도 허용)"""

    qrData = serializers.JSONField()
