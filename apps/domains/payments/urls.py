# PATH: apps/domains/payments/urls.py
from django.urls import path

from .views import GenerateQrView, ProcessPaymentView

urlpatterns = [
    path("generate-qr/<str:kind>/<str:entity_id>", GenerateQrView.as_view(), name="qr-generate"),
    path("process-payment", ProcessPaymentView.as_view(), name="qr-process-payment"),
]
