# PATH: apps/api/common/viewsets.py
from __future__ import annotations

from django.http import Http404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from apps.api.common.exceptions import EntityNotFound
from apps.api.common.pagination import EnvelopeListMixin


READ_ACTIONS = ("list", "retrieve")


class MessageModelViewSet(EnvelopeListMixin, ModelViewSet):
    """
    CRUD 공통 ViewSet

    - list    : {<collection>, totalCount, documentCount}
    - create  : 201 {message, ...created_payload}
    - update  : PUT 만 허용, 항상 부분 수정 (필드 1개 이상)
    - destroy : {message, ...perform_destroy 반환값}
    - 없는 id : missing_message 또는 "No <entity_label>" (기본 400)
    - 권한    : 조회 read_permission_classes / 쓰기 write_permission_classes,
                action_permission_classes 로 action 단위 덮어쓰기
    """

    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    entity_label = "Entity"
    missing_status = status.HTTP_400_BAD_REQUEST
    missing_message = None

    created_message = "Created Successfully"
    updated_message = "Updated Successfuly"
    deleted_message = "Deleted Successfuly"

    write_serializer_class = None

    read_permission_classes = [IsAuthenticated]
    write_permission_classes = [IsAuthenticated]
    action_permission_classes: dict = {}

    # ------------------------------
    # Permission / Serializer 선택
    # ------------------------------
    def get_permissions(self):
        if self.action in self.action_permission_classes:
            classes = self.action_permission_classes[self.action]
        elif self.action in READ_ACTIONS:
            classes = self.read_permission_classes
        else:
            classes = self.write_permission_classes
        return [permission() for permission in classes]

    def get_serializer_class(self):
        if self.action in ("create", "update") and self.write_serializer_class:
            return self.write_serializer_class
        return super().get_serializer_class()

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            message = self.missing_message or f"No {self.entity_label}"
            raise EntityNotFound(message, http_status=self.missing_status)

    # ------------------------------
    # Payload hooks
    # ------------------------------
    def created_payload(self, instance) -> dict:
        return {}

    def updated_payload(self, instance) -> dict:
        return {}

    # ------------------------------
    # CRUD
    # ------------------------------
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return Response(
            {"message": self.created_message, **self.created_payload(serializer.instance)},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return Response(
            {"message": self.updated_message, **self.updated_payload(serializer.instance)},
            status=status.HTTP_200_OK,
        )

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        extra = self.perform_destroy(instance) or {}
        return Response(
            {"message": self.deleted_message, **extra},
            status=status.HTTP_200_OK,
        )
