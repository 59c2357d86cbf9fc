# PATH: apps/api/common/pagination.py
"""
page / perPage 목록 봉투.

- page 와 perPage 가 둘 다 있을 때만 잘라낸다
- 응답: {<collection>: [...], totalCount, documentCount}
  totalCount = 이번 응답에 담긴 개수, documentCount = 필터 적용 전체 개수
"""
from __future__ import annotations

from rest_framework.exceptions import ValidationError
from rest_framework.response import Response


def _positive_int(raw, name: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError({name: [f"{name} must be a positive integer."]})
    if value < 1:
        raise ValidationError({name: [f"{name} must be a positive integer."]})
    return value


def page_slice(request, queryset):
    page = request.query_params.get("page")
    per_page = request.query_params.get("perPage")
    if not page or not per_page:
        return queryset

    page = _positive_int(page, "page")
    per_page = _positive_int(per_page, "perPage")
    start = (page - 1) * per_page
    return queryset[start:start + per_page]


class EnvelopeListMixin:
    """ModelViewSet.list 를 page/perPage 봉투 응답으로 교체."""

    collection_name = "results"

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        document_count = queryset.count()

        serializer = self.get_serializer(page_slice(request, queryset), many=True)
        data = serializer.data
        return Response({
            self.collection_name: data,
            "totalCount": len(data),
            "documentCount": document_count,
        })
