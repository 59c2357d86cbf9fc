# PATH: apps/api/common/serializers.py
from __future__ import annotations

import json

from rest_framework import serializers


AT_LEAST_ONE_FIELD = "At least one field must be provided."


def decode_json_fields(data, keys):
    """
    multipart 요청은 중첩 필드(requests, explanation 등)를 JSON 문자열로 보낸다.
    QueryDict → dict 로 평탄화하고 keys 에 해당하는 문자열만 json 디코딩.
    디코딩 실패 값은 그대로 둬서 필드 검증이 에러를 내게 한다.
    """
    if hasattr(data, "dict"):
        data = data.dict()
    else:
        data = dict(data)

    for key in keys:
        value = data.get(key)
        if isinstance(value, str):
            try:
                data[key] = json.loads(value)
            except ValueError:
                pass
    return data


class AtLeastOneFieldMixin:
    """부분 수정(PUT) 시 알려진 필드가 하나도 없으면 거부"""

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if self.partial and not attrs:
            raise serializers.ValidationError(AT_LEAST_ONE_FIELD)
        return attrs


class NamedRelatedField(serializers.PrimaryKeyRelatedField):
    """pk 로 받고, 없으면 '<Label> not found' 로 거부"""

    def __init__(self, label_name: str, **kwargs):
        kwargs.setdefault("error_messages", {})
        kwargs["error_messages"].setdefault("does_not_exist", f"{label_name} not found")
        kwargs["error_messages"].setdefault("incorrect_type", f"{label_name} not found")
        super().__init__(**kwargs)
