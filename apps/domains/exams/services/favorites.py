# PATH: apps/domains/exams/services/favorites.py
from __future__ import annotations

import logging

from django.db import transaction

from apps.domains.exams.models import Question

logger = logging.getLogger(__name__)


@transaction.atomic
def toggle_favorite(*, owner, question: Question) -> bool:
    """
    즐겨찾기 토글 (학생/강사 프로필 공통).

    owner 행을 잠근 뒤 포함 여부를 보고 뒤집는다 → 동시 토글이 서로 덮어쓰지 않음.
    Returns: 토글 후 즐겨찾기 상태 (True = 추가됨)
    """
    locked = type(owner).objects.select_for_update().get(pk=owner.pk)
    favorites = locked.favorite_questions

    if favorites.filter(pk=question.pk).exists():
        favorites.remove(question)
        added = False
    else:
        favorites.add(question)
        added = True

    logger.info(
        "favorite toggle %s=%s question=%s added=%s",
        type(owner).__name__.lower(), owner.pk, question.pk, added,
    )
    return added
