# PATH: apps/domains/exams/views/comment_view.py
from __future__ import annotations

from rest_framework.permissions import IsAuthenticated

from apps.api.common.exceptions import NotAllowed
from apps.api.common.viewsets import MessageModelViewSet
from apps.core.permissions import IsStudent
from apps.domains.exams.filters import CommentFilter
from apps.domains.exams.models import Comment
from apps.domains.exams.serializers.comment import CommentSerializer, CommentUpdateSerializer


class CommentViewSet(MessageModelViewSet):
    """
    GET    /api/exam/comment         ?studentId=&questionId=
    POST   /api/exam/comment         (student)
    PUT    /api/exam/comment/<id>    (작성 학생만)
    DELETE /api/exam/comment/<id>    (작성 학생만)
    """

    queryset = Comment.objects.select_related("student__user", "question")
    serializer_class = CommentSerializer
    filterset_class = CommentFilter

    read_permission_classes = [IsAuthenticated]
    write_permission_classes = [IsStudent]

    collection_name = "comments"
    entity_label = "Comment"
    created_message = "Create Comment"

    def get_serializer_class(self):
        if self.action == "update":
            return CommentUpdateSerializer
        return super().get_serializer_class()

    def _assert_author(self, comment: Comment) -> None:
        if comment.student.user_id != self.request.user.id:
            raise NotAllowed()

    def perform_create(self, serializer):
        serializer.save(student=self.request.user.student_profile)

    def created_payload(self, instance):
        return {"commentId": instance.id}

    def perform_update(self, serializer):
        self._assert_author(serializer.instance)
        serializer.save()

    def perform_destroy(self, instance):
        self._assert_author(instance)
        instance.delete()
