"""Comment use cases."""

from .common import AuthorItem, CommentItem, CommentListResponse
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsUseCase
from .get_replies import GetRepliesRequest, GetRepliesUseCase
from .get_top_level_comments import (
    GetTopLevelCommentsRequest,
    GetTopLevelCommentsUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "AuthorItem",
    "CommentItem",
    "CommentListResponse",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesUseCase",
    "GetTopLevelCommentsRequest",
    "GetTopLevelCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
