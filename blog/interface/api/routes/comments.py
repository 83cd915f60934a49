"""Comment routes."""

from typing import NoReturn

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Response, status
from pydantic import BaseModel

from blog.application.usecase.comment import (
    CommentListResponse,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetTopLevelCommentsRequest,
    GetTopLevelCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from blog.domain.error import (
    AuthorizationError,
    CascadeLimitError,
    ConsistencyError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from blog.domain.service import JWTService
from blog.domain.value import UserId

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (ConsistencyError, status.HTTP_409_CONFLICT),
    (CascadeLimitError, 422),  # Unprocessable: thread too large to delete
]


def _raise_for(error: Exception) -> NoReturn:
    """Translate a domain or request validation error into an HTTP error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            raise HTTPException(status_code=status_code, detail=str(error))
    if isinstance(error, ValueError):
        # Pydantic rejected the use case request (e.g. negative page)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    logfire.error("Unexpected comment API error", error=str(error))
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


def _require_user(
    jwt_service: JWTService, authorization: str | None, action: str
) -> UserId:
    user_id = jwt_service.get_user_id_from_header(authorization)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action} comments",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    article_id: int
    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Create a comment on an article or reply to another comment.

    Requires a bearer token.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: ``Bearer <token>`` header

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or the comment is rejected
    """
    user_id = _require_user(jwt_service, authorization, "create")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                article_id=request.article_id,
                content=request.content,
                author_id=user_id,
                parent_id=request.parent_id,
            )
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Comment creation rejected", error=str(e))
        _raise_for(e)


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Update a comment's content. Only the author can edit."""
    user_id = _require_user(jwt_service, authorization, "edit")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id, user_id=user_id, content=request.content
            )
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Comment update rejected", comment_id=comment_id, error=str(e))
        _raise_for(e)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete a comment and every reply below it. Only the author can delete.

    Raises:
        HTTPException: 401/403/404, or 422 if the thread is too large
    """
    user_id = _require_user(jwt_service, authorization, "delete")

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Comment delete rejected", comment_id=comment_id, error=str(e))
        _raise_for(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/top-level-with-replies", response_model=CommentListResponse)
async def get_top_level_with_replies(
    article_id: int,
    get_top_level_comments_use_case: FromDishka[GetTopLevelCommentsUseCase],
    page: int = 0,
    size: int = 10,
    reply_limit: int | None = None,
) -> CommentListResponse:
    """First screen of an article's discussion.

    Top-level comments newest first, each with its reply count and the
    newest ``reply_limit`` replies (3 unless configured otherwise).
    """
    try:
        return await get_top_level_comments_use_case.execute(
            GetTopLevelCommentsRequest(
                article_id=article_id, page=page, size=size, reply_limit=reply_limit
            )
        )
    except (DomainError, ValueError) as e:
        _raise_for(e)


@router.get("/replies", response_model=CommentListResponse)
async def get_replies(
    parent_id: int,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    page: int = 0,
    size: int = 5,
) -> CommentListResponse:
    """Page through the direct replies to a comment, newest first."""
    try:
        return await get_replies_use_case.execute(
            GetRepliesRequest(parent_id=parent_id, page=page, size=size)
        )
    except (DomainError, ValueError) as e:
        _raise_for(e)


@router.get("", response_model=CommentListResponse)
async def get_comments(
    article_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    parent_id: int | None = None,
    page: int | None = None,
    size: int | None = None,
) -> CommentListResponse:
    """List an article's comments, or the direct replies to ``parent_id``.

    Without ``page`` and ``size`` the whole list is returned.
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                article_id=article_id, parent_id=parent_id, page=page, size=size
            )
        )
    except (DomainError, ValueError) as e:
        _raise_for(e)
