"""Comment command service.

Owns every write to comments: creating top-level comments and replies,
editing content, and deleting whole reply subtrees.
"""

from typing import List, Optional

import logfire

from blog.domain.error import (
    AuthorizationError,
    CascadeLimitError,
    ConsistencyError,
    NotFoundError,
)
from blog.domain.event import (
    CommentCreated,
    CommentDeleted,
    CommentUpdated,
    DomainEventPublisher,
)
from blog.domain.model.comment import Comment
from blog.domain.repository import ArticleRepository, CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId

from .base import Service
from .comment_factory import CommentFactory

DEFAULT_MAX_CASCADE_SIZE = 10_000


class CommentCommandService(Service):
    """Domain service for comment write operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        event_publisher: DomainEventPublisher,
        comment_factory: CommentFactory,
        max_cascade_size: int = DEFAULT_MAX_CASCADE_SIZE,
        verify_article_exists: bool = True,
    ) -> None:
        """Initialize comment command service.

        Args:
            comment_repository: Comment repository
            article_repository: Article existence lookups
            event_publisher: Publisher for comment events
            comment_factory: Factory enforcing comment content rules
            max_cascade_size: Most comments a single delete may remove
            verify_article_exists: Reject comments on unknown articles
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository
        self.event_publisher = event_publisher
        self.comment_factory = comment_factory
        self.max_cascade_size = max_cascade_size
        self.verify_article_exists = verify_article_exists

    async def create_comment(
        self,
        content: Optional[str],
        article_id: Optional[ArticleId],
        author_id: Optional[UserId],
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment on an article or a reply to another comment.

        Args:
            content: Comment text
            article_id: Article ID
            author_id: Author user ID
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment with its store-assigned ID

        Raises:
            ValidationError: If content or identifiers are invalid
            NotFoundError: If the article or parent comment doesn't exist
            ConsistencyError: If the parent belongs to a different article
        """
        with logfire.span(
            "comment_command_service.create_comment",
            article_id=article_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            # Fail on bad content or missing identifiers before touching the store
            self.comment_factory.validate_content(content)
            self.comment_factory.require(article_id, "Article ID")
            self.comment_factory.require(author_id, "Author ID")

            if self.verify_article_exists:
                if not await self.article_repository.exists(article_id):
                    logfire.warn("Article not found", article_id=article_id)
                    raise NotFoundError("Article", str(article_id))

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=parent_id,
                        article_id=article_id,
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.article_id != article_id:
                    logfire.warn(
                        "Parent comment does not belong to article",
                        parent_id=parent_id,
                        parent_article_id=parent.article_id,
                        target_article_id=article_id,
                    )
                    raise ConsistencyError(
                        f"Parent comment {parent_id} does not belong to article {article_id}"
                    )
                comment = self.comment_factory.create_reply(
                    content, article_id, author_id, parent_id
                )
            else:
                comment = self.comment_factory.create_top_level(
                    content, article_id, author_id
                )

            saved = await self.comment_repository.save(comment)

            await self.event_publisher.publish(
                CommentCreated(
                    comment_id=saved.id,
                    article_id=saved.article_id,
                    author_id=saved.author_id,
                    is_reply=saved.is_reply,
                )
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                article_id=article_id,
                author_id=author_id,
                is_reply=saved.is_reply,
            )
            return saved

    async def update_comment(
        self,
        comment_id: CommentId,
        requesting_user_id: UserId,
        content: Optional[str],
    ) -> Comment:
        """Edit the content of a comment.

        Args:
            comment_id: Comment ID
            requesting_user_id: User asking for the edit (must be the author)
            content: New content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If the user isn't the author
            ValidationError: If the new content is invalid
        """
        with logfire.span(
            "comment_command_service.update_comment",
            comment_id=comment_id,
            user_id=requesting_user_id,
        ):
            comment = await self._load_owned(comment_id, requesting_user_id, "edit")

            revised = self.comment_factory.revise_content(comment, content)
            saved = await self.comment_repository.save(revised)

            await self.event_publisher.publish(
                CommentUpdated(
                    comment_id=comment_id,
                    article_id=saved.article_id,
                    author_id=saved.author_id,
                )
            )
            logfire.info(
                "Comment updated",
                comment_id=comment_id,
                content_length=len(saved.content),
            )
            return saved

    async def delete_comment(
        self, comment_id: CommentId, requesting_user_id: UserId
    ) -> List[CommentId]:
        """Delete a comment together with every reply below it.

        The subtree is collected first with an explicit worklist, so a
        thread that exceeds ``max_cascade_size`` is rejected before anything
        is removed. Comments are then deleted children-first: if the store
        fails part-way, whatever remains is still attached to the root and
        calling this again finishes the job.

        Args:
            comment_id: Root of the subtree to delete
            requesting_user_id: User asking for the delete (must be the author)

        Returns:
            IDs actually removed, descendants before ancestors

        Raises:
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If the user isn't the author
            CascadeLimitError: If the subtree is larger than allowed
        """
        with logfire.span(
            "comment_command_service.delete_comment",
            comment_id=comment_id,
            user_id=requesting_user_id,
        ):
            comment = await self._load_owned(comment_id, requesting_user_id, "delete")

            subtree = await self._collect_subtree(comment_id)
            if len(subtree) > 1:
                logfire.info(
                    "Deleting comment with replies",
                    comment_id=comment_id,
                    reply_count=len(subtree) - 1,
                )

            removed: List[CommentId] = []
            for node_id in reversed(subtree):
                if await self.comment_repository.delete_by_id(node_id):
                    removed.append(node_id)
                else:
                    logfire.debug("Comment already deleted", comment_id=node_id)

            await self.event_publisher.publish(
                CommentDeleted(
                    comment_id=comment_id,
                    article_id=comment.article_id,
                    removed_ids=tuple(removed),
                )
            )
            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                article_id=comment.article_id,
                removed_count=len(removed),
            )
            return removed

    async def _load_owned(
        self, comment_id: CommentId, user_id: UserId, action: str
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id, action=action)
            raise NotFoundError("Comment", str(comment_id))
        if comment.author_id != user_id:
            logfire.warn(
                "Unauthorized comment modification attempt",
                comment_id=comment_id,
                author_id=comment.author_id,
                user_id=user_id,
                action=action,
            )
            raise AuthorizationError("comment", str(comment_id), str(user_id))
        return comment

    async def _collect_subtree(self, root_id: CommentId) -> List[CommentId]:
        """Walk the reply tree below ``root_id`` depth-first.

        Returns:
            Subtree IDs in discovery order; every comment comes before its
            replies, so the reversed list deletes leaves first.

        Raises:
            CascadeLimitError: If more than ``max_cascade_size`` comments are found
        """
        discovered: List[CommentId] = []
        seen = {root_id}
        pending = [root_id]

        while pending:
            node_id = pending.pop()
            discovered.append(node_id)
            if len(discovered) > self.max_cascade_size:
                logfire.error(
                    "Cascade delete limit exceeded",
                    comment_id=root_id,
                    limit=self.max_cascade_size,
                )
                raise CascadeLimitError(str(root_id), self.max_cascade_size)

            for child in await self.comment_repository.find_by_parent_id(node_id):
                if child.id not in seen:
                    seen.add(child.id)
                    pending.append(child.id)

        return discovered
