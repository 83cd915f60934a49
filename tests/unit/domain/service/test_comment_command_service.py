"""Unit tests for CommentCommandService."""

import pytest

from blog.adapter.event import InProcessEventPublisher
from blog.domain.error import (
    AuthorizationError,
    CascadeLimitError,
    ConsistencyError,
    NotFoundError,
    ValidationError,
)
from blog.domain.event import CommentCreated, CommentDeleted, CommentUpdated
from blog.domain.repository import ArticleRepository, CommentRepository
from blog.domain.service import (
    CommentCommandService,
    CommentFactory,
    CommentQueryService,
)
from blog.domain.value import ArticleId, CommentId, UserId
from blog.persistence.repository.inmemory import InMemoryCommentRepository
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

ARTICLE = ArticleId(1)
OTHER_ARTICLE = ArticleId(2)


async def _setup(unit_env):
    """Resolve the service and its collaborators, with two known articles."""
    service = await unit_env.get(CommentCommandService)
    comment_repo = await unit_env.get(CommentRepository)
    article_repo = await unit_env.get(ArticleRepository)
    publisher = await unit_env.get(InProcessEventPublisher)
    article_repo.add(ARTICLE)
    article_repo.add(OTHER_ARTICLE)
    return service, comment_repo, publisher


async def _snapshot(comment_repo: CommentRepository, *article_ids: ArticleId):
    snapshot = []
    for article_id in article_ids:
        snapshot.extend(await comment_repo.find_by_article_id(article_id))
    return snapshot


class FlakyCommentRepository(InMemoryCommentRepository):
    """Fails the first delete after ``fail_after`` successful ones."""

    def __init__(self, fail_after: int) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.deletes = 0
        self.failed = False

    async def delete_by_id(self, comment_id: CommentId) -> bool:
        if not self.failed and self.deletes == self.fail_after:
            self.failed = True
            raise ConnectionError("store unavailable")
        self.deletes += 1
        return await super().delete_by_id(comment_id)


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        # Arrange
        service, comment_repo, publisher = await _setup(unit_env)

        # Act
        comment = await service.create_comment("  hello  ", ARTICLE, UserId(10))

        # Assert
        assert comment.id is not None
        assert comment.content == "hello"
        assert comment.parent_id is None

        saved = await comment_repo.find_by_id(comment.id)
        assert saved == comment

        events = publisher.events_of(CommentCreated)
        assert len(events) == 1
        assert events[0].comment_id == comment.id
        assert events[0].is_reply is False

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        service, comment_repo, publisher = await _setup(unit_env)
        parent = await service.create_comment("hello", ARTICLE, UserId(10))

        reply = await service.create_comment(
            "hi back", ARTICLE, UserId(11), parent_id=parent.id
        )

        assert reply.parent_id == parent.id
        assert reply.article_id == ARTICLE
        assert await comment_repo.count_replies_by_parent_id(parent.id) == 1
        assert publisher.events_of(CommentCreated)[-1].is_reply is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   ", "x" * 1001])
    async def test_invalid_content_persists_nothing(self, unit_env, content):
        service, comment_repo, publisher = await _setup(unit_env)

        with pytest.raises(ValidationError):
            await service.create_comment(content, ARTICLE, UserId(10))

        assert await comment_repo.count_by_article_id(ARTICLE) == 0
        assert publisher.history == []

    @pytest.mark.asyncio
    async def test_missing_article_rejected(self, unit_env):
        service, comment_repo, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError, match="Article"):
            await service.create_comment("hello", ArticleId(999), UserId(10))

        assert await comment_repo.count_by_article_id(ArticleId(999)) == 0

    @pytest.mark.asyncio
    async def test_article_check_can_be_disabled(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        service = CommentCommandService(
            comment_repository=comment_repo,
            article_repository=await unit_env.get(ArticleRepository),
            event_publisher=await unit_env.get(InProcessEventPublisher),
            comment_factory=CommentFactory(),
            verify_article_exists=False,
        )

        # Act
        comment = await service.create_comment("hello", ArticleId(999), UserId(10))

        # Assert
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_missing_parent_rejected_without_side_effects(self, unit_env):
        """Retrying a reply to a missing parent never writes anything."""
        service, comment_repo, publisher = await _setup(unit_env)

        for _ in range(2):
            with pytest.raises(NotFoundError, match="Comment"):
                await service.create_comment(
                    "reply", ARTICLE, UserId(11), parent_id=CommentId(404)
                )

        assert await comment_repo.count_by_article_id(ARTICLE) == 0
        assert publisher.history == []

    @pytest.mark.asyncio
    async def test_parent_on_other_article_rejected(self, unit_env):
        # Arrange
        service, comment_repo, _ = await _setup(unit_env)
        parent = await service.create_comment("hello", OTHER_ARTICLE, UserId(10))

        # Act / Assert
        with pytest.raises(ConsistencyError):
            await service.create_comment(
                "reply", ARTICLE, UserId(11), parent_id=parent.id
            )

        assert await comment_repo.count_by_article_id(ARTICLE) == 0
        assert await comment_repo.count_replies_by_parent_id(parent.id) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("as_reply", [False, True])
    @pytest.mark.parametrize("verify_article_exists", [True, False])
    @pytest.mark.parametrize(
        "article_id, author_id",
        [(None, UserId(10)), (ARTICLE, None)],
    )
    async def test_missing_identifier_is_validation_error(
        self, unit_env, as_reply, verify_article_exists, article_id, author_id
    ):
        # Arrange
        service, comment_repo, publisher = await _setup(unit_env)
        service.verify_article_exists = verify_article_exists
        parent = await service.create_comment("parent", ARTICLE, UserId(10))
        parent_id = parent.id if as_reply else None
        before = await _snapshot(comment_repo, ARTICLE)
        events_before = len(publisher.events_of(CommentCreated))

        # Act / Assert
        with pytest.raises(ValidationError):
            await service.create_comment(
                "hello", article_id, author_id, parent_id=parent_id
            )

        assert await _snapshot(comment_repo, ARTICLE) == before
        assert len(publisher.events_of(CommentCreated)) == events_before


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        # Arrange
        service, comment_repo, publisher = await _setup(unit_env)
        comment = await service.create_comment("hello", ARTICLE, UserId(10))

        # Act
        updated = await service.update_comment(comment.id, UserId(10), " edited ")

        # Assert
        assert updated.content == "edited"
        assert updated.published_at == comment.published_at
        assert updated.updated_at >= comment.updated_at
        assert (await comment_repo.find_by_id(comment.id)).content == "edited"
        assert publisher.events_of(CommentUpdated)[0].comment_id == comment.id

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        service, comment_repo, _ = await _setup(unit_env)
        comment = await service.create_comment("hello", ARTICLE, UserId(10))

        with pytest.raises(AuthorizationError):
            await service.update_comment(comment.id, UserId(11), "hijacked")

        assert (await comment_repo.find_by_id(comment.id)).content == "hello"

    @pytest.mark.asyncio
    async def test_over_length_edit_keeps_content(self, unit_env):
        service, comment_repo, publisher = await _setup(unit_env)
        comment = await service.create_comment("hello", ARTICLE, UserId(10))

        with pytest.raises(ValidationError):
            await service.update_comment(comment.id, UserId(10), "x" * 1001)

        assert (await comment_repo.find_by_id(comment.id)).content == "hello"
        assert publisher.events_of(CommentUpdated) == []

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        service, _, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError):
            await service.update_comment(CommentId(404), UserId(10), "edited")


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_thread_scenario(self, unit_env):
        """Deleting the root of a three-level thread removes all of it."""
        # Arrange
        service, comment_repo, publisher = await _setup(unit_env)
        c1 = await service.create_comment("hello", ARTICLE, UserId(10))
        r1 = await service.create_comment(
            "reply", ARTICLE, UserId(11), parent_id=c1.id
        )
        r2 = await service.create_comment(
            "nested reply", ARTICLE, UserId(12), parent_id=r1.id
        )

        # Act
        removed = await service.delete_comment(c1.id, UserId(10))

        # Assert
        assert set(removed) == {c1.id, r1.id, r2.id}
        for comment_id in (c1.id, r1.id, r2.id):
            assert await comment_repo.find_by_id(comment_id) is None
        assert await comment_repo.count_by_article_id(ARTICLE) == 0

        query_service = await unit_env.get(CommentQueryService)
        removed_ids = {c1.id, r1.id, r2.id}
        listed = [
            *await query_service.get_comments(ARTICLE),
            *await query_service.get_top_level_comments(ARTICLE, 0, 100),
            *await query_service.get_replies(c1.id, 0, 100),
            *await query_service.get_replies(r1.id, 0, 100),
        ]
        assert not removed_ids & {comment.id for comment in listed}

    @pytest.mark.asyncio
    async def test_delete_removes_descendants_first(self, unit_env):
        service, _, _ = await _setup(unit_env)
        root = await service.create_comment("root", ARTICLE, UserId(10))
        child = await service.create_comment(
            "child", ARTICLE, UserId(11), parent_id=root.id
        )
        grandchild = await service.create_comment(
            "grandchild", ARTICLE, UserId(12), parent_id=child.id
        )

        removed = await service.delete_comment(root.id, UserId(10))

        assert removed.index(grandchild.id) < removed.index(child.id)
        assert removed[-1] == root.id

    @pytest.mark.asyncio
    async def test_delete_leaves_siblings_and_other_threads(self, unit_env):
        # Arrange
        service, comment_repo, _ = await _setup(unit_env)
        root = await service.create_comment("root", ARTICLE, UserId(10))
        doomed = await service.create_comment(
            "doomed", ARTICLE, UserId(10), parent_id=root.id
        )
        for i in range(3):
            await service.create_comment(
                f"below {i}", ARTICLE, UserId(11), parent_id=doomed.id
            )
        sibling = await service.create_comment(
            "sibling", ARTICLE, UserId(12), parent_id=root.id
        )
        other = await service.create_comment("other", ARTICLE, UserId(12))
        before = await comment_repo.count_by_article_id(ARTICLE)

        # Act
        removed = await service.delete_comment(doomed.id, UserId(10))

        # Assert
        assert len(removed) == 4
        assert await comment_repo.count_by_article_id(ARTICLE) == before - 4
        assert await comment_repo.find_by_id(root.id) is not None
        assert await comment_repo.find_by_id(sibling.id) is not None
        assert await comment_repo.find_by_id(other.id) is not None

        query_service = await unit_env.get(CommentQueryService)
        replies = await query_service.get_replies(root.id, 0, 100)
        assert [reply.id for reply in replies] == [sibling.id]
        listed = await query_service.get_comments(ARTICLE)
        assert not set(removed) & {comment.id for comment in listed}
        top_level = await query_service.get_top_level_comments(ARTICLE, 0, 100)
        assert {comment.id for comment in top_level} == {root.id, other.id}

    @pytest.mark.asyncio
    async def test_events_follow_the_write(self, unit_env):
        """Subscribers see the stored state the event describes."""
        # Arrange
        service, comment_repo, publisher = await _setup(unit_env)
        seen = []

        async def on_created(event):
            seen.append(await comment_repo.find_by_id(event.comment_id))

        async def on_deleted(event):
            seen.extend(
                [await comment_repo.find_by_id(i) for i in event.removed_ids]
            )

        publisher.subscribe(CommentCreated, on_created)
        publisher.subscribe(CommentDeleted, on_deleted)

        # Act
        root = await service.create_comment("root", ARTICLE, UserId(10))
        await service.create_comment("child", ARTICLE, UserId(11), parent_id=root.id)
        await service.delete_comment(root.id, UserId(10))

        # Assert
        assert [c.content for c in seen[:2]] == ["root", "child"]
        assert seen[2:] == [None, None]

    @pytest.mark.asyncio
    async def test_one_event_per_deleted_root(self, unit_env):
        service, _, publisher = await _setup(unit_env)
        root = await service.create_comment("root", ARTICLE, UserId(10))
        child = await service.create_comment(
            "child", ARTICLE, UserId(11), parent_id=root.id
        )

        removed = await service.delete_comment(root.id, UserId(10))

        events = publisher.events_of(CommentDeleted)
        assert len(events) == 1
        assert events[0].comment_id == root.id
        assert events[0].article_id == ARTICLE
        assert set(events[0].removed_ids) == set(removed) == {root.id, child.id}

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        # Arrange
        service, comment_repo, publisher = await _setup(unit_env)
        root = await service.create_comment("root", ARTICLE, UserId(10))
        await service.create_comment("child", ARTICLE, UserId(11), parent_id=root.id)
        before = await _snapshot(comment_repo, ARTICLE, OTHER_ARTICLE)
        events_before = len(publisher.history)

        # Act
        with pytest.raises(AuthorizationError):
            await service.delete_comment(root.id, UserId(11))

        # Assert
        assert await _snapshot(comment_repo, ARTICLE, OTHER_ARTICLE) == before
        assert len(publisher.history) == events_before

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        service, _, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError):
            await service.delete_comment(CommentId(404), UserId(10))

    @pytest.mark.asyncio
    async def test_cascade_limit_deletes_nothing(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        article_repo = await unit_env.get(ArticleRepository)
        article_repo.add(ARTICLE)
        publisher = await unit_env.get(InProcessEventPublisher)
        service = CommentCommandService(
            comment_repository=comment_repo,
            article_repository=article_repo,
            event_publisher=publisher,
            comment_factory=CommentFactory(),
            max_cascade_size=3,
        )
        root = await service.create_comment("root", ARTICLE, UserId(10))
        parent = root
        for i in range(3):
            parent = await service.create_comment(
                f"level {i}", ARTICLE, UserId(10), parent_id=parent.id
            )

        # Act
        with pytest.raises(CascadeLimitError) as exc_info:
            await service.delete_comment(root.id, UserId(10))

        # Assert
        assert exc_info.value.limit == 3
        assert await comment_repo.count_by_article_id(ARTICLE) == 4
        assert publisher.events_of(CommentDeleted) == []

    @pytest.mark.asyncio
    async def test_retry_after_partial_failure_finishes_delete(self, unit_env):
        """A store failure mid-cascade leaves a subtree a retry can finish."""
        # Arrange
        comment_repo = FlakyCommentRepository(fail_after=1)
        article_repo = await unit_env.get(ArticleRepository)
        article_repo.add(ARTICLE)
        publisher = await unit_env.get(InProcessEventPublisher)
        service = CommentCommandService(
            comment_repository=comment_repo,
            article_repository=article_repo,
            event_publisher=publisher,
            comment_factory=CommentFactory(),
        )
        root = await service.create_comment("root", ARTICLE, UserId(10))
        child = await service.create_comment(
            "child", ARTICLE, UserId(11), parent_id=root.id
        )
        await service.create_comment("leaf", ARTICLE, UserId(12), parent_id=child.id)

        # Act
        with pytest.raises(ConnectionError):
            await service.delete_comment(root.id, UserId(10))

        # The root is still there, so the delete can be repeated
        assert await comment_repo.find_by_id(root.id) is not None

        removed = await service.delete_comment(root.id, UserId(10))

        # Assert
        assert set(removed) == {root.id, child.id}
        assert await comment_repo.count_by_article_id(ARTICLE) == 0
        assert len(publisher.events_of(CommentDeleted)) == 1

    @pytest.mark.asyncio
    async def test_failing_event_handler_does_not_fail_write(self, unit_env):
        # Arrange
        service, comment_repo, publisher = await _setup(unit_env)

        async def broken_handler(event):
            raise RuntimeError("consumer down")

        publisher.subscribe(CommentCreated, broken_handler)

        # Act
        comment = await service.create_comment("hello", ARTICLE, UserId(10))

        # Assert
        assert await comment_repo.find_by_id(comment.id) is not None
        assert publisher.error_count == 1
