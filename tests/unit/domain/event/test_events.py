"""Unit tests for domain events."""

import pytest

from blog.domain.event import CommentDeleted, DomainEvent
from blog.domain.value import ArticleId, CommentId


class TestDomainEvent:
    """Tests for the event base class."""

    def test_base_event_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            DomainEvent()

    def test_event_without_aggregate_id_cannot_be_instantiated(self):
        class Incomplete(DomainEvent):
            comment_id: CommentId

        with pytest.raises(TypeError):
            Incomplete(comment_id=CommentId(1))

    def test_concrete_event(self):
        event = CommentDeleted(
            comment_id=CommentId(7),
            article_id=ArticleId(1),
            removed_ids=(CommentId(7),),
        )

        assert event.aggregate_id == "7"
        assert event.event_type == "CommentDeleted"
