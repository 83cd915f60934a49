"""Strongly typed identifiers for blog domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting. Identifiers are the integer
keys assigned by the store.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
ArticleId = NewType("ArticleId", int)
UserId = NewType("UserId", int)
