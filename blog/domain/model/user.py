"""User profile read model.

Users are owned by the account service. The comment subsystem only needs
enough of a profile to render who wrote a comment.
"""

from typing import Optional

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId


class UserProfile(DomainModel):
    """Display information for a comment author."""

    id: UserId
    display_name: str
    avatar_url: Optional[str] = None
    profile_url: Optional[str] = None
