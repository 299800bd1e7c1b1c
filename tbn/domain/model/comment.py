"""Comment entity.

Listeners leave short comments on a regional station's page. Comments are
never deleted; withdrawing an account hides all of its comments.
"""

from datetime import datetime, timezone

from pydantic import Field

from tbn.domain.model.common import DomainModel
from tbn.domain.value import AccountId, CommentId


class Comment(DomainModel):
    """Comment on a regional broadcast."""

    id: CommentId
    region_code: str = Field(min_length=1, max_length=10)
    author_id: AccountId
    author_nickname: str  # Denormalized at write time
    text: str = Field(min_length=1, max_length=1000)
    visible: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
