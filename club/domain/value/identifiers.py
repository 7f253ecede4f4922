"""Strongly typed identifiers for club domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
TagId = NewType("TagId", UUID)
CommentId = NewType("CommentId", UUID)

# Posts and projects share one content model; the id type is common to both.
ContentId = NewType("ContentId", UUID)
