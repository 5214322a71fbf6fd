"""Strongly typed identifiers for workspace trust entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
WorkspaceId = NewType("WorkspaceId", UUID)
MemberId = NewType("MemberId", UUID)
ChannelId = NewType("ChannelId", UUID)
DomainClaimId = NewType("DomainClaimId", UUID)
InviteLinkId = NewType("InviteLinkId", UUID)
