"""Member Resources

Resources:
- library://members/list - Registered members with their held-book counts
- library://members/{member_id} - One member with the books they hold
"""

import logging
from typing import Any

from fastmcp.exceptions import ResourceError
from pydantic import BaseModel, Field

from ..catalog import Catalog
from ..models import HOLD_LIMIT, Book, Member

logger = logging.getLogger(__name__)


class MemberSummary(BaseModel):
    """One row of the member listing."""

    id: str
    name: str
    held_count: int = Field(..., ge=0, le=HOLD_LIMIT)


class MemberDetailResponse(BaseModel):
    """A member and the books issued to them."""

    member: Member
    held_books: list[Book]
    hold_limit: int = HOLD_LIMIT


def build_member_resources(catalog: Catalog) -> list[dict[str, Any]]:
    """Bind the member resource handlers to ``catalog``."""

    async def list_members_handler() -> dict[str, Any]:
        logger.debug("MCP Resource Request - members/list")
        members = [
            MemberSummary(id=m.id, name=m.name, held_count=m.held_count).model_dump()
            for m in catalog.list_members()
        ]
        return {"library_name": catalog.name, "members": members, "total": len(members)}

    async def get_member_handler(member_id: str) -> dict[str, Any]:
        logger.debug("MCP Resource Request - members/%s", member_id)
        member = catalog.find_member(member_id)
        if member is None:
            raise ResourceError(f"Member not found: {member_id}")
        return MemberDetailResponse(
            member=member, held_books=list(member.held_books)
        ).model_dump(mode="json")

    return [
        {
            "uri": "library://members/list",
            "name": "Member Registry",
            "description": "Registered members and how many books each holds.",
            "mime_type": "application/json",
            "handler": list_members_handler,
        },
        {
            "uri": "library://members/{member_id}",
            "name": "Member Details",
            "description": "A member's contact details and the books issued to them.",
            "mime_type": "application/json",
            "handler": get_member_handler,
        },
    ]
