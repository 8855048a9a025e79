# dating_api/routers/members.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from dating_api.dependencies import get_members_service
from dating_api.schemas.common import ErrorResponse
from dating_api.schemas.members import MemberDto
from dating_api.services.members_service import MembersService

router = APIRouter(prefix="/members", tags=["members"])


@router.get(
    "",
    response_model=List[MemberDto],
    summary="List members",
    description="Return every member. Powers the member list view.",
)
def list_members(
    *,
    service: MembersService = Depends(get_members_service),
) -> List[MemberDto]:
    return service.list_members()


@router.get(
    "/{member_id}",
    response_model=MemberDto,
    summary="Get a single member",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_member(
    *,
    member_id: str,
    service: MembersService = Depends(get_members_service),
) -> MemberDto:
    return service.get_member(member_id)
