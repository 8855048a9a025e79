# dating_api/services/members_service.py

from __future__ import annotations

from typing import List

from dating_api.exceptions import MemberNotFoundError
from dating_api.repositories.users import UsersRepository
from dating_api.schemas.members import MemberDto


class MembersService:
    """
    Read-only access to members, projected without credentials.
    """

    def __init__(self, repo: UsersRepository) -> None:
        self._repo = repo

    def list_members(self) -> List[MemberDto]:
        return [MemberDto.model_validate(u) for u in self._repo.list_users()]

    def get_member(self, member_id: str) -> MemberDto:
        user = self._repo.get_by_id(member_id)
        if user is None:
            raise MemberNotFoundError(member_id)
        return MemberDto.model_validate(user)


__all__ = ["MembersService"]
