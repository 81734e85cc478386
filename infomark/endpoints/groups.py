from __future__ import annotations

from ..models import Bid, GroupRequest, GroupResponse
from ..results import Result
from .base import Endpoint


class Groups(Endpoint):
    group = 'groups'

    async def enroll(self, token: str, course_id: int, group_id: int, user_id: int) -> Result[bool]:
        self.not_implemented('enroll')

    async def list_groups(self, token: str, course_id: int) -> Result[list[GroupResponse]]:
        self.not_implemented('list_groups')

    async def create(self, token: str, course_id: int, group: GroupRequest) -> Result[GroupResponse]:
        self.not_implemented('create')

    async def update(self, token: str, course_id: int, group_id: int, group: GroupRequest) -> Result[bool]:
        self.not_implemented('update')

    async def delete(self, token: str, course_id: int, group_id: int) -> Result[bool]:
        self.not_implemented('delete')

    async def bid(self, token: str, course_id: int, group_id: int, bid: Bid) -> Result[bool]:
        self.not_implemented('bid')

    async def own(self, token: str, course_id: int) -> Result[list[GroupResponse]]:
        self.not_implemented('own')


__all__ = ['Groups']
