from __future__ import annotations

from ..models import SheetPointsResponse, SheetRequest, SheetResponse
from ..results import Result
from .base import Endpoint


class Sheets(Endpoint):
    group = 'sheets'

    async def list_sheets(self, token: str, course_id: int) -> Result[list[SheetResponse]]:
        self.not_implemented('list_sheets')

    async def get(self, token: str, course_id: int, sheet_id: int) -> Result[SheetResponse]:
        self.not_implemented('get')

    async def create(self, token: str, course_id: int, sheet: SheetRequest) -> Result[SheetResponse]:
        self.not_implemented('create')

    async def update(self, token: str, course_id: int, sheet_id: int, sheet: SheetRequest) -> Result[bool]:
        self.not_implemented('update')

    async def delete(self, token: str, course_id: int, sheet_id: int) -> Result[bool]:
        self.not_implemented('delete')

    # Documentation is not conclusive about the reply shape.
    async def points(self, token: str, course_id: int, sheet_id: int) -> Result[list[SheetPointsResponse]]:
        self.not_implemented('points')

    async def get_file(self, token: str, course_id: int, sheet_id: int) -> bytes:
        self.not_implemented('get_file')

    async def upload_file(self, token: str, course_id: int, sheet_id: int, archive: bytes) -> Result[bool]:
        self.not_implemented('upload_file')


__all__ = ['Sheets']
