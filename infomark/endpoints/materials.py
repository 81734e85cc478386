from __future__ import annotations

from ..models import MaterialRequest, MaterialResponse
from ..results import Result
from .base import Endpoint


class Materials(Endpoint):
    group = 'materials'

    async def get_file(self, token: str, course_id: int, material_id: int) -> bytes:
        self.not_implemented('get_file')

    async def upload_file(self, token: str, course_id: int, material_id: int, content: bytes) -> Result[bool]:
        self.not_implemented('upload_file')

    async def list_materials(self, token: str, course_id: int) -> Result[list[MaterialResponse]]:
        self.not_implemented('list_materials')

    async def update(self, token: str, course_id: int, material_id: int, material: MaterialRequest) -> Result[bool]:
        self.not_implemented('update')

    async def delete(self, token: str, course_id: int, material_id: int) -> Result[bool]:
        self.not_implemented('delete')


__all__ = ['Materials']
