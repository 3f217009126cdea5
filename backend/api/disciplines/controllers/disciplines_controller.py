"""Disciplines controller: API routes for the catalog."""

from fastapi import APIRouter, status

from api.disciplines.dto.discipline import DisciplineRequest, DisciplineResponse
from api.disciplines.services import disciplines_service
from api.files.dto.file import FileResponse
from api.files.services import files_service

router = APIRouter(prefix="/api/disciplines", tags=["Disciplines"])


@router.post("", response_model=DisciplineResponse, status_code=status.HTTP_201_CREATED)
async def create_discipline(data: DisciplineRequest):
    return disciplines_service.create_discipline(data)


@router.get("/{discipline_id}", response_model=DisciplineResponse)
async def get_discipline(discipline_id: int):
    return disciplines_service.get_discipline(discipline_id)


@router.put("/{discipline_id}", response_model=DisciplineResponse)
async def update_discipline(discipline_id: int, data: DisciplineRequest):
    return disciplines_service.update_discipline(discipline_id, data)


@router.get("/{discipline_id}/files", response_model=list[FileResponse])
async def list_approved_files(discipline_id: int):
    return files_service.list_approved_by_discipline(discipline_id)
