"""Institutions controller: API routes for the tenant registry."""

from fastapi import APIRouter, status

from api.files.dto.file import FileResponse
from api.files.services import files_service
from api.institutions.dto.institution import (
    InstitutionRequest,
    InstitutionResponse,
    InstitutionStatsResponse,
)
from api.institutions.services import institutions_service
from api.disciplines.dto.discipline import DisciplineResponse
from api.disciplines.services import disciplines_service
from api.users.dto.user import UserResponse
from api.users.services import users_service

router = APIRouter(prefix="/api/institutions", tags=["Institutions"])


@router.post("", response_model=InstitutionResponse, status_code=status.HTTP_201_CREATED)
async def create_institution(data: InstitutionRequest):
    return institutions_service.create_institution(data)


@router.get("", response_model=list[InstitutionResponse])
async def list_institutions():
    return institutions_service.list_active_institutions()


@router.get("/expired", response_model=list[InstitutionResponse])
async def list_expired_institutions():
    return institutions_service.list_expired_institutions()


@router.get("/{institution_id}", response_model=InstitutionResponse)
async def get_institution(institution_id: int):
    return institutions_service.get_institution(institution_id)


@router.put("/{institution_id}", response_model=InstitutionResponse)
async def update_institution(institution_id: int, data: InstitutionRequest):
    return institutions_service.update_institution(institution_id, data)


@router.get("/{institution_id}/stats", response_model=InstitutionStatsResponse)
async def get_institution_stats(institution_id: int):
    return institutions_service.get_institution_stats(institution_id)


@router.get("/{institution_id}/users", response_model=list[UserResponse])
async def list_institution_users(institution_id: int):
    return users_service.list_users_by_institution(institution_id)


@router.get("/{institution_id}/disciplines", response_model=list[DisciplineResponse])
async def list_institution_disciplines(institution_id: int):
    return disciplines_service.list_disciplines_by_institution(institution_id)


@router.get("/{institution_id}/files/pending", response_model=list[FileResponse])
async def list_pending_files(institution_id: int):
    return files_service.list_pending_by_institution(institution_id)


@router.get("/{institution_id}/files/most-downloaded", response_model=list[FileResponse])
async def list_most_downloaded_files(institution_id: int, limit: int = files_service.MOST_DOWNLOADED_LIMIT):
    return files_service.list_most_downloaded_by_institution(institution_id, limit)
