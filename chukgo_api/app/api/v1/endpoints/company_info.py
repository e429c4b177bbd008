"""
Company information endpoints.

Public read access to the static company pages; only administrators
may create or edit them.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from chukgo_api.app.core.security import require_admin
from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.company_info import CompanyInfoCreate, CompanyInfoRead, CompanyInfoUpdate
from chukgo_api.app.services.company_info_service import CompanyInfoService


router = APIRouter()


@router.get("", response_model=List[CompanyInfoRead])
async def list_company_info(
    section: Optional[str] = Query(None, description="vision, history, values, team or link"),
    store: EntityStore = Depends(get_store),
) -> List[CompanyInfoRead]:
    return await CompanyInfoService.list_company_info(store, section)


@router.get("/{info_id}", response_model=CompanyInfoRead)
async def get_company_info(info_id: int, store: EntityStore = Depends(get_store)) -> CompanyInfoRead:
    info = await CompanyInfoService.get_company_info(store, info_id)
    if not info:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company info not found")
    return info


@router.post("", response_model=CompanyInfoRead, status_code=status.HTTP_201_CREATED)
async def create_company_info(
    data: CompanyInfoCreate,
    current_user: Dict[str, Any] = Depends(require_admin),
    store: EntityStore = Depends(get_store),
) -> CompanyInfoRead:
    return await CompanyInfoService.create_company_info(store, data)


@router.put("/{info_id}", response_model=CompanyInfoRead)
async def update_company_info(
    info_id: int,
    data: CompanyInfoUpdate,
    current_user: Dict[str, Any] = Depends(require_admin),
    store: EntityStore = Depends(get_store),
) -> CompanyInfoRead:
    """Partially update an entry; omitted fields are left unchanged."""
    info = await CompanyInfoService.update_company_info(store, info_id, data)
    if not info:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company info not found")
    return info
