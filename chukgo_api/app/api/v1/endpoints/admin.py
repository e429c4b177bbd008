"""
Administrative endpoints.

Administrators review the inquiries sent through the contact form and
mark them resolved once handled.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from chukgo_api.app.core.security import require_admin
from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.inquiry import InquiryRead
from chukgo_api.app.services.inquiry_service import InquiryService


router = APIRouter()


@router.get("/inquiries", response_model=List[InquiryRead])
async def list_inquiries(
    resolved: Optional[bool] = Query(None),
    current_user: Dict[str, Any] = Depends(require_admin),
    store: EntityStore = Depends(get_store),
) -> List[InquiryRead]:
    return await InquiryService.list_inquiries(store, resolved)


@router.put("/inquiries/{inquiry_id}/resolve", response_model=InquiryRead)
async def resolve_inquiry(
    inquiry_id: int,
    current_user: Dict[str, Any] = Depends(require_admin),
    store: EntityStore = Depends(get_store),
) -> InquiryRead:
    inquiry = await InquiryService.resolve_inquiry(store, inquiry_id)
    if not inquiry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inquiry not found")
    return inquiry
