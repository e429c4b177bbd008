"""
Contact form endpoint.

Anyone can send a message through the contact page; it is stored as an
inquiry for administrators.
"""

from fastapi import APIRouter, Depends, status

from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.inquiry import ContactForm, ContactResponse
from chukgo_api.app.services.inquiry_service import InquiryService


router = APIRouter()


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact_form(data: ContactForm, store: EntityStore = Depends(get_store)) -> ContactResponse:
    inquiry = await InquiryService.create_inquiry(store, data)
    return ContactResponse(success=True, inquiry=inquiry)
