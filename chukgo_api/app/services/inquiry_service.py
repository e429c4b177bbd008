"""
Business logic for contact form inquiries.

Every submitted form becomes an inquiry with ``resolved`` set to
``False``.  Administrators list inquiries and mark them resolved.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.store import INQUIRIES, EntityStore
from ..schemas.inquiry import ContactForm, InquiryRead

logger = logging.getLogger(__name__)


class InquiryService:
    """Service for contact inquiries."""

    @classmethod
    async def create_inquiry(cls, store: EntityStore, data: ContactForm) -> InquiryRead:
        record = data.model_dump()
        record.update(created_at=datetime.now(timezone.utc), resolved=False)
        stored = store.insert(INQUIRIES, record)
        logger.info("Received inquiry %s: %s", stored["id"], data.subject)
        return InquiryRead.model_validate(stored)

    @classmethod
    async def list_inquiries(cls, store: EntityStore, resolved: Optional[bool] = None) -> List[InquiryRead]:
        """List inquiries, optionally only resolved or unresolved ones."""
        records = store.list(INQUIRIES)
        if resolved is not None:
            records = [r for r in records if r["resolved"] == resolved]
        return [InquiryRead.model_validate(r) for r in records]

    @classmethod
    async def resolve_inquiry(cls, store: EntityStore, inquiry_id: int) -> Optional[InquiryRead]:
        updated = store.update(INQUIRIES, inquiry_id, {"resolved": True})
        if updated is None:
            return None
        logger.info("Inquiry %s marked resolved", inquiry_id)
        return InquiryRead.model_validate(updated)
