"""
Service layer for company information pages.

Each entry has a ``section`` (vision, history, values, team or link),
a title and the page content.  Listing and retrieving entries is open
to everyone; creating and updating them is restricted to
administrators in the API layer.  Entries are never deleted.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.store import COMPANY_INFO, EntityStore
from ..schemas.company_info import CompanyInfoCreate, CompanyInfoRead, CompanyInfoUpdate

logger = logging.getLogger(__name__)


class CompanyInfoService:
    """Service class for managing company information entries."""

    @classmethod
    async def list_company_info(cls, store: EntityStore, section: Optional[str] = None) -> List[CompanyInfoRead]:
        records = store.list(COMPANY_INFO)
        if section:
            records = [r for r in records if r["section"] == section]
        return [CompanyInfoRead.model_validate(r) for r in records]

    @classmethod
    async def get_company_info(cls, store: EntityStore, info_id: int) -> Optional[CompanyInfoRead]:
        record = store.get(COMPANY_INFO, info_id)
        return CompanyInfoRead.model_validate(record) if record else None

    @classmethod
    async def create_company_info(cls, store: EntityStore, data: CompanyInfoCreate) -> CompanyInfoRead:
        now = datetime.now(timezone.utc)
        record = data.model_dump()
        record.update(created_at=now, updated_at=now)
        stored = store.insert(COMPANY_INFO, record)
        logger.info("Created company info %s (%s)", stored["id"], data.section)
        return CompanyInfoRead.model_validate(stored)

    @classmethod
    async def update_company_info(
        cls, store: EntityStore, info_id: int, data: CompanyInfoUpdate
    ) -> Optional[CompanyInfoRead]:
        """Apply the provided fields and refresh ``updated_at``.

        Returns ``None`` if the entry does not exist.
        """
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        changes["updated_at"] = datetime.now(timezone.utc)
        updated = store.update(COMPANY_INFO, info_id, changes)
        if updated is None:
            return None
        logger.info("Updated company info %s", info_id)
        return CompanyInfoRead.model_validate(updated)
