"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  When new domains are introduced, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    admin,
    auth,
    bookings,
    catalog,
    coaches,
    company_info,
    contact,
    lessons,
    reviews,
    schedules,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
# Catalogue routes define ``/lesson-types`` and ``/skill-levels`` themselves.
router.include_router(catalog.router, tags=["catalog"])
router.include_router(coaches.router, prefix="/coaches", tags=["coaches"])
router.include_router(lessons.router, prefix="/lessons", tags=["lessons"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
router.include_router(schedules.router, prefix="/schedules", tags=["schedules"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(company_info.router, prefix="/company-info", tags=["company-info"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
