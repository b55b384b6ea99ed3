from fastapi import APIRouter

from .purchase import purchase_router

router = APIRouter(prefix="/v1")

router.include_router(purchase_router, tags=["Purchases"])
