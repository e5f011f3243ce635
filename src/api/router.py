from fastapi import APIRouter

from src.api.endpoints import evaluations, health

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(evaluations.router, tags=["evaluations"])
