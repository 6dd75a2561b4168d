"""Central API router composition.

Mounts the individual route modules under `/api` so the application factory
has a single router to include.
"""

from fastapi import APIRouter

from .logs import router as logs_router
from .payments import router as payments_router
from .products import router as products_router
from .users import router as users_router

router = APIRouter(prefix="/api")

router.include_router(payments_router)
router.include_router(logs_router)
router.include_router(users_router)
router.include_router(products_router)
