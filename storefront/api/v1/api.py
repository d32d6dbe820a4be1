from fastapi import APIRouter

from storefront.api.v1.routers import delivery as delivery_router
from storefront.api.v1.routers import store_hours as store_hours_router
from storefront.api.v1.routers import admin_delivery as admin_delivery_router

router = APIRouter()

# public routes
router.include_router(delivery_router.router)
router.include_router(store_hours_router.router)

# admin routes
router.include_router(admin_delivery_router.router)
