"""Main API router for DDD architecture"""

from fastapi import APIRouter

from .routes import auth, ai, listings, sellers, inquiries, files, admin

# Main API router
api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(ai.router, prefix="/ai", tags=["ai"])
api_router.include_router(listings.router, prefix="/listings", tags=["listings"])
api_router.include_router(sellers.router, prefix="/sellers", tags=["sellers"])
api_router.include_router(inquiries.router, prefix="/inquiries", tags=["inquiries"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(files.router, tags=["files"])
