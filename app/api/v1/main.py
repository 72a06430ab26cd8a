from fastapi import APIRouter

from app.api.v1.endpoints import ai_tools, analytics, auth, categories, favorites, reviews, tools, users


api_router = APIRouter()

api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
api_router.include_router(reviews.router, prefix="/tools", tags=["reviews"])
api_router.include_router(ai_tools.router, prefix="/ai-tools", tags=["ai-tools"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
api_router.include_router(users.router, prefix="/user", tags=["user"])
