from fastapi import APIRouter

from app.api.routes.phrases import router as phrases_router
from app.api.routes.process import router as process_router
from app.api.routes.root import router as root_router

api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(process_router)
api_router.include_router(phrases_router)
