from fastapi import APIRouter

from app.api.v1.routes_users import router as users_router
from app.api.v1.routes_project import router as project_router
from app.api.v1.routes_upload import router as upload_router


api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(project_router, prefix="/projects", tags=["projects"])
api_router.include_router(upload_router, prefix="/uploads", tags=["uploads"])
