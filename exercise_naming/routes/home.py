import platform

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from exercise_naming import __version__
from exercise_naming.settings import settings

router = APIRouter()


@router.get("/healthz", response_class=JSONResponse)
def healthz():
    return {"status": "ok"}


@router.get("/meta")
async def get_meta():
    return {
        "app_name": settings.PROJECT_NAME,
        "version": __version__,
        "python_version": platform.python_version(),
        "environment": settings.ENV,
    }
