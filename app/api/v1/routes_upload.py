# File: app/api/v1/routes_upload.py

import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, Depends, File, UploadFile, status

from app.api.deps import get_current_user
from app.core.config import settings
from app.core.errors import AppError
from app.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()

# content type -> (file extension, leading magic bytes)
ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ("jpg", b"\xff\xd8\xff"),
    "image/png": ("png", b"\x89PNG\r\n\x1a\n"),
}

UPLOAD_SUBDIR = "uploads"


@router.post("", status_code=status.HTTP_201_CREATED, summary="Upload an image")
def upload_image(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
):
    """
    Store a JPEG/PNG under the static directory.

    Returns: {"image_url": "/static/uploads/<name>"}
    """
    allowed = ALLOWED_IMAGE_TYPES.get(file.content_type or "")
    if allowed is None:
        raise AppError(status.HTTP_400_BAD_REQUEST, "only JPEG and PNG images are accepted")
    ext, magic = allowed

    data = file.file.read(settings.upload_max_bytes + 1)
    if not data:
        raise AppError(status.HTTP_400_BAD_REQUEST, "uploaded file is empty")
    if len(data) > settings.upload_max_bytes:
        raise AppError(
            status.HTTP_400_BAD_REQUEST,
            f"image must be at most {settings.upload_max_bytes} bytes",
        )
    if not data.startswith(magic):
        raise AppError(status.HTTP_400_BAD_REQUEST, "file content does not match its type")

    target_dir = Path(settings.static_dir) / UPLOAD_SUBDIR
    target_dir.mkdir(parents=True, exist_ok=True)
    filename = f"{uuid.uuid4().hex}.{ext}"
    (target_dir / filename).write_bytes(data)

    logger.info("User %s uploaded %s (%d bytes)", current_user.id, filename, len(data))
    return {
        "status": True,
        "data": {"image_url": f"/static/{UPLOAD_SUBDIR}/{filename}"},
    }
