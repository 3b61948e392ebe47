"""
Upload endpoint for API v1.

Accepts a multipart form with a ``file`` field, stores the bytes under
the public upload directory and returns the path to use as a card's
``imagePath``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from portfolio_site.app.core import storage
from portfolio_site.app.core.security import require_admin

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    admin: dict = Depends(require_admin),
) -> dict:
    """Store an uploaded image (admin only).

    Answers 400 when no file was sent.  Write failures propagate as
    ``StorageError`` and become a 500 response.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    content = await file.read()
    image_path = storage.store_upload(file.filename, content)
    return {"imagePath": image_path}
