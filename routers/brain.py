import logging
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

import crud
from auth import get_current_user_id
from database import get_db
from errors import NotFoundError
from schemas import ShareRequest, ShareOut, ShareStatus, SharedBrain, LegacySharedBrain
from utils import share_url, render_qrcode_png

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/share", response_model=ShareOut)
async def toggle_share(request: ShareRequest, db: AsyncSession = Depends(get_db), user_id: int = Depends(get_current_user_id)):
    if request.share:
        share_hash = await crud.enable_share(db, user_id)
        return {"message": "Sharing enabled", "hash": share_hash}
    await crud.disable_share(db, user_id)
    return {"message": "Sharing disabled"}

@router.get("/share/status", response_model=ShareStatus)
async def share_status(db: AsyncSession = Depends(get_db), user_id: int = Depends(get_current_user_id)):
    is_shared, share_hash = await crud.get_share_status(db, user_id)
    return {"isShared": is_shared, "hash": share_hash}

@router.get("/share/qrcode")
async def share_qrcode(db: AsyncSession = Depends(get_db), user_id: int = Depends(get_current_user_id)):
    is_shared, share_hash = await crud.get_share_status(db, user_id)
    if not is_shared:
        raise NotFoundError("Sharing is not enabled")
    logger.info("Generated share QR code for user %d", user_id)
    return StreamingResponse(render_qrcode_png(share_url(share_hash)), media_type="image/png")

@router.get("/share/{share_hash}", response_model=SharedBrain)
async def shared_brain(share_hash: str, db: AsyncSession = Depends(get_db)):
    username, contents = await crud.resolve_share(db, share_hash)
    return {"username": username, "contents": contents}

# older frontends request /brain/<hash> and read the list from "content"
@router.get("/{share_hash}", response_model=LegacySharedBrain, include_in_schema=False)
async def shared_brain_legacy(share_hash: str, db: AsyncSession = Depends(get_db)):
    username, contents = await crud.resolve_share(db, share_hash)
    return {"username": username, "content": contents}
