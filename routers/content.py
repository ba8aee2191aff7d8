import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

import crud
from auth import get_current_user_id
from database import get_db
from errors import ValidationError
from schemas import ContentCreate, ContentUpdate, ContentList, ContentChanged, MessageOut
from validation import validate_content

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=ContentChanged)
async def add_content(content: ContentCreate, db: AsyncSession = Depends(get_db), user_id: int = Depends(get_current_user_id)):
    errors = validate_content(content)
    if errors:
        raise ValidationError(errors)
    new_content = await crud.add_content(db, user_id, content.link, content.type, content.title)
    return {"message": "Content added", "content": new_content}

@router.get("", response_model=ContentList)
async def list_content(db: AsyncSession = Depends(get_db), user_id: int = Depends(get_current_user_id)):
    contents = await crud.list_content(db, user_id)
    return {"content": contents}

@router.patch("/{content_id}", response_model=ContentChanged)
async def update_content(content_id: int, content: ContentUpdate, db: AsyncSession = Depends(get_db),
                         user_id: int = Depends(get_current_user_id)):
    updated = await crud.update_content(db, user_id, content_id, title=content.title, notes=content.notes)
    return {"message": "Content updated", "content": updated}

@router.delete("/{content_id}", response_model=MessageOut)
async def delete_content(content_id: int, db: AsyncSession = Depends(get_db), user_id: int = Depends(get_current_user_id)):
    await crud.delete_content(db, user_id, content_id)
    return {"message": "Content deleted"}
