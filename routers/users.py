import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

import crud
from schemas import UserCreate, UserLogin, Token, MessageOut
from database import get_db

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/signup", response_model=MessageOut)
async def signup(user: UserCreate, db: AsyncSession = Depends(get_db)):
    await crud.signup(db, user)
    return {"message": "User signed up"}

@router.post("/signin", response_model=Token)
async def signin(credentials: UserLogin, db: AsyncSession = Depends(get_db)):
    token = await crud.signin(db, credentials.username, credentials.password)
    return {"token": token}
