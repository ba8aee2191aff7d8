from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

class UserCreate(BaseModel):
    username: str
    password: str

class UserLogin(BaseModel):
    username: str
    password: str

class Token(BaseModel):
    token: str

class FieldError(BaseModel):
    field: str
    message: str

class MessageOut(BaseModel):
    message: str

class OwnerOut(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True

class ContentCreate(BaseModel):
    link: str
    type: str
    title: Optional[str] = None

class ContentUpdate(BaseModel):
    title: Optional[str] = None
    notes: Optional[str] = None

class ContentOut(BaseModel):
    id: int
    link: str
    type: str
    title: Optional[str] = None
    notes: Optional[str] = None
    tags: List[str] = []
    created_at: datetime
    owner: Optional[OwnerOut] = None

    class Config:
        from_attributes = True

class ContentList(BaseModel):
    content: List[ContentOut]

class ContentChanged(BaseModel):
    message: str
    content: ContentOut

class ShareRequest(BaseModel):
    share: bool

class ShareOut(BaseModel):
    message: str
    hash: Optional[str] = None

class ShareStatus(BaseModel):
    isShared: bool
    hash: Optional[str] = None

class SharedBrain(BaseModel):
    username: str
    contents: List[ContentOut]

class LegacySharedBrain(BaseModel):
    username: str
    content: List[ContentOut]
