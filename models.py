from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, func, ForeignKey
from sqlalchemy.orm import relationship
from database import Base

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    contents = relationship("Content", back_populates="owner")
    share_link = relationship("ShareLink", back_populates="owner", uselist=False)

class Content(Base):
    __tablename__ = "contents"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    link = Column(String, nullable=False)
    type = Column(String, nullable=False)
    title = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    tags = Column(JSON, default=list, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    owner = relationship("User", back_populates="contents")

class ShareLink(Base):
    __tablename__ = "share_links"
    id = Column(Integer, primary_key=True, index=True)
    # unique user_id keeps at most one link per user
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    hash = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    owner = relationship("User", back_populates="share_link")
