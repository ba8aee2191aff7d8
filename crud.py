import logging
from typing import List, Optional, Tuple
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

import cache
from auth import get_password_hash, verify_password, create_access_token
from errors import ValidationError, DuplicateUserError, InvalidCredentialsError, NotFoundError, StoreError
from models import User, Content, ShareLink
from schemas import UserCreate
from utils import generate_share_hash
from validation import validate_signup

logger = logging.getLogger(__name__)

SHARE_HASH_ATTEMPTS = 3

# users

async def signup(db: AsyncSession, user: UserCreate) -> User:
    errors = validate_signup(user)
    if errors:
        raise ValidationError(errors)
    stmt = select(User).filter(User.username == user.username)
    result = await db.execute(stmt)
    if result.scalar_one_or_none():
        raise DuplicateUserError()
    new_user = User(username=user.username, hashed_password=get_password_hash(user.password))
    db.add(new_user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateUserError()
    await db.refresh(new_user)
    logger.info("User signed up: %s", new_user.username)
    return new_user

async def signin(db: AsyncSession, username: str, password: str) -> str:
    stmt = select(User).filter(User.username == username)
    result = await db.execute(stmt)
    user = result.scalar_one_or_none()
    if not user or not verify_password(password, user.hashed_password):
        logger.warning("Failed sign in for %s", username)
        raise InvalidCredentialsError()
    logger.info("User signed in: %s", user.username)
    return create_access_token(user.id)

# content

async def get_owned_content(db: AsyncSession, user_id: int, content_id: int) -> Content:
    stmt = (
        select(Content)
        .options(selectinload(Content.owner))
        .filter(Content.id == content_id, Content.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    content = result.scalar_one_or_none()
    if content is None:
        raise NotFoundError("Content not found")
    return content

async def add_content(db: AsyncSession, user_id: int, link: str, type: str, title: Optional[str] = None) -> Content:
    content = Content(user_id=user_id, link=link, type=type, title=title, tags=[])
    db.add(content)
    await db.commit()
    logger.info("Content %d added by user %d", content.id, user_id)
    return await get_owned_content(db, user_id, content.id)

async def list_content(db: AsyncSession, user_id: int) -> List[Content]:
    stmt = (
        select(Content)
        .options(selectinload(Content.owner))
        .filter(Content.user_id == user_id)
        .order_by(Content.id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())

async def update_content(db: AsyncSession, user_id: int, content_id: int,
                         title: Optional[str] = None, notes: Optional[str] = None) -> Content:
    content = await get_owned_content(db, user_id, content_id)
    if title is not None:
        content.title = title
    if notes is not None:
        content.notes = notes
    await db.commit()
    logger.info("Content %d updated by user %d", content_id, user_id)
    return await get_owned_content(db, user_id, content_id)

async def delete_content(db: AsyncSession, user_id: int, content_id: int):
    # one statement, so a record owned by someone else is never touched
    stmt = delete(Content).where(Content.id == content_id, Content.user_id == user_id)
    result = await db.execute(stmt)
    if result.rowcount == 0:
        await db.rollback()
        raise NotFoundError("Content not found")
    await db.commit()
    logger.info("Content %d deleted by user %d", content_id, user_id)

# share links

async def _get_share_link(db: AsyncSession, user_id: int) -> Optional[ShareLink]:
    stmt = select(ShareLink).filter(ShareLink.user_id == user_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()

async def enable_share(db: AsyncSession, user_id: int) -> str:
    """Return the user's share hash, creating the link if there is none.

    An existing hash is returned unchanged. Creation relies on the unique
    ``user_id`` constraint: when a concurrent request wins the insert, the
    IntegrityError is turned into a read of the winner's hash.
    """
    existing = await _get_share_link(db, user_id)
    if existing is not None:
        return existing.hash
    for _ in range(SHARE_HASH_ATTEMPTS):
        share_link = ShareLink(user_id=user_id, hash=generate_share_hash())
        db.add(share_link)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            existing = await _get_share_link(db, user_id)
            if existing is not None:
                return existing.hash
            logger.warning("Share hash collision for user %d, retrying", user_id)
            continue
        logger.info("Sharing enabled by user %d", user_id)
        return share_link.hash
    raise StoreError("Could not create a share link")

async def disable_share(db: AsyncSession, user_id: int) -> bool:
    share_link = await _get_share_link(db, user_id)
    if share_link is None:
        return False
    share_hash = share_link.hash
    await db.delete(share_link)
    await db.commit()
    await cache.evict_share_owner(share_hash)
    logger.info("Sharing disabled by user %d", user_id)
    return True

async def get_share_status(db: AsyncSession, user_id: int) -> Tuple[bool, Optional[str]]:
    share_link = await _get_share_link(db, user_id)
    if share_link is None:
        return False, None
    return True, share_link.hash

async def resolve_share(db: AsyncSession, share_hash: str) -> Tuple[str, List[Content]]:
    # A cache hit is trusted without re-reading the link. disable_share evicts
    # the entry; if that eviction fails the old hash keeps resolving for at
    # most SHARE_CACHE_TTL_SECONDS.
    user_id = await cache.get_share_owner(share_hash)
    if user_id is None:
        stmt = select(ShareLink).filter(ShareLink.hash == share_hash)
        result = await db.execute(stmt)
        share_link = result.scalar_one_or_none()
        if share_link is None:
            raise NotFoundError("Share link not found")
        user_id = share_link.user_id
        await cache.set_share_owner(share_hash, user_id)
    user = await db.get(User, user_id)
    if user is None:
        logger.error("Share link %s points at missing user %d", share_hash, user_id)
        raise StoreError()
    return user.username, await list_content(db, user_id)
