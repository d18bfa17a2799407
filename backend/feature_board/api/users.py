"""
User endpoints: account storage and the admin lookup.
"""

import structlog
from fastapi import APIRouter, Depends, status

from ..database.repositories.user_repository import UserRepository
from ..models.results import InsertAck, UpdateAck
from ..models.user import AdminStatus, UserDocument
from .dependencies.board_deps import get_user_repository

logger = structlog.get_logger()

router = APIRouter(tags=["users"])


@router.post("/user", status_code=status.HTTP_201_CREATED, response_model=InsertAck)
async def create_user(
    user: UserDocument,
    repo: UserRepository = Depends(get_user_repository),
) -> InsertAck:
    """
    Store a new user (409 if the email is already registered).

    `role` and `_id` in the body are ignored; admins are made through
    `PUT /admin/addadmin`.
    """
    result = await repo.create(user.to_document())
    logger.info("User stored", email=user.email)
    return InsertAck.from_result(result)


@router.put("/adduser", response_model=UpdateAck)
async def upsert_user(
    user: UserDocument,
    repo: UserRepository = Depends(get_user_repository),
) -> UpdateAck:
    """Insert or update a user keyed by email (used on every sign-in)."""
    result = await repo.upsert_by_email(user.to_document())
    logger.info(
        "User signed in",
        email=user.email,
        created=result.upserted_id is not None,
    )
    return UpdateAck.from_result(result)


@router.get("/user/{email}", response_model=AdminStatus)
async def get_admin_status(
    email: str,
    repo: UserRepository = Depends(get_user_repository),
) -> AdminStatus:
    """Report whether the user with this email is an admin (false if unknown)."""
    return AdminStatus(admin=await repo.is_admin(email))
