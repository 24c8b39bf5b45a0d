"""
Friends API Router - FastAPI endpoints for friend requests and friend lists.

The acting user always comes from the bearer token.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from src.application.commands.friends import (
    AcceptFriendRequestCommand,
    AcceptFriendRequestHandler,
    RejectFriendRequestCommand,
    RejectFriendRequestHandler,
    RemoveFriendCommand,
    RemoveFriendHandler,
    SendFriendRequestCommand,
    SendFriendRequestHandler,
)
from src.application.dto.friend import (
    AcceptFriendRequestResult,
    FriendListDTO,
    FriendRequestListDTO,
    RejectFriendRequestResult,
    RemoveFriendResult,
    SendFriendRequestResult,
)
from src.application.queries.friends import (
    GetFriendRequestsHandler,
    GetFriendRequestsQuery,
    GetFriendsHandler,
    GetFriendsQuery,
)
from src.config.settings import Config
from src.presentation.dependencies.auth import AuthUser, get_current_user
from src.presentation.errors import unwrap_or_raise

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class SendFriendRequestBody(BaseModel):
    receiver_user_id: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/friends", tags=["friends"])


# ==================== ENDPOINTS ====================


@router.post(
    "/requests",
    response_model=SendFriendRequestResult,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_friend_request(
    request: SendFriendRequestBody,
    handler: FromDishka[SendFriendRequestHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = SendFriendRequestCommand(
        requester_id=current_user.user_id.value,
        receiver_user_id=request.receiver_user_id,
    )
    return unwrap_or_raise(await handler.execute(command))


@router.get("/requests", response_model=FriendRequestListDTO)
@inject
async def get_friend_requests(
    handler: FromDishka[GetFriendRequestsHandler],
    request_type: str = Query("received", alias="type"),
    limit: int = Config.FRIEND_LIST_DEFAULT_LIMIT,
    offset: int = 0,
    current_user: AuthUser = Depends(get_current_user),
):
    """List pending requests the caller received (type=received) or sent (type=sent)."""
    query = GetFriendRequestsQuery(
        user_id=current_user.user_id.value,
        type=request_type,
        limit=limit,
        offset=offset,
    )
    return unwrap_or_raise(await handler.execute(query))


@router.post(
    "/requests/{friend_request_id}/accept", response_model=AcceptFriendRequestResult
)
@inject
async def accept_friend_request(
    friend_request_id: str,
    handler: FromDishka[AcceptFriendRequestHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = AcceptFriendRequestCommand(
        friend_request_id=friend_request_id, user_id=current_user.user_id.value
    )
    return unwrap_or_raise(await handler.execute(command))


@router.post(
    "/requests/{friend_request_id}/reject", response_model=RejectFriendRequestResult
)
@inject
async def reject_friend_request(
    friend_request_id: str,
    handler: FromDishka[RejectFriendRequestHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = RejectFriendRequestCommand(
        friend_request_id=friend_request_id, user_id=current_user.user_id.value
    )
    return unwrap_or_raise(await handler.execute(command))


@router.delete("/{friend_user_id}", response_model=RemoveFriendResult)
@inject
async def remove_friend(
    friend_user_id: str,
    handler: FromDishka[RemoveFriendHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = RemoveFriendCommand(
        user_id=current_user.user_id.value, friend_user_id=friend_user_id
    )
    return unwrap_or_raise(await handler.execute(command))


@router.get("", response_model=FriendListDTO)
@inject
async def get_friends(
    handler: FromDishka[GetFriendsHandler],
    friend_status: Optional[str] = Query(None, alias="status"),
    limit: int = Config.FRIEND_LIST_DEFAULT_LIMIT,
    offset: int = 0,
    current_user: AuthUser = Depends(get_current_user),
):
    """List the caller's friends; status defaults to ACCEPTED."""
    query = GetFriendsQuery(
        user_id=current_user.user_id.value,
        status=friend_status,
        limit=limit,
        offset=offset,
    )
    return unwrap_or_raise(await handler.execute(query))
