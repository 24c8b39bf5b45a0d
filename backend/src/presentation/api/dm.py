"""
DM API Router - FastAPI endpoints for DM channels and the DM inbox.

Flow:
  HTTP Request → Router → Command → Handler → Repository → Firestore
                                 ↓
  HTTP Response ← Router ← Result ← (Failure mapped by presentation.errors)
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.application.commands.dm import (
    BlockDMChannelCommand,
    BlockDMChannelHandler,
    CreateDMChannelCommand,
    CreateDMChannelHandler,
    UnblockDMChannelByUserNameCommand,
    UnblockDMChannelCommand,
    UnblockDMChannelHandler,
)
from src.application.dto.dm import (
    BlockDMChannelResult,
    CreateDMChannelResult,
    DMWrapperListDTO,
    UnblockDMChannelResult,
)
from src.application.queries.dm import ListDMWrappersHandler, ListDMWrappersQuery
from src.presentation.dependencies.auth import AuthUser, get_current_user
from src.presentation.errors import unwrap_or_raise

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class TargetUserRequest(BaseModel):
    """Request body naming the other participant by display name."""

    target_user_name: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/dm", tags=["dm"])


# ==================== ENDPOINTS ====================


@router.post(
    "/channels",
    response_model=CreateDMChannelResult,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_dm_channel(
    request: TargetUserRequest,
    handler: FromDishka[CreateDMChannelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Open a DM channel with the user named in the body."""
    command = CreateDMChannelCommand(
        current_user_id=current_user.user_id.value,
        target_user_name=request.target_user_name,
    )
    return unwrap_or_raise(await handler.execute(command))


@router.post("/channels/{channel_id}/block", response_model=BlockDMChannelResult)
@inject
async def block_dm_channel(
    channel_id: str,
    handler: FromDishka[BlockDMChannelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = BlockDMChannelCommand(
        current_user_id=current_user.user_id.value, channel_id=channel_id
    )
    return unwrap_or_raise(await handler.execute(command))


@router.post("/channels/{channel_id}/unblock", response_model=UnblockDMChannelResult)
@inject
async def unblock_dm_channel(
    channel_id: str,
    handler: FromDishka[UnblockDMChannelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = UnblockDMChannelCommand(
        current_user_id=current_user.user_id.value, channel_id=channel_id
    )
    return unwrap_or_raise(await handler.execute(command))


@router.post("/unblock", response_model=UnblockDMChannelResult)
@inject
async def unblock_dm_channel_by_user_name(
    request: TargetUserRequest,
    handler: FromDishka[UnblockDMChannelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Unblock the channel shared with the user named in the body."""
    command = UnblockDMChannelByUserNameCommand(
        current_user_id=current_user.user_id.value,
        target_user_name=request.target_user_name,
    )
    return unwrap_or_raise(await handler.execute_by_user_name(command))


@router.get("/wrappers", response_model=DMWrapperListDTO)
@inject
async def list_dm_wrappers(
    handler: FromDishka[ListDMWrappersHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the caller's DM inbox."""
    query = ListDMWrappersQuery(user_id=current_user.user_id.value)
    return unwrap_or_raise(await handler.execute(query))
