"""DM channel DTOs for use case output and API responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities.dm_wrapper import DMWrapper


class CreateDMChannelResult(BaseModel):
    channel_id: str
    other_user_id: str
    other_user_name: str
    other_user_image_url: Optional[str] = None


class BlockDMChannelResult(BaseModel):
    channel_id: str
    success: bool
    message: str


class UnblockDMChannelResult(BlockDMChannelResult):
    is_fully_unblocked: bool


class DMWrapperDTO(BaseModel):
    channel_id: str
    other_user_id: str
    other_user_name: str
    other_user_image_url: Optional[str] = None
    last_message_preview: Optional[str] = None
    updated_at: datetime

    @classmethod
    def from_entity(cls, wrapper: DMWrapper) -> "DMWrapperDTO":
        return cls(
            channel_id=wrapper.channel_id,
            other_user_id=wrapper.other_user_id.value,
            other_user_name=wrapper.other_user_name.value,
            other_user_image_url=wrapper.other_user_image_url,
            last_message_preview=wrapper.last_message_preview,
            updated_at=wrapper.updated_at,
        )


class DMWrapperListDTO(BaseModel):
    wrappers: list[DMWrapperDTO]
    total: int
