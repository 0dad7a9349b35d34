from enum import IntEnum
from typing import Any, List, Optional
from pydantic import BaseModel, StrictInt


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class OptionType(IntEnum):
    SUB_COMMAND = 1
    STRING = 3


EPHEMERAL = 1 << 6  # message flag: only visible to the invoking user


class InteractionOption(BaseModel):
    name: str
    type: Optional[int] = None
    value: Optional[Any] = None
    options: Optional[List["InteractionOption"]] = None


class InteractionData(BaseModel):
    name: Optional[str] = None
    options: Any = None  # checked when the command runs


class Interaction(BaseModel):
    type: StrictInt
    data: Optional[InteractionData] = None


def pong() -> dict:
    return {"type": InteractionResponseType.PONG.value}


def channel_message(content: str, ephemeral: bool = False) -> dict:
    """Build a type 4 response, flagged ephemeral when the reply is private"""
    data = {"content": content}
    if ephemeral:
        data["flags"] = EPHEMERAL
    return {
        "type": InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE.value,
        "data": data
    }
