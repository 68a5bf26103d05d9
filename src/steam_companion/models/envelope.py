"""
Command envelopes — inbound messages and the uniform success/failure reply.
"""

from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class InboundMessage(BaseModel):
    event: str
    data: Optional[Any] = None


class GetInventoryData(BaseModel):
    """`get-inventory` data: {appId, contextId}"""
    app_id: str = Field(alias="appId")
    context_id: str = Field(alias="contextId")

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class Success(BaseModel):
    success: Literal[True] = True
    payload: Any = None


class Failure(BaseModel):
    success: Literal[False] = False
    error: str


Envelope = Union[Success, Failure]
