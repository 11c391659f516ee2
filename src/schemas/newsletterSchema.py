from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MemberStatus(str, Enum):
    # Mailchimp owns the full lifecycle; these are the states this API writes
    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"


class SubscribeRequest(BaseModel):
    """Newsletter sign-up posted by the website footer form."""
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(None, description="Address to subscribe")
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
