from sqlmodel import Field
from typing import Optional
from pydantic import NaiveDatetime
from sqlalchemy import DateTime

from .base import BaseModelDB

class RefreshToken(BaseModelDB, table=True):
    jti: str = Field(index=True, unique=True)
    user_id: int = Field(index=True, foreign_key="user.id")
    expires_at: NaiveDatetime = Field(sa_type=DateTime)
    revoked_at: Optional[NaiveDatetime] = Field(default=None, sa_type=DateTime)
    user_agent: Optional[str] = None
    ip: Optional[str] = None
