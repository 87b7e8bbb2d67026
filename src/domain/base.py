"""Shared base for all SQLModel entities"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, DateTime, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns
BigIntPrimaryKey = BigInteger().with_variant(Integer(), "sqlite")

# Every timestamp column stores an aware UTC datetime
UtcDateTime = DateTime(timezone=True)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base class for table entities"""
    pass
