from sqlalchemy import Column, String, DateTime

from app.database import Base
from app.models.partner import _utcnow


class User(Base):
    """Back-office staff account resolved from the ``X-User-Id`` header."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    username = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default="dispatcher")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
