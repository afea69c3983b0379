from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey

from app.database import Base
from app.models.partner import _utcnow


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(String, primary_key=True)
    make = Column(String, nullable=False)
    model = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    license_plate = Column(String, nullable=False, unique=True)
    is_foreign_plate = Column(Boolean, nullable=False, default=False)
    color = Column(String, nullable=True)
    capacity = Column(Integer, nullable=False, default=4)
    vehicle_type = Column(String, nullable=False, default="SEDAN")
    status = Column(String, nullable=False, default="AVAILABLE")
    last_maintenance = Column(DateTime(timezone=True), nullable=True)
    fuel_type = Column(String, nullable=True)
    registration_date = Column(String, nullable=True)
    partner_id = Column(String, ForeignKey("partners.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
