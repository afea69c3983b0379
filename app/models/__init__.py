from app.models.partner import Partner
from app.models.vehicle import Vehicle
from app.models.user import User

__all__ = ["Partner", "Vehicle", "User"]
