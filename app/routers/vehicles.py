import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_user
from app.models.partner import Partner
from app.models.user import User
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehiclePayload, VehicleResponse, VehicleStatus, VehicleType
from app.utils.exceptions import AppException, NotFoundException
from app.utils.response import to_json

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/partners/{partner_id}/vehicles", tags=["vehicles"])

DUPLICATE_PLATE_MESSAGE = "A vehicle with this license plate already exists"
DEFAULT_CAPACITY = 4


def _to_int(value: int | str, field: str) -> int:
    if isinstance(value, bool):
        raise AppException(f"Invalid integer value for {field}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise AppException(f"Invalid integer value for {field}")


def _to_enum(enum_cls, value: str, field: str):
    try:
        return enum_cls(value).value
    except ValueError:
        raise AppException(f"Invalid {field}: {value}")


def _parse_timestamp(value: str | None, field: str) -> datetime | None:
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise AppException(f"Invalid date for {field}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


async def _get_partner(db: AsyncSession, partner_id: str) -> Partner:
    partner = await db.get(Partner, partner_id)
    if partner is None:
        raise NotFoundException("Partner not found")
    return partner


async def _get_partner_vehicle(db: AsyncSession, partner_id: str, vehicle_id: str) -> Vehicle:
    await _get_partner(db, partner_id)
    vehicle = await db.get(Vehicle, vehicle_id)
    if vehicle is None or vehicle.partner_id != partner_id:
        raise NotFoundException("Vehicle not found")
    return vehicle


async def _find_by_plate(db: AsyncSession, license_plate: str) -> Vehicle | None:
    result = await db.execute(select(Vehicle).where(Vehicle.license_plate == license_plate))
    return result.scalars().first()


async def _commit_vehicle(db: AsyncSession, vehicle: Vehicle) -> None:
    # The unique constraint decides races the plate pre-check cannot see.
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning("Unique constraint rejected plate %s", vehicle.license_plate)
        raise AppException(DUPLICATE_PLATE_MESSAGE)
    await db.refresh(vehicle)


def _provided_name(name: str) -> set[str]:
    """Map a reported field name to the payload attributes that can carry it."""
    return {
        "brand": {"brand", "make"},
        "model": {"model"},
        "year": {"year"},
        "licensePlate": {"license_plate"},
    }[name]


@router.get("")
async def list_vehicles(
    partner_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        await _get_partner(db, partner_id)
        result = await db.execute(
            select(Vehicle)
            .where(Vehicle.partner_id == partner_id)
            .order_by(Vehicle.created_at.desc())
        )
        vehicles = result.scalars().all()
    except SQLAlchemyError:
        logger.exception("Error fetching vehicles for partner %s", partner_id)
        raise AppException("Failed to fetch vehicles", status_code=500)

    return [to_json(VehicleResponse.model_validate(v)) for v in vehicles]


@router.post("")
async def create_vehicle(
    partner_id: str,
    payload: VehiclePayload,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        await _get_partner(db, partner_id)

        missing = payload.missing_fields()
        if missing:
            logger.warning("Missing required fields: %s", ", ".join(missing))
            raise AppException(f"Missing required fields: {', '.join(missing)}")

        if await _find_by_plate(db, payload.license_plate) is not None:
            raise AppException(DUPLICATE_PLATE_MESSAGE)

        capacity = payload.capacity
        vehicle = Vehicle(
            id=str(uuid.uuid4()),
            make=payload.resolved_brand,
            model=payload.model,
            year=_to_int(payload.year, "year"),
            license_plate=payload.license_plate,
            is_foreign_plate=bool(payload.is_foreign_plate),
            color=payload.color or None,
            capacity=_to_int(capacity, "capacity") if capacity not in (None, "") else DEFAULT_CAPACITY,
            vehicle_type=_to_enum(VehicleType, payload.vehicle_type or VehicleType.SEDAN.value, "vehicleType"),
            status=_to_enum(VehicleStatus, payload.status or VehicleStatus.AVAILABLE.value, "status"),
            last_maintenance=_parse_timestamp(payload.last_maintenance, "lastMaintenance"),
            fuel_type=payload.fuel_type,
            registration_date=payload.registration_date,
            partner_id=partner_id,
        )
        db.add(vehicle)
        await _commit_vehicle(db, vehicle)
    except SQLAlchemyError:
        logger.exception("Error adding vehicle for partner %s", partner_id)
        raise AppException("Failed to add vehicle", status_code=500)

    logger.info("Vehicle %s (%s) added to partner %s", vehicle.id, vehicle.license_plate, partner_id)
    return to_json(VehicleResponse.model_validate(vehicle))


@router.get("/{vehicle_id}")
async def get_vehicle(
    partner_id: str,
    vehicle_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        vehicle = await _get_partner_vehicle(db, partner_id, vehicle_id)
    except SQLAlchemyError:
        logger.exception("Error fetching vehicle %s", vehicle_id)
        raise AppException("Failed to fetch vehicle", status_code=500)
    return to_json(VehicleResponse.model_validate(vehicle))


@router.put("/{vehicle_id}")
async def update_vehicle(
    partner_id: str,
    vehicle_id: str,
    payload: VehiclePayload,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        vehicle = await _get_partner_vehicle(db, partner_id, vehicle_id)
        provided = payload.model_fields_set

        # A required field may be left out of an update but not blanked.
        blanked = [
            name for name in payload.missing_fields()
            if _provided_name(name) & provided
        ]
        if blanked:
            raise AppException(f"Missing required fields: {', '.join(blanked)}")

        if "license_plate" in provided and payload.license_plate != vehicle.license_plate:
            other = await _find_by_plate(db, payload.license_plate)
            if other is not None and other.id != vehicle.id:
                raise AppException(DUPLICATE_PLATE_MESSAGE)
            vehicle.license_plate = payload.license_plate

        if provided & {"brand", "make"}:
            vehicle.make = payload.resolved_brand
        if "model" in provided:
            vehicle.model = payload.model
        if "year" in provided:
            vehicle.year = _to_int(payload.year, "year")
        if "capacity" in provided and payload.capacity not in (None, ""):
            vehicle.capacity = _to_int(payload.capacity, "capacity")
        if "is_foreign_plate" in provided:
            vehicle.is_foreign_plate = bool(payload.is_foreign_plate)
        if "color" in provided:
            vehicle.color = payload.color or None
        if "vehicle_type" in provided and payload.vehicle_type:
            vehicle.vehicle_type = _to_enum(VehicleType, payload.vehicle_type, "vehicleType")
        if "status" in provided and payload.status:
            vehicle.status = _to_enum(VehicleStatus, payload.status, "status")
        if "last_maintenance" in provided:
            vehicle.last_maintenance = _parse_timestamp(payload.last_maintenance, "lastMaintenance")
        if "fuel_type" in provided:
            vehicle.fuel_type = payload.fuel_type
        if "registration_date" in provided:
            vehicle.registration_date = payload.registration_date

        await _commit_vehicle(db, vehicle)
    except SQLAlchemyError:
        logger.exception("Error updating vehicle %s", vehicle_id)
        raise AppException("Failed to update vehicle", status_code=500)

    return to_json(VehicleResponse.model_validate(vehicle))


@router.delete("/{vehicle_id}")
async def delete_vehicle(
    partner_id: str,
    vehicle_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        vehicle = await _get_partner_vehicle(db, partner_id, vehicle_id)
        await db.delete(vehicle)
        await db.commit()
    except SQLAlchemyError:
        logger.exception("Error deleting vehicle %s", vehicle_id)
        raise AppException("Failed to delete vehicle", status_code=500)

    logger.info("Vehicle %s deleted from partner %s", vehicle_id, partner_id)
    return {"success": True}
