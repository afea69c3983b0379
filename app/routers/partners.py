import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_user
from app.models.partner import Partner
from app.models.user import User
from app.models.vehicle import Vehicle
from app.schemas.partner import PartnerCreate, PartnerDetailResponse, PartnerResponse
from app.utils.exceptions import AppException, NotFoundException
from app.utils.response import to_json

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/partners", tags=["partners"])


@router.get("")
async def list_partners(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(Partner).order_by(Partner.name))
    return [to_json(PartnerResponse.model_validate(p)) for p in result.scalars().all()]


@router.post("", status_code=201)
async def create_partner(
    payload: PartnerCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    if not payload.name:
        raise AppException("Missing required fields: name")

    partner = Partner(
        id=str(uuid.uuid4()),
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
    )
    db.add(partner)
    await db.commit()
    await db.refresh(partner)

    logger.info("Partner %s created", partner.id)
    return to_json(PartnerResponse.model_validate(partner))


@router.get("/{partner_id}")
async def get_partner(
    partner_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    partner = await db.get(Partner, partner_id)
    if partner is None:
        raise NotFoundException("Partner not found")

    vehicle_count = await db.scalar(
        select(func.count()).select_from(Vehicle).where(Vehicle.partner_id == partner_id)
    )
    detail = PartnerDetailResponse.model_validate(partner).model_copy(
        update={"vehicle_count": vehicle_count or 0}
    )
    return to_json(detail)
