import uuid

import bcrypt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.partner import Partner
from app.models.user import User
from app.models.vehicle import Vehicle


SEED_PARTNERS = [
    {"id": str(uuid.uuid5(uuid.NAMESPACE_DNS, "partner-elite-chauffeurs")), "name": "Elite Chauffeurs", "email": "contact@elite-chauffeurs.fr", "phone": "+33 1 42 00 00 01"},
    {"id": str(uuid.uuid5(uuid.NAMESPACE_DNS, "partner-riviera-limousines")), "name": "Riviera Limousines", "email": "ops@riviera-limousines.fr", "phone": "+33 4 93 00 00 02"},
]

SEED_VEHICLES = [
    {"id": str(uuid.uuid5(uuid.NAMESPACE_DNS, "vehicle-eclass-001")), "make": "Mercedes", "model": "E-Class", "year": 2021, "license_plate": "EL-101-CH", "capacity": 3, "vehicle_type": "SEDAN", "partner_id": SEED_PARTNERS[0]["id"]},
    {"id": str(uuid.uuid5(uuid.NAMESPACE_DNS, "vehicle-vclass-001")), "make": "Mercedes", "model": "V-Class", "year": 2022, "license_plate": "EL-202-CH", "capacity": 7, "vehicle_type": "VAN", "partner_id": SEED_PARTNERS[0]["id"]},
]

SEED_USER_ID = str(uuid.uuid5(uuid.NAMESPACE_DNS, "user-dispatcher"))
SEED_USER_USERNAME = "dispatcher"
SEED_USER_PASSWORD = "dispatcher123"


async def seed_data(session: AsyncSession) -> None:
    result = await session.execute(select(Partner).limit(1))
    if result.scalars().first() is not None:
        return

    for p in SEED_PARTNERS:
        session.add(Partner(**p))
    await session.flush()

    for v in SEED_VEHICLES:
        session.add(Vehicle(**v))

    password_hash = bcrypt.hashpw(SEED_USER_PASSWORD.encode(), bcrypt.gensalt()).decode()
    session.add(User(
        id=SEED_USER_ID,
        username=SEED_USER_USERNAME,
        password_hash=password_hash,
        role="admin",
    ))

    await session.commit()
