import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from app.database import Base
from app.models.partner import Partner
from app.models.vehicle import Vehicle
from app.models.user import User


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session
    await engine.dispose()


@pytest.mark.asyncio
async def test_create_partner(db_session):
    partner = Partner(id="p-001", name="Elite Chauffeurs", email="contact@elite.fr")
    db_session.add(partner)
    await db_session.commit()

    result = await db_session.get(Partner, "p-001")
    assert result is not None
    assert result.name == "Elite Chauffeurs"
    assert result.created_at is not None
    assert result.updated_at is not None


@pytest.mark.asyncio
async def test_create_vehicle_defaults(db_session):
    db_session.add(Partner(id="p-001", name="Elite Chauffeurs"))
    vehicle = Vehicle(
        id="v-001", make="Mercedes", model="S-Class", year=2022,
        license_plate="AB-123-CD", partner_id="p-001",
    )
    db_session.add(vehicle)
    await db_session.commit()

    result = await db_session.get(Vehicle, "v-001")
    assert result is not None
    assert result.capacity == 4
    assert result.vehicle_type == "SEDAN"
    assert result.status == "AVAILABLE"
    assert result.is_foreign_plate is False
    assert result.last_maintenance is None


@pytest.mark.asyncio
async def test_license_plate_is_unique(db_session):
    db_session.add(Partner(id="p-001", name="Elite Chauffeurs"))
    db_session.add(Partner(id="p-002", name="Riviera Limousines"))
    db_session.add(Vehicle(id="v-001", make="Mercedes", model="S-Class", year=2022,
                           license_plate="AB-123-CD", partner_id="p-001"))
    await db_session.commit()

    db_session.add(Vehicle(id="v-002", make="BMW", model="7 Series", year=2023,
                           license_plate="AB-123-CD", partner_id="p-002"))
    with pytest.raises(IntegrityError):
        await db_session.commit()


@pytest.mark.asyncio
async def test_create_user(db_session):
    user = User(id="u-001", username="dispatcher", password_hash="hashed")
    db_session.add(user)
    await db_session.commit()

    result = await db_session.get(User, "u-001")
    assert result is not None
    assert result.username == "dispatcher"
    assert result.role == "dispatcher"
