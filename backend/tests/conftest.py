import random
from datetime import date, datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.models.base import Base
# Import all models so they register with Base.metadata for create_all
import app.models  # noqa: F401
from app.models.facts import (
    CargoJob,
    CustomsEntry,
    JobStatus,
    RiskLevel,
    ServiceType,
    Shipment,
    ShipmentMode,
    ShipmentStatus,
)
from app.notifications.service import AlertService
from app.notifications.sink import RecordingNotificationSink
from app.reference_data.seed import seed_reference_data
from app.services.clock import FixedClock

# In-memory SQLite shared across connections through a single static pool
TEST_DATABASE_URL = "sqlite+aiosqlite://"

# Wednesday, no weekend surge
WEDNESDAY = datetime(2026, 10, 14, 9, 0, tzinfo=timezone.utc)
FRIDAY = datetime(2026, 10, 16, 9, 0, tzinfo=timezone.utc)


class StubRandom(random.Random):
    """random.Random whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def file_session_factory(tmp_path):
    """Sessions on a SQLite file, each with its own connection and transaction."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'imk.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(WEDNESDAY)


@pytest.fixture
def sink() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def alert_service(clock, sink) -> AlertService:
    return AlertService(clock, sink)


@pytest.fixture
async def seeded(db_session, clock):
    """Three shipments covering Sea/Air/Road, plus FX rates and carriers."""
    db_session.add_all([
        Shipment(
            tracking_number="IMK-1001",
            customer_email="ops@somaliport.example",
            origin="Dubai, UAE",
            destination="Mogadishu, Somalia",
            mode=ShipmentMode.SEA,
            service_type=ServiceType.STANDARD,
            risk_level=RiskLevel.LOW,
            status=ShipmentStatus.IN_TRANSIT,
            eta=date(2026, 10, 25),
        ),
        Shipment(
            tracking_number="IMK-1002",
            customer_email="imports@nairobi-pharma.example",
            origin="Guangzhou, China",
            destination="Nairobi, Kenya",
            mode=ShipmentMode.AIR,
            service_type=ServiceType.EXPRESS,
            risk_level=RiskLevel.HIGH,
            status=ShipmentStatus.CUSTOMS,
            eta=date(2026, 10, 20),
        ),
        Shipment(
            tracking_number="IMK-1003",
            customer_email="logistics@hargeisa-trading.example",
            origin="Mombasa, Kenya",
            destination="Hargeisa, Somalia",
            mode=ShipmentMode.ROAD,
            service_type=ServiceType.STANDARD,
            risk_level=RiskLevel.MEDIUM,
            status=ShipmentStatus.PENDING,
            eta=None,
        ),
        CargoJob(
            id="JOB-1001",
            tracking_number="IMK-1001",
            mode=ShipmentMode.SEA,
            status=JobStatus.IN_TRANSIT,
            weight_kg=500,
            volume_cbm=3,
        ),
        CargoJob(
            id="JOB-1002",
            tracking_number="IMK-1002",
            mode=ShipmentMode.AIR,
            status=JobStatus.DELAYED,
            weight_kg=1200,
            volume_cbm=6,
        ),
        CustomsEntry(
            id="CUS-1002",
            tracking_number="IMK-1002",
            declaration_no="KE-2026-77812",
            duty_amount_usd=420.0,
        ),
    ])
    await db_session.flush()
    await seed_reference_data(db_session, clock.now())
    return db_session


@pytest.fixture
async def client(seeded, clock):
    from app.dependencies import get_clock, get_db, get_rng
    from app.main import app

    async def override_get_db():
        yield seeded

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_rng] = lambda: random.Random(7)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def stub_random():
    """Factory: stub_random(0.25) gives a source whose random() is always 0.25."""
    return StubRandom
