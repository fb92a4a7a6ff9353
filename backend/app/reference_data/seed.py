"""Seed the slowly-changing reference tables (FX rates, carrier connections)."""

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.billing import FxRate
from app.models.carriers import CarrierApiStatus, CarrierConnection, CarrierMode
from app.reference_data.tables import SEED_CARRIERS, SEED_FX_RATES

logger = logging.getLogger("imk.reference_data")


async def seed_reference_data(db: AsyncSession, now: datetime) -> dict[str, int]:
    """Insert FX rates and carrier connections that are not present yet.

    Returns the number of rows inserted per table.
    """
    existing_rates = set((await db.execute(select(FxRate.currency))).scalars().all())
    fx_count = 0
    for currency, rate in SEED_FX_RATES.items():
        if currency in existing_rates:
            continue
        db.add(FxRate(currency=currency, rate_to_usd=rate, updated_at=now))
        fx_count += 1

    existing_carriers = set((await db.execute(select(CarrierConnection.id))).scalars().all())
    carrier_count = 0
    for data in SEED_CARRIERS:
        if data["id"] in existing_carriers:
            continue
        db.add(CarrierConnection(
            id=data["id"],
            name=data["name"],
            mode=CarrierMode(data["mode"]),
            api_status=CarrierApiStatus(data["api_status"]),
            success_rate_pct=data["success_rate_pct"],
            coverage=list(data["coverage"]),
            last_sync_at=now,
        ))
        carrier_count += 1

    await db.flush()
    if fx_count or carrier_count:
        logger.info("Seeded %d FX rates and %d carrier connections", fx_count, carrier_count)
    else:
        logger.info("Reference data already seeded, skipping")
    return {"fx_rates": fx_count, "carriers": carrier_count}
