"""ORM models for route plans and predictive ETAs."""

import enum
from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum as SAEnum, Float, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, enum_values
from app.models.facts import RiskLevel, ShipmentMode


class RouteStrategy(str, enum.Enum):
    COST = "Cost"
    SPEED = "Speed"
    BALANCED = "Balanced"
    LOW_CARBON = "Low Carbon"


class RoutePlan(Base):
    __tablename__ = "route_plans"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    tracking_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    origin: Mapped[str] = mapped_column(String(200), nullable=False)
    destination: Mapped[str] = mapped_column(String(200), nullable=False)
    strategy: Mapped[RouteStrategy] = mapped_column(
        SAEnum(RouteStrategy, name="route_strategy", values_callable=enum_values), nullable=False
    )
    recommended_mode: Mapped[ShipmentMode] = mapped_column(
        SAEnum(ShipmentMode, name="shipment_mode", values_callable=enum_values), nullable=False
    )
    recommended_carrier: Mapped[str] = mapped_column(String(200), nullable=False)
    estimated_transit_days: Mapped[int] = mapped_column(Integer, nullable=False)
    estimated_cost_usd: Mapped[float] = mapped_column(Float, nullable=False)
    distance_km: Mapped[float] = mapped_column(Float, nullable=False)
    risk_score: Mapped[int] = mapped_column(Integer, nullable=False)
    carbon_kg: Mapped[float] = mapped_column(Float, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class PredictiveEta(Base):
    __tablename__ = "predictive_etas"

    # One live prediction per shipment, replaced on every refresh
    tracking_number: Mapped[str] = mapped_column(String(40), primary_key=True)
    predicted_eta: Mapped[date] = mapped_column(Date, nullable=False)
    confidence_pct: Mapped[int] = mapped_column(Integer, nullable=False)
    risk_level: Mapped[RiskLevel] = mapped_column(
        SAEnum(RiskLevel, name="risk_level", values_callable=enum_values), nullable=False
    )
    factors: Mapped[list] = mapped_column(JSON, default=list)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
