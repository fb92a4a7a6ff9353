"""Pure ETA prediction: baseline date plus accumulated risk offsets."""

from dataclasses import dataclass, field
from datetime import date, timedelta

MIN_CONFIDENCE = 62
MAX_CONFIDENCE = 97
BASE_CONFIDENCE = 94

RISK_PENALTY = {"High": 12, "Medium": 6, "Low": 2}
CUSTOMS_PENALTY = 6
DELAYED_PENALTY = 10

DEFAULT_FACTOR = "Stable milestone progression"


@dataclass
class EtaPrediction:
    predicted_eta: date
    confidence_pct: int
    risk_level: str
    factors: list[str] = field(default_factory=list)


def risk_level_for(confidence_pct: int) -> str:
    if confidence_pct < 75:
        return "High"
    if confidence_pct < 86:
        return "Medium"
    return "Low"


def confidence_for(risk_level: str | None, in_customs: bool, job_delayed: bool) -> int:
    raw = (
        BASE_CONFIDENCE
        - RISK_PENALTY.get(risk_level or "Low", RISK_PENALTY["Low"])
        - (CUSTOMS_PENALTY if in_customs else 0)
        - (DELAYED_PENALTY if job_delayed else 0)
    )
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, round(raw)))


def predict_eta(
    baseline: date,
    *,
    risk_level: str | None,
    shipment_status: str,
    mode: str | None,
    job_status: str | None = None,
) -> EtaPrediction:
    offset_days = 0
    factors: list[str] = []
    job_delayed = job_status == "Delayed"
    in_customs = shipment_status == "Customs"

    if risk_level == "High":
        offset_days += 1
        factors.append("High risk profile")
    if job_delayed:
        offset_days += 2
        factors.append("Order currently delayed")
    if in_customs:
        offset_days += 1
        factors.append("Customs processing variability")
    if mode == "Air":
        offset_days -= 1
        factors.append("Air mode acceleration")
    elif mode == "Sea":
        factors.append("Ocean lane weather variability")

    confidence = confidence_for(risk_level, in_customs, job_delayed)
    return EtaPrediction(
        predicted_eta=baseline + timedelta(days=offset_days),
        confidence_pct=confidence,
        risk_level=risk_level_for(confidence),
        factors=factors or [DEFAULT_FACTOR],
    )
