"""Pure trade compliance rules: no DB dependency, easy to unit test.

Screens an HS code, the trade lane, the supplied documents and cargo value,
then estimates duties. Critical issues (malformed HS code, sanctioned lane)
fail the check; any other issue or suggestion downgrades it to a warning.
"""

import re
from dataclasses import dataclass, field

HS_CODE_PATTERN = re.compile(r"^\d{6,10}$")

REQUIRED_DOCUMENTS = ("Commercial Invoice", "Packing List")

INCOTERM_ADJUSTMENT = {"DDP": 1.10, "CIF": 1.05}

HIGH_VALUE_INSURANCE_USD = 50_000
INSURANCE_DOC_THRESHOLD_USD = 25_000

HS_CODE_ISSUE = "HS code must be numeric with 6 to 10 digits."
SANCTIONS_ISSUE = "Trade lane may be restricted by sanctions or export controls."
PASS_SUGGESTION = "Compliance pre-check passed. Continue to customs filing."


@dataclass
class ComplianceRules:
    """Configuration data: sanctioned countries and duty rates by HS chapter."""

    sanctioned_countries: list[str]
    duty_rate_by_hs_prefix: dict[str, float]
    default_duty_rate: float = 0.10

    @classmethod
    def from_settings(cls, settings) -> "ComplianceRules":
        return cls(
            sanctioned_countries=[c.strip().upper() for c in settings.sanctioned_countries],
            duty_rate_by_hs_prefix=dict(settings.duty_rate_by_hs_prefix),
            default_duty_rate=settings.default_duty_rate,
        )


@dataclass
class ComplianceOutcome:
    status: str
    hs_code: str
    duties_usd: float
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    generated_docs: list[str] = field(default_factory=list)
    critical_issues: int = 0


def is_valid_hs_code(hs_code: str) -> bool:
    return bool(HS_CODE_PATTERN.match(hs_code))


def is_sanctioned_lane(origin: str, destination: str, sanctioned: list[str]) -> bool:
    origin = origin.strip().upper()
    destination = destination.strip().upper()
    return any(country in origin or country in destination for country in sanctioned)


def estimate_duties(
    hs_code: str,
    cargo_value_usd: float,
    incoterm: str,
    rules: ComplianceRules,
) -> float:
    """Duty = value × rate(HS chapter) × Incoterm adjustment, rounded to cents."""
    rate = rules.duty_rate_by_hs_prefix.get(hs_code[:2], rules.default_duty_rate)
    adjustment = INCOTERM_ADJUSTMENT.get(incoterm, 1.0)
    return round(cargo_value_usd * rate * adjustment, 2)


def transport_document(shipment_mode: str | None) -> str:
    if shipment_mode == "Air" or shipment_mode is None:
        return "Air Waybill"
    return "Bill of Lading"


def generated_documents(
    cargo_value_usd: float, incoterm: str, shipment_mode: str | None
) -> list[str]:
    docs = [
        "Commercial Invoice",
        "Packing List",
        "Certificate of Origin",
        transport_document(shipment_mode),
    ]
    if cargo_value_usd > INSURANCE_DOC_THRESHOLD_USD or incoterm in ("CIF", "DDP"):
        docs.append("Insurance Certificate")
    return list(dict.fromkeys(docs))


def evaluate_compliance(
    *,
    hs_code: str,
    origin_country: str,
    destination_country: str,
    cargo_value_usd: float,
    incoterm: str,
    hazardous: bool,
    documents: list[str],
    rules: ComplianceRules,
    shipment_mode: str | None = None,
) -> ComplianceOutcome:
    """Run every compliance rule and derive the Pass/Warning/Fail status.

    Args:
        shipment_mode: Mode of the linked shipment, None when unknown.

    Returns:
        ComplianceOutcome. Identical inputs always give identical outcomes.
    """
    hs_code = hs_code.strip()
    provided = {doc.strip() for doc in documents if doc and doc.strip()}
    issues: list[str] = []
    suggestions: list[str] = []
    critical = 0

    if not is_valid_hs_code(hs_code):
        issues.append(HS_CODE_ISSUE)
        critical += 1

    if is_sanctioned_lane(origin_country, destination_country, rules.sanctioned_countries):
        issues.append(SANCTIONS_ISSUE)
        suggestions.append("Escalate to compliance legal team before booking.")
        critical += 1

    for doc in REQUIRED_DOCUMENTS:
        if doc not in provided:
            issues.append(f"Missing required document: {doc}.")

    if hazardous and "MSDS" not in provided:
        issues.append("Hazardous cargo requires MSDS documentation.")
        suggestions.append("Attach MSDS and dangerous goods declaration.")

    if cargo_value_usd > HIGH_VALUE_INSURANCE_USD and "Insurance Certificate" not in provided:
        suggestions.append("High-value cargo should include insurance certificate.")

    if critical:
        status = "Fail"
    elif issues or suggestions:
        status = "Warning"
    else:
        status = "Pass"
        suggestions.append(PASS_SUGGESTION)

    return ComplianceOutcome(
        status=status,
        hs_code=hs_code,
        duties_usd=estimate_duties(hs_code, cargo_value_usd, incoterm, rules),
        issues=issues,
        suggestions=suggestions,
        generated_docs=generated_documents(cargo_value_usd, incoterm, shipment_mode),
        critical_issues=critical,
    )
