"""Pure settlement math: currency conversion, insurance, invoice status.

FX rates are stored as USD per one unit of currency, so converting USD into
an invoice currency divides and converting back multiplies.
"""

import random
import string

MIN_INSURANCE_USD = 45.0
INSURANCE_RATE = 0.03
FALLBACK_FREIGHT_USD = 1500.0
REFERENCE_ALPHABET = string.ascii_uppercase + string.digits
REFERENCE_LENGTH = 7

# Forward-only ordering of invoice statuses
STATUS_RANK = {"Draft": 0, "Issued": 1, "Partially Paid": 2, "Paid": 3}


def usd_to_currency(amount_usd: float, rate_to_usd: float) -> float:
    return round(amount_usd / rate_to_usd, 2)


def currency_to_usd(amount: float, rate_to_usd: float) -> float:
    return round(amount * rate_to_usd, 2)


def insurance_usd(freight_usd: float, include_insurance: bool) -> float:
    if not include_insurance:
        return 0.0
    return max(MIN_INSURANCE_USD, freight_usd * INSURANCE_RATE)


def next_invoice_status(current: str, settled_usd: float, total_usd: float) -> str:
    """Status after a payment, given every Settled payment's USD sum.

    Paid once the settled sum covers the total, Partially Paid when anything
    has settled, otherwise unchanged. Never moves backwards.
    """
    if settled_usd >= total_usd:
        candidate = "Paid"
    elif settled_usd > 0:
        candidate = "Partially Paid"
    else:
        candidate = current
    return candidate if STATUS_RANK[candidate] >= STATUS_RANK[current] else current


def jitter_rate(rate_to_usd: float, u: float, fraction: float = 0.01) -> float:
    """Scale a rate by 1 + (u - 0.5) * 2 * fraction, u uniform in [0, 1)."""
    return round(rate_to_usd * (1 + (u - 0.5) * 2 * fraction), 6)


def payment_reference(rng: random.Random) -> str:
    return "GLB-" + "".join(rng.choice(REFERENCE_ALPHABET) for _ in range(REFERENCE_LENGTH))
