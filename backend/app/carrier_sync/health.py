"""Pure carrier sync simulation: success-rate drift and derived API status."""

MIN_SUCCESS_RATE = 88.0
MAX_SUCCESS_RATE = 99.9
JITTER_SPAN = 2.2


def drift_success_rate(current_pct: float, u: float) -> float:
    """Move the rate by (u - 0.5) * 2.2, u uniform in [0, 1), clamped to [88, 99.9]."""
    jittered = round(current_pct + (u - 0.5) * JITTER_SPAN, 2)
    return max(MIN_SUCCESS_RATE, min(MAX_SUCCESS_RATE, jittered))


def api_status_for(success_rate_pct: float) -> str:
    if success_rate_pct > 95:
        return "Connected"
    if success_rate_pct > 91:
        return "Degraded"
    return "Offline"
