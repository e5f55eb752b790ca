"""
Display formatting for physical-layer quantities.
"""

from typing import Union

_RATE_PREFIXES = [
    (1e3, 'kbps'),
    (1e6, 'Mbps'),
    (1e9, 'Gbps'),
]


def _trim(value: float) -> str:
    """Whole numbers without a decimal part, everything else as-is."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def format_data_rate(bps: Union[int, float]) -> str:
    """
    Format a bits-per-second value for display.

    Examples:
        format_data_rate(9600)          → '9.6 kbps'
        format_data_rate(115200)        → '115.2 kbps'
        format_data_rate(100_000_000)   → '100 Mbps'
        format_data_rate(10_000_000_000) → '10 Gbps'
        format_data_rate(300)           → '300 bps'
    """
    for scale, unit in reversed(_RATE_PREFIXES):
        if bps >= scale:
            return f"{_trim(bps / scale)} {unit}"
    return f"{_trim(bps)} bps"


def format_impedance(ohms: float) -> str:
    """Format a characteristic impedance, e.g. 120 → '120Ω'."""
    return f"{_trim(ohms)}Ω"
