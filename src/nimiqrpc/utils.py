from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal
from typing import Union

# 1 NIM = 100'000 Luna, see https://www.nimiq.com/whitepaper/#nimiq-supply-distribution
LUNA_PER_NIM = 100_000

NimAmount = Union[Decimal, int, float, str]


def luna_to_nim(luna: int) -> Decimal:
    return Decimal(luna) / LUNA_PER_NIM


def nim_to_luna(nim: NimAmount) -> int:
    # str() keeps floats like 0.1 from dragging binary noise into the Decimal
    amount = Decimal(str(nim)) if isinstance(nim, float) else Decimal(nim)
    return int((amount * LUNA_PER_NIM).to_integral_value(rounding=ROUND_HALF_EVEN))


def format_nim(luna: int) -> str:
    return f"{luna_to_nim(luna):,.5f} NIM"


def address_to_hex(address: str) -> str:
    """Hex-encode the bytes of a user friendly address string."""
    return address.encode("utf-8").hex()
