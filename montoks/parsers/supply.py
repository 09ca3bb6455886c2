"""Exact token supply formatting (raw smallest-unit integer → decimal string)."""

from loguru import logger

ERROR = "Error"


def format_supply(raw_supply: str | int, decimals: int) -> str:
    """Divide ``raw_supply`` by ``10**decimals`` without floating point.

    >>> format_supply("1500000000000000000", 18)
    '1.5'
    >>> format_supply("2000000000000000000", 18)
    '2'
    """
    try:
        text = str(raw_supply).strip()
        if not text.isdigit() or decimals < 0:
            raise ValueError(f"bad supply {raw_supply!r} / decimals {decimals!r}")

        whole, fraction = divmod(int(text), 10 ** decimals)
        if fraction == 0:
            return str(whole)

        fraction_str = str(fraction).zfill(decimals).rstrip("0")
        return f"{whole}.{fraction_str}"
    except (TypeError, ValueError) as e:
        logger.debug(f"[SUPPLY] Cannot format supply: {e}")
        return ERROR
