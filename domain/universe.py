"""Universe selection and symbol helpers."""

from .enums import Universe
from .models import InstrumentMetadata

# Exchange suffixes stripped from display symbols
EXCHANGE_SUFFIXES = (".L",)


def clean_symbol(symbol: str) -> str:
    """Display symbol without exchange suffix.

    Example:
        >>> clean_symbol("CSP1.L")
        'CSP1'
    """
    for suffix in EXCHANGE_SUFFIXES:
        if symbol.endswith(suffix):
            return symbol[: -len(suffix)]
    return symbol


def select_instruments(
    instruments: list[InstrumentMetadata],
    universe: Universe = Universe.CORE,
) -> list[InstrumentMetadata]:
    """
    Instruments belonging to the requested universe.

    CORE-tier instruments appear in both views; EXTENDED-tier instruments
    only in the extended view. Duplicate symbols keep their first entry.
    """
    seen: set[str] = set()
    selected = []
    for inst in instruments:
        if inst.symbol in seen:
            continue
        if universe == Universe.CORE and inst.tier == Universe.EXTENDED:
            continue
        seen.add(inst.symbol)
        selected.append(inst)
    return selected
