"""
Process-wide registry of component families.

Grammars are compiled once at startup and shared read-only afterwards.
Entry points call init_registry() during startup; library code then uses
get_registry() to look up a family by name.
"""

import logging
import threading

from src.label_lib import constants as C
from src.label_lib.dispatcher import MultiGrammar

logger = logging.getLogger(__name__)

_registry = None
_lock = threading.Lock()


class Registry:
    """
    Maps family names (e.g. "sram_sop_28") to their dispatchers.
    """

    def __init__(self, families: list[MultiGrammar]):
        self.families: dict[str, MultiGrammar] = {}
        for family in families:
            if family.name in self.families:
                raise ValueError(f"Duplicate component family: {family.name}")
            self.families[family.name] = family

    def family(self, name: str) -> MultiGrammar:
        """
        Returns the dispatcher for a family.

        Raises:
            KeyError: If no family has that name.
        """
        try:
            return self.families[name]
        except KeyError:
            raise KeyError(f"Unknown component family: {name}") from None

    def names(self) -> list[str]:
        return sorted(self.families)

    def parse(self, family: str, label: str):
        """Decodes `label` with the named family."""
        return self.family(family).parse(label)

    def __contains__(self, name: str) -> bool:
        return name in self.families


def build_registry() -> Registry:
    """
    Compiles every family and checks the board layouts against them.

    Raises:
        ValueError: If a board layout names a family that does not exist.
        re.error: If a grammar pattern is malformed.
    """
    # Imported here so grammars compile on init, not on package import
    from src.label_lib.families import crystal, panasonic, seiko, sharp, sram, ti

    registry = Registry(
        [
            sram.SRAM_SOP_28,
            sram.LSI_LOGIC_SRAM,
            crystal.DMG_CRYSTAL,
            crystal.MGB_CRYSTAL,
            crystal.CGB_CRYSTAL,
            crystal.AGB_CRYSTAL,
            crystal.RTC_CRYSTAL,
            crystal.CRYSTAL_20_MIHZ,
            crystal.CRYSTAL_32_MIHZ,
            sharp.DMG_CPU_FAMILY,
            sharp.MGB_CPU_FAMILY,
            sharp.AGB_CPU_FAMILY,
            sharp.DMG_AMP,
            sharp.MGB_AMP,
            sharp.AGB_AMP,
            sharp.DMG_REG,
            sharp.CGB_REG,
            sharp.AGB_REG,
            seiko.RTC_SOP_8,
            seiko.AGB_PMIC,
            ti.SUPERVISOR_RESET,
            panasonic.MBC1_SOP_24,
            panasonic.MBC2_SOP_28,
        ]
    )

    for board, layout in C.BOARD_LAYOUTS.items():
        for slot, family in layout["slots"].items():
            if family not in registry:
                raise ValueError(f"Board {board}: slot '{slot}' uses unknown family '{family}'")
        hint_slot = layout["hint_slot"]
        if hint_slot is not None and hint_slot not in layout["slots"]:
            raise ValueError(f"Board {board}: hint slot '{hint_slot}' is not a slot")

    return registry


def init_registry() -> Registry:
    """Builds the registry on first call; later calls return the same instance."""
    global _registry
    with _lock:
        if _registry is None:
            _registry = build_registry()
            logger.info(f"Grammar registry ready: {len(_registry.families)} families")
    return _registry


def get_registry() -> Registry:
    """
    Returns the registry built by init_registry().

    Raises:
        RuntimeError: If init_registry() has not been called yet.
    """
    if _registry is None:
        raise RuntimeError("Grammar registry is not initialized; call init_registry() at startup")
    return _registry
