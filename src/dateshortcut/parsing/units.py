"""Keyword to unit reverse lookup."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from dateshortcut.locales.models import Localization, UnitType

logger = logging.getLogger(__name__)


def build_unit_map(localization: Localization) -> Mapping[str, UnitType]:
    """Build the keyword -> unit map for a locale.

    Units are registered in ``UnitType`` declaration order and the first
    registration of a keyword wins, so a keyword listed under both ``year``
    and ``today`` resolves to ``year``.
    """
    unit_map: Dict[str, UnitType] = {}
    for unit in UnitType:
        for keyword in localization.keywords_for(unit):
            existing = unit_map.get(keyword)
            if existing is None:
                unit_map[keyword] = unit
            elif existing is not unit:
                logger.debug(
                    f"Keyword '{keyword}' in locale '{localization.name}' is listed for "
                    f"{existing.value} and {unit.value}; using {existing.value}"
                )
    return MappingProxyType(unit_map)


def resolve_unit(unit_map: Mapping[str, UnitType], keyword: str) -> Optional[UnitType]:
    return unit_map.get(keyword.lower())


__all__ = ["build_unit_map", "resolve_unit"]
