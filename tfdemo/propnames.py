"""Collecting send table property names, including expanded numeric array tables."""

from __future__ import annotations

import re
from collections.abc import Iterable

_DEFAULT_SIZE = 65

_TABLE_SIZES: dict[str, int] = {"m_nNextMapVoteOptions": 3, "m_nVoteOptionCount": 5}
_TABLE_SIZES.update(
    dict.fromkeys(
        (
            "m_nStreaks",
            "m_nNumNodeHillData",
            "m_nModelIndexOverrides",
            "m_nMinigameTeamScore",
            "m_iTeamBaseIcons",
            "m_iTeam",
            "m_iNumTeamMembers",
            "m_hProps",
            "m_flNextRespawnWave",
            "m_flEncodedController",
            "m_eWinningMethod",
            "m_chPoseIndex",
            "m_bTrackAlarm",
            "m_bTeamReady",
            "m_bTeamCanCap",
            "m_TeamRespawnWaveTimes",
        ),
        4,
    )
)
_TABLE_SIZES.update(
    dict.fromkeys(
        (
            "m_iWarnOnCap",
            "m_iTeamInZone",
            "m_iOwner",
            "m_iControlPointParents",
            "m_iCappingTeam",
            "m_iCPGroup",
            "m_hControlPointEnts",
            "m_flUnlockTimes",
            "m_flPathDistance",
            "m_flLazyCapPerc",
            "m_flCPTimerTimes",
            "m_bInMiniRound",
            "m_bCPLocked",
            "m_bCPIsVisible",
            "m_bCPCapRateScalesWithPlayers",
            "m_bBlocked",
        ),
        8,
    )
)
_TABLE_SIZES.update(dict.fromkeys(("m_nAttachIndex", "m_hAttachEntity"), 10))
_TABLE_SIZES.update(
    dict.fromkeys(
        (
            "m_nMannVsMachineWaveClassFlags",
            "m_nMannVsMachineWaveClassFlags2",
            "m_nMannVsMachineWaveClassCounts2",
            "m_nMannVsMachineWaveClassCounts",
            "m_bMannVsMachineWaveClassActive2",
            "m_bMannVsMachineWaveClassActive",
        ),
        12,
    )
)
_TABLE_SIZES["m_chCurrentSlideLists"] = 16
_TABLE_SIZES["m_bHillIsDownhill"] = 20
_TABLE_SIZES.update(dict.fromkeys(("m_chAreaPortalBits", "m_chAreaBits"), 24))
_TABLE_SIZES["m_hMyWeapons"] = 48
_TABLE_SIZES.update(dict.fromkeys(("m_iTeamReqCappers", "m_iTeamOverlays", "m_iTeamIcons"), 8 * 8))
_TABLE_SIZES.update(dict.fromkeys(("m_flexWeight", "m_flPoseParameter"), 96))

_U8_PATTERN = re.compile(r"\+?[0-9]+")


def numeric_table_size(table_name: str) -> int:
    """Highest element index of a numeric array table."""
    return _TABLE_SIZES.get(table_name, _DEFAULT_SIZE)


def _is_u8(text: str) -> bool:
    return bool(_U8_PATTERN.fullmatch(text)) and int(text) <= 0xFF


def _is_length_table(props: list[str]) -> bool:
    return any(prop == "lengthproxy" or prop.startswith("lengthprop") for prop in props)


def collect_prop_names(tables: Iterable[tuple[str, Iterable[str]]]) -> list[tuple[str, str]]:
    """Return every (table, prop) name pair, sorted by table then prop.

    Tables holding length props are skipped. Tables whose props look like three
    digit array indices are filled out to every index up to their known size.
    """
    names: set[tuple[str, str]] = set()
    numeric_tables: dict[str, int] = {}
    for table_name, props in tables:
        props = list(props)
        if _is_length_table(props):
            continue
        for prop in props:
            names.add((table_name, prop))
            if (
                len(prop.encode("utf-8")) == 3
                and len(table_name.encode("utf-8")) > 3
                and _is_u8(prop)
            ):
                numeric_tables[table_name] = numeric_table_size(table_name)
    for table_name, size in numeric_tables.items():
        names.update((table_name, f"{num:03}") for num in range(size + 1))
    return sorted(names)