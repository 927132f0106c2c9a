"""Names used for generated game event types, fields and their value types."""

from __future__ import annotations

import re

from tfdemo.gameevent import GameEventValueType

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+|[A-Z]+")
_CAPITAL_MARK = re.compile(r"\^(.)")

_TYPE_NAMES = dict(
    zip(
        (
            GameEventValueType.STRING,
            GameEventValueType.FLOAT,
            GameEventValueType.BOOLEAN,
            GameEventValueType.BYTE,
            GameEventValueType.LOCAL,
            GameEventValueType.LONG,
            GameEventValueType.SHORT,
            GameEventValueType.NONE,
        ),
        ("MaybeUtf8String", "f32", "bool", "u8", "()", "u32", "u16", "()"),
    )
)

# Field names after the split: the searched form is the name with its
# underscores removed, unless given as an explicit (search, replace) pair.
_ENTRY_TARGETS: tuple[str | tuple[str, str], ...] = (
    "map_name", "cvar_name", "cvar_value", "user_id", "network_id", "team_id",
    "team_name", "old_team", "auto_team", "ent_index", "weapon_id", "damage_bit",
    "custom_kill", "log_class_name", "player_penetrate_count", "damage_amount",
    "show_disguised_crit", "mini_crit", "all_see_crit", "bonus_effect", "team_only",
    "old_name", "new_name", "hint_message", "rounds_limit", "time_limit", "frag_limit",
    "num_advanced", "num_bronze", "num_silver", "num_gold", "old_mode", "new_mode",
    "entity_id", "win_reason", "flag_cap_limit", "cp_name", "cap_team", "cap_time",
    "event_type", ("killstreak", "kill_stream"), "force_upload", "target_id",
    "is_builder", "object_type", "name_change", "ready_state", "builder_id",
    "recede_time", "owner_id", "sapper_id", "item_def", "bit_field", "play_sound",
    "total_hits", "pos_x", "pos_y", "pos_z", "in_eye", "max_players", "level_name",
    "is_strange", "is_unusual", ("defindex", "definition_index"), "match_group",
)

# Event name fixes: "^x" marks a letter that is lower case in the searched
# form and upper case in the replacement; explicit pairs are used as given.
_EVENT_SPECS: tuple[str | tuple[str, str], ...] = (
    "ReplayReplays^available", "ServerAdd^ban", "ServerRemove^ban",
    "ClientBegin^connect", "ClientFull^connect", "PlayerChange^name",
    "PlayerHint^message", "GameNew^map", "IntroNext^camera", "PlayerChange^class",
    "Update^images", "Update^layout", "Update^capping", "Update^owner",
    "Start^touch", "End^touch", ("FakeCaptureMult", "FakeCaptureMultiplier"),
    "Team^playWaitingAbout^to^end", "Team^playPointStart^capture",
    "Freeze^camStarted", "Local^playerChange^team", "Local^playerChange^class",
    "Local^playerChange^disguise", "Flag^statusUpdate", "TournamentEnable^countdown",
    "PlayerCalled^for^medic", "PlayerAsked^for^ball", "Local^playerBecame^observer",
    "PlayerHealed^medic^call", "ArenaMatchMax^streak", "StatsReset^round",
    ("FishNotice_arm", "FishNoticeArm"), "PlayerBonus^points",
    "PlayerUsedPower^upBottle", "ReplayStart^record", "ReplaySession^info",
    "ReplayEnd^record", "ReplayServer^error", "Team^play", "^death", "^panel",
    "^object", "^update", "^ready", "Game^u^i", "^on^hit", "^by^medic",
    "Control^point", "Pipe^bomb", "Score^stats", "Credit^bonus", "Sentry^buster",
    "Quest^log", "Local^player", "Mini^game", "Win^limit", "Skill^rating",
    "Direct^hit", "Charge^deployed", "Wind^down", "Steal^sandvich", "Price^sheet",
    "Team^balanced", "High^five", "Power^up", "H^l^t^v", "Change^level",
    "Rocket^pack", "Dead^ringer", "Main^menu", "M^m^stats",
)


def _entry_pair(target: str | tuple[str, str]) -> tuple[str, str]:
    if isinstance(target, tuple):
        return target
    return target.replace("_", ""), target


def _event_pair(spec: str | tuple[str, str]) -> tuple[str, str]:
    if isinstance(spec, tuple):
        return spec
    return spec.replace("^", ""), _CAPITAL_MARK.sub(lambda m: m.group(1).upper(), spec)


_ENTRY_REPLACEMENTS = tuple(_entry_pair(target) for target in _ENTRY_TARGETS)
_EVENT_REPLACEMENTS = tuple(_event_pair(spec) for spec in _EVENT_SPECS)


def _words(name: str) -> list[str]:
    return _WORD.findall(name)


def to_snake_case(name: str) -> str:
    """Lower case words joined by underscores, split at separators and case changes."""
    return "_".join(word.lower() for word in _words(name))


def to_pascal_case(name: str) -> str:
    """Capitalised words joined together, split at separators and case changes."""
    return "".join(word[0].upper() + word[1:].lower() for word in _words(name))


def _apply(text: str, replacements: tuple[tuple[str, str], ...]) -> str:
    for search, replace in replacements:
        text = text.replace(search, replace)
    return text


def get_type_name(kind: GameEventValueType) -> str:
    """Name of the field type that holds values of ``kind``."""
    return _TYPE_NAMES[GameEventValueType(kind)]


def get_entry_name(name: str) -> str:
    """Field name for an event entry."""
    if name == "type":
        return "kind"
    return _apply(to_snake_case(name), _ENTRY_REPLACEMENTS)


def get_event_name(name: str) -> str:
    """Type name for an event."""
    return _apply(to_pascal_case(name), _EVENT_REPLACEMENTS)