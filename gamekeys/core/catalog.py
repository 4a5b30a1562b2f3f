"""The hotkey event catalog: category, name and default key of every event."""

from __future__ import annotations

from dataclasses import dataclass

from .events import HotKeyCategory, HotKeyEvent, iter_hotkey_events
from .keys import Key


class HotKeyCatalogError(Exception):
    """The event catalog breaks an integrity rule (missing, empty or duplicate names)."""


@dataclass
class HotKeyEventInfo:
    """Binding record of one event."""

    category: HotKeyCategory = HotKeyCategory.DEFAULT_EVENTS
    name: str = ""  # Persisted key in the hotkey file, unique
    key: Key = Key.NONE  # Currently bound key, mutable


_C = HotKeyCategory
_E = HotKeyEvent

# Event names are written to and matched in the hotkey file, keep them unique.
DEFAULT_HOTKEYS: dict[HotKeyEvent, tuple[HotKeyCategory, str, Key]] = {
    _E.MAIN_MENU_NEW_GAME: (_C.MAIN_GAME, "new game", Key.KEY_N),
    _E.MAIN_MENU_LOAD_GAME: (_C.MAIN_GAME, "load game", Key.KEY_L),
    _E.MAIN_MENU_HIGHSCORES: (_C.MAIN_GAME, "highscores", Key.KEY_H),
    _E.MAIN_MENU_CREDITS: (_C.MAIN_GAME, "credits", Key.KEY_C),
    _E.MAIN_MENU_STANDARD: (_C.MAIN_GAME, "standard game", Key.KEY_S),
    _E.MAIN_MENU_CAMPAIGN: (_C.MAIN_GAME, "campaign game", Key.KEY_C),
    _E.MAIN_MENU_MULTI: (_C.MAIN_GAME, "multi-player game", Key.KEY_M),
    _E.MAIN_MENU_SETTINGS: (_C.MAIN_GAME, "settings", Key.KEY_T),
    _E.MAIN_MENU_SELECT_MAP: (_C.MAIN_GAME, "select map", Key.KEY_S),
    _E.MAIN_MENU_MAP_SIZE_SMALL: (_C.MAIN_GAME, "select small map size", Key.KEY_S),
    _E.MAIN_MENU_MAP_SIZE_MEDIUM: (_C.MAIN_GAME, "select medium map size", Key.KEY_M),
    _E.MAIN_MENU_MAP_SIZE_LARGE: (_C.MAIN_GAME, "select large map size", Key.KEY_L),
    _E.MAIN_MENU_MAP_SIZE_EXTRA_LARGE: (_C.MAIN_GAME, "select extra large map size", Key.KEY_X),
    _E.MAIN_MENU_MAP_SIZE_ALL: (_C.MAIN_GAME, "select all map sizes", Key.KEY_A),
    _E.MAIN_MENU_HOTSEAT: (_C.MAIN_GAME, "hotseat game", Key.KEY_H),
    _E.MAIN_MENU_BATTLEONLY: (_C.MAIN_GAME, "battle only game", Key.KEY_B),
    _E.MAIN_MENU_NEW_CAMPAIGN_SELECTION_SUCCESSION_WARS: (
        _C.MAIN_GAME,
        "the succession wars campaign selection",
        Key.KEY_O,
    ),
    _E.MAIN_MENU_NEW_CAMPAIGN_SELECTION_PRICE_OF_LOYALTY: (
        _C.MAIN_GAME,
        "the price of loyalty campaign selection",
        Key.KEY_E,
    ),
    _E.NEW_ROLAND_CAMPAIGN: (_C.MAIN_GAME, "roland campaign", Key.KEY_1),
    _E.NEW_ARCHIBALD_CAMPAIGN: (_C.MAIN_GAME, "archibald campaign", Key.KEY_2),
    _E.NEW_PRICE_OF_LOYALTY_CAMPAIGN: (_C.MAIN_GAME, "the price of loyalty campaign", Key.KEY_1),
    _E.NEW_VOYAGE_HOME_CAMPAIGN: (_C.MAIN_GAME, "voyage home campaign", Key.KEY_2),
    _E.NEW_WIZARDS_ISLE_CAMPAIGN: (_C.MAIN_GAME, "wizard's isle campaign", Key.KEY_3),
    _E.NEW_DESCENDANTS_CAMPAIGN: (_C.MAIN_GAME, "descendants campaign", Key.KEY_4),
    _E.DEFAULT_READY: (_C.DEFAULT_EVENTS, "default okay event", Key.KEY_RETURN),
    _E.DEFAULT_EXIT: (_C.DEFAULT_EVENTS, "default cancel event", Key.KEY_ESCAPE),
    _E.DEFAULT_LEFT: (_C.DEFAULT_EVENTS, "left selection", Key.NONE),
    _E.DEFAULT_RIGHT: (_C.DEFAULT_EVENTS, "right selection", Key.NONE),
    _E.MOVE_LEFT: (_C.DEFAULT_EVENTS, "move left", Key.KEY_LEFT),
    _E.MOVE_RIGHT: (_C.DEFAULT_EVENTS, "move right", Key.KEY_RIGHT),
    _E.MOVE_TOP: (_C.DEFAULT_EVENTS, "move up", Key.KEY_UP),
    _E.MOVE_BOTTOM: (_C.DEFAULT_EVENTS, "move bottom", Key.KEY_DOWN),
    _E.MOVE_TOP_LEFT: (_C.DEFAULT_EVENTS, "move top bottom", Key.NONE),
    _E.MOVE_TOP_RIGHT: (_C.DEFAULT_EVENTS, "move top right", Key.NONE),
    _E.MOVE_BOTTOM_LEFT: (_C.DEFAULT_EVENTS, "move bottom left", Key.NONE),
    _E.MOVE_BOTTOM_RIGHT: (_C.DEFAULT_EVENTS, "move bottom right", Key.NONE),
    _E.SYSTEM_FULLSCREEN: (_C.DEFAULT_EVENTS, "toggle fullscreen", Key.KEY_F4),
    _E.BATTLE_RETREAT: (_C.BATTLE, "retreat from battle", Key.KEY_R),
    _E.BATTLE_SURRENDER: (_C.BATTLE, "surrender during battle", Key.KEY_S),
    _E.BATTLE_AUTOSWITCH: (_C.BATTLE, "toggle battle auto mode", Key.KEY_A),
    _E.BATTLE_OPTIONS: (_C.BATTLE, "battle options", Key.KEY_O),
    _E.BATTLE_SKIP: (_C.BATTLE, "skip turn in battle", Key.KEY_SPACE),
    _E.BATTLE_WAIT: (_C.BATTLE, "wait in battle", Key.KEY_W),
    _E.SAVE_GAME: (_C.WORLD_MAP, "save game", Key.KEY_S),
    _E.NEXT_HERO: (_C.WORLD_MAP, "next hero", Key.KEY_H),
    _E.CONTINUE_HERO_MOVEMENT: (_C.WORLD_MAP, "continue hero movement", Key.KEY_M),
    _E.CAST_SPELL: (_C.WORLD_MAP, "cast spell", Key.KEY_C),
    _E.SLEEP_HERO: (_C.WORLD_MAP, "put hero to sleep", Key.KEY_Z),
    _E.NEXT_TOWN: (_C.WORLD_MAP, "next town", Key.KEY_T),
    _E.END_TURN: (_C.WORLD_MAP, "end turn", Key.KEY_E),
    _E.FILE_OPTIONS: (_C.WORLD_MAP, "file options", Key.KEY_F),
    _E.SYSTEM_OPTIONS: (_C.WORLD_MAP, "system options", Key.KEY_O),
    _E.PUZZLE_MAP: (_C.WORLD_MAP, "puzzle map", Key.KEY_P),
    _E.SCENARIO_INFORMATION: (_C.WORLD_MAP, "scenario information", Key.KEY_I),
    _E.DIG_ARTIFACT: (_C.WORLD_MAP, "dig for artifact", Key.KEY_D),
    _E.KINGDOM_SUMMARY: (_C.WORLD_MAP, "kingdom summary", Key.KEY_K),
    _E.VIEW_WORLD: (_C.WORLD_MAP, "view world", Key.KEY_V),
    _E.DEFAULT_ACTION: (_C.WORLD_MAP, "default action", Key.KEY_SPACE),
    _E.OPEN_FOCUS: (_C.WORLD_MAP, "open focus", Key.KEY_RETURN),
    _E.CONTROL_PANEL: (_C.WORLD_MAP, "control panel", Key.KEY_1),
    _E.SHOW_RADAR: (_C.WORLD_MAP, "show radar", Key.KEY_2),
    _E.SHOW_BUTTONS: (_C.WORLD_MAP, "show game buttons", Key.KEY_3),
    _E.SHOW_STATUS: (_C.WORLD_MAP, "show status", Key.KEY_4),
    _E.SHOW_ICONS: (_C.WORLD_MAP, "show icons", Key.KEY_5),
    _E.SCROLL_LEFT: (_C.WORLD_MAP, "scroll left", Key.KEY_KP_4),
    _E.SCROLL_RIGHT: (_C.WORLD_MAP, "scroll right", Key.KEY_KP_6),
    _E.SCROLL_UP: (_C.WORLD_MAP, "scroll up", Key.KEY_KP_8),
    _E.SCROLL_DOWN: (_C.WORLD_MAP, "scroll down", Key.KEY_KP_2),
    _E.SPLIT_STACK_BY_HALF: (_C.MONSTER, "split stack by half", Key.KEY_SHIFT),
    _E.SPLIT_STACK_BY_ONE: (_C.MONSTER, "split stack by one", Key.KEY_CONTROL),
    _E.JOIN_STACKS: (_C.MONSTER, "join stacks", Key.KEY_ALT),
    _E.UPGRADE_TROOP: (_C.MONSTER, "upgrade troop", Key.KEY_U),
    _E.DISMISS_TROOP: (_C.MONSTER, "dismiss troop", Key.KEY_D),
    _E.TOWN_DWELLING_LEVEL_1: (_C.CASTLE, "town dwelling level 1", Key.KEY_1),
    _E.TOWN_DWELLING_LEVEL_2: (_C.CASTLE, "town dwelling level 2", Key.KEY_2),
    _E.TOWN_DWELLING_LEVEL_3: (_C.CASTLE, "town dwelling level 3", Key.KEY_3),
    _E.TOWN_DWELLING_LEVEL_4: (_C.CASTLE, "town dwelling level 4", Key.KEY_4),
    _E.TOWN_DWELLING_LEVEL_5: (_C.CASTLE, "town dwelling level 5", Key.KEY_5),
    _E.TOWN_DWELLING_LEVEL_6: (_C.CASTLE, "town dwelling level 6", Key.KEY_6),
    _E.TOWN_WELL: (_C.CASTLE, "well", Key.KEY_W),
    _E.TOWN_MAGE_GUILD: (_C.CASTLE, "mage guild", Key.KEY_S),
    _E.TOWN_MARKETPLACE: (_C.CASTLE, "marketplace", Key.KEY_M),
    _E.TOWN_THIEVES_GUILD: (_C.CASTLE, "thieves guild", Key.KEY_T),
    _E.TOWN_SHIPYARD: (_C.CASTLE, "shipyard", Key.KEY_N),
    _E.TOWN_TAVERN: (_C.CASTLE, "tavern", Key.KEY_R),
    # Also used to build a castle in a town.
    _E.TOWN_JUMP_TO_BUILD_SELECTION: (_C.CASTLE, "castle construction", Key.KEY_B),
    _E.WELL_BUY_ALL_CREATURES: (_C.CASTLE, "buy all monsters in well", Key.KEY_M),
}


def build_catalog(
    table: dict[HotKeyEvent, tuple[HotKeyCategory, str, Key]] | None = None,
) -> list[HotKeyEventInfo]:
    """Build the binding records of every event, indexed by event id.

    Slot ``HotKeyEvent.NONE`` holds an empty sentinel record.

    Raises:
        HotKeyCatalogError: If the table leaves an event out or breaks
            name uniqueness.
    """
    if table is None:
        table = DEFAULT_HOTKEYS

    records = [HotKeyEventInfo() for _ in range(HotKeyEvent.NO_EVENT)]
    populated: set[HotKeyEvent] = set()
    for event, (category, name, key) in table.items():
        if not HotKeyEvent.NONE < event < HotKeyEvent.NO_EVENT:
            raise HotKeyCatalogError(f"Event {event!r} cannot carry a binding")
        records[event] = HotKeyEventInfo(category=category, name=name, key=key)
        populated.add(event)

    missing = [event.name for event in iter_hotkey_events() if event not in populated]
    if missing:
        raise HotKeyCatalogError(f"Events without a binding record: {', '.join(missing)}")

    verify_catalog(records)
    return records


def verify_catalog(records: list[HotKeyEventInfo]) -> None:
    """Check the integrity rules of a populated catalog.

    Every event needs a non-empty name, names must be pairwise distinct and
    each category must occupy one contiguous run of event ids.

    Raises:
        HotKeyCatalogError: On the first broken rule.
    """
    if len(records) != HotKeyEvent.NO_EVENT:
        raise HotKeyCatalogError(
            f"Catalog has {len(records)} records, expected {int(HotKeyEvent.NO_EVENT)}"
        )

    seen_names: dict[str, HotKeyEvent] = {}
    finished_categories: set[HotKeyCategory] = set()
    current_category: HotKeyCategory | None = None

    for event in iter_hotkey_events():
        info = records[event]
        if not info.name:
            raise HotKeyCatalogError(f"Event {event.name} has an empty name")

        other = seen_names.get(info.name)
        if other is not None:
            raise HotKeyCatalogError(
                f'Events {other.name} and {event.name} share the name "{info.name}"'
            )
        seen_names[info.name] = event

        if info.category != current_category:
            if info.category in finished_categories:
                raise HotKeyCatalogError(
                    f"Event {event.name} splits category {info.category.name} into two runs"
                )
            if current_category is not None:
                finished_categories.add(current_category)
            current_category = info.category
