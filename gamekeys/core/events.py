"""Hotkey event identifiers and categories."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class HotKeyCategory(Enum):
    """Grouping of hotkey events in the hotkey file."""

    DEFAULT_EVENTS = auto()
    MAIN_GAME = auto()
    WORLD_MAP = auto()
    BATTLE = auto()
    CASTLE = auto()
    MONSTER = auto()


HOTKEY_CATEGORY_NAMES = {
    HotKeyCategory.DEFAULT_EVENTS: "Default actions",
    HotKeyCategory.MAIN_GAME: "Main Menu",
    HotKeyCategory.WORLD_MAP: "World Map",
    HotKeyCategory.BATTLE: "Battle",
    HotKeyCategory.CASTLE: "Castle",
    HotKeyCategory.MONSTER: "Monster",
}


def get_hotkey_category_name(category: HotKeyCategory) -> str:
    """Get the human-readable name of a category."""
    try:
        return HOTKEY_CATEGORY_NAMES[category]
    except KeyError:
        raise ValueError(f"Unknown hotkey category: {category!r}") from None


class HotKeyEvent(IntEnum):
    """Every user-triggerable action.

    Values are positions in the binding store. Members are declared grouped
    by category so the hotkey file gets one header per category.
    """

    NONE = 0

    # Main menu
    MAIN_MENU_NEW_GAME = auto()
    MAIN_MENU_LOAD_GAME = auto()
    MAIN_MENU_HIGHSCORES = auto()
    MAIN_MENU_CREDITS = auto()
    MAIN_MENU_STANDARD = auto()
    MAIN_MENU_CAMPAIGN = auto()
    MAIN_MENU_MULTI = auto()
    MAIN_MENU_SETTINGS = auto()
    MAIN_MENU_SELECT_MAP = auto()
    MAIN_MENU_MAP_SIZE_SMALL = auto()
    MAIN_MENU_MAP_SIZE_MEDIUM = auto()
    MAIN_MENU_MAP_SIZE_LARGE = auto()
    MAIN_MENU_MAP_SIZE_EXTRA_LARGE = auto()
    MAIN_MENU_MAP_SIZE_ALL = auto()
    MAIN_MENU_HOTSEAT = auto()
    MAIN_MENU_BATTLEONLY = auto()
    MAIN_MENU_NEW_CAMPAIGN_SELECTION_SUCCESSION_WARS = auto()
    MAIN_MENU_NEW_CAMPAIGN_SELECTION_PRICE_OF_LOYALTY = auto()
    NEW_ROLAND_CAMPAIGN = auto()
    NEW_ARCHIBALD_CAMPAIGN = auto()
    NEW_PRICE_OF_LOYALTY_CAMPAIGN = auto()
    NEW_VOYAGE_HOME_CAMPAIGN = auto()
    NEW_WIZARDS_ISLE_CAMPAIGN = auto()
    NEW_DESCENDANTS_CAMPAIGN = auto()

    # Default actions
    DEFAULT_READY = auto()
    DEFAULT_EXIT = auto()
    DEFAULT_LEFT = auto()
    DEFAULT_RIGHT = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_TOP = auto()
    MOVE_BOTTOM = auto()
    MOVE_TOP_LEFT = auto()
    MOVE_TOP_RIGHT = auto()
    MOVE_BOTTOM_LEFT = auto()
    MOVE_BOTTOM_RIGHT = auto()
    SYSTEM_FULLSCREEN = auto()

    # Battle
    BATTLE_RETREAT = auto()
    BATTLE_SURRENDER = auto()
    BATTLE_AUTOSWITCH = auto()
    BATTLE_OPTIONS = auto()
    BATTLE_SKIP = auto()
    BATTLE_WAIT = auto()

    # World map
    SAVE_GAME = auto()
    NEXT_HERO = auto()
    CONTINUE_HERO_MOVEMENT = auto()
    CAST_SPELL = auto()
    SLEEP_HERO = auto()
    NEXT_TOWN = auto()
    END_TURN = auto()
    FILE_OPTIONS = auto()
    SYSTEM_OPTIONS = auto()
    PUZZLE_MAP = auto()
    SCENARIO_INFORMATION = auto()
    DIG_ARTIFACT = auto()
    KINGDOM_SUMMARY = auto()
    VIEW_WORLD = auto()
    DEFAULT_ACTION = auto()
    OPEN_FOCUS = auto()
    CONTROL_PANEL = auto()
    SHOW_RADAR = auto()
    SHOW_BUTTONS = auto()
    SHOW_STATUS = auto()
    SHOW_ICONS = auto()
    SCROLL_LEFT = auto()
    SCROLL_RIGHT = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()

    # Monster
    SPLIT_STACK_BY_HALF = auto()
    SPLIT_STACK_BY_ONE = auto()
    JOIN_STACKS = auto()
    UPGRADE_TROOP = auto()
    DISMISS_TROOP = auto()

    # Castle
    TOWN_DWELLING_LEVEL_1 = auto()
    TOWN_DWELLING_LEVEL_2 = auto()
    TOWN_DWELLING_LEVEL_3 = auto()
    TOWN_DWELLING_LEVEL_4 = auto()
    TOWN_DWELLING_LEVEL_5 = auto()
    TOWN_DWELLING_LEVEL_6 = auto()
    TOWN_WELL = auto()
    TOWN_MAGE_GUILD = auto()
    TOWN_MARKETPLACE = auto()
    TOWN_THIEVES_GUILD = auto()
    TOWN_SHIPYARD = auto()
    TOWN_TAVERN = auto()
    TOWN_JUMP_TO_BUILD_SELECTION = auto()
    WELL_BUY_ALL_CREATURES = auto()

    # Size of the event table, not a real event.
    NO_EVENT = auto()


def iter_hotkey_events():
    """Iterate the real events in identifier order."""
    for value in range(HotKeyEvent.NONE + 1, HotKeyEvent.NO_EVENT):
        yield HotKeyEvent(value)
