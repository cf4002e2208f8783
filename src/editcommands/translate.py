# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing
import uuid

import msgspec

from .cmdtypes import (
    DecodeResult,
    EditCommand,
    EditCommandKind,
    EncodeResult,
    OleCommand,
    OleCommandData,
    Unrecognized,
    UnrecognizedReason,
)
from .commontypes import VariantError
from .hostconsts import GUID_VSStandardCommandSet97, VSStd2K, VSStd2KCmdID, VSStd97CmdID
from .keys import (
    DEFAULT_KEY_INPUT,
    ENTER_KEY,
    ESCAPE_KEY,
    TAB_KEY,
    KeyInput,
    KeyModifiers,
    VimKey,
    apply_modifiers,
    char_to_key_input,
    vim_key_to_key_input,
)
from .variants import Variant, VariantPresence, variant_char, variant_presence

logger = logging.getLogger(__name__)


### Table entries


class Fixed(msgspec.Struct, frozen=True, tag=True):
    key_input: KeyInput
    kind: EditCommandKind


class TypedChar(msgspec.Struct, frozen=True, tag=True):
    pass


# Only succeeds when the payload can't point at a specific history entry. Jumping to
# a picked entry by replaying undo keystrokes would land in the wrong place.
class HistoryGated(msgspec.Struct, frozen=True, tag=True):
    kind: EditCommandKind


TableEntry = Fixed | TypedChar | HistoryGated


def _user_input(key: VimKey | KeyInput):
    key_input = key if isinstance(key, KeyInput) else vim_key_to_key_input(key)
    return Fixed(key_input=key_input, kind=EditCommandKind.USER_INPUT)


def _extended(key: VimKey):
    return Fixed(
        key_input=apply_modifiers(vim_key_to_key_input(key), KeyModifiers.SHIFT),
        kind=EditCommandKind.VISUAL_STUDIO_COMMAND,
    )


UNDO = Fixed(key_input=DEFAULT_KEY_INPUT, kind=EditCommandKind.UNDO)
REDO = Fixed(key_input=DEFAULT_KEY_INPUT, kind=EditCommandKind.REDO)


STD97_COMMANDS: typing.Mapping[int, TableEntry] = {
    VSStd97CmdID.SingleChar: TypedChar(),
    VSStd97CmdID.Escape: _user_input(ESCAPE_KEY),
    VSStd97CmdID.Delete: _user_input(VimKey.DELETE),
    VSStd97CmdID.F1Help: _user_input(VimKey.F1),
    VSStd97CmdID.Undo: UNDO,
    VSStd97CmdID.Redo: REDO,
    VSStd97CmdID.MultiLevelUndo: HistoryGated(kind=EditCommandKind.UNDO),
    VSStd97CmdID.MultiLevelRedo: HistoryGated(kind=EditCommandKind.REDO),
}

STD2K_COMMANDS: typing.Mapping[int, TableEntry] = {
    VSStd2KCmdID.TYPECHAR: TypedChar(),
    VSStd2KCmdID.RETURN: _user_input(ENTER_KEY),
    VSStd2KCmdID.CANCEL: _user_input(ESCAPE_KEY),
    VSStd2KCmdID.DELETE: _user_input(VimKey.DELETE),
    VSStd2KCmdID.BACKSPACE: _user_input(VimKey.BACK),
    VSStd2KCmdID.TAB: _user_input(TAB_KEY),
    VSStd2KCmdID.BACKTAB: _user_input(apply_modifiers(TAB_KEY, KeyModifiers.SHIFT)),
    VSStd2KCmdID.LEFT: _user_input(VimKey.LEFT),
    VSStd2KCmdID.LEFT_EXT: _extended(VimKey.LEFT),
    VSStd2KCmdID.LEFT_EXT_COL: _extended(VimKey.LEFT),
    VSStd2KCmdID.RIGHT: _user_input(VimKey.RIGHT),
    VSStd2KCmdID.RIGHT_EXT: _extended(VimKey.RIGHT),
    VSStd2KCmdID.RIGHT_EXT_COL: _extended(VimKey.RIGHT),
    VSStd2KCmdID.UP: _user_input(VimKey.UP),
    VSStd2KCmdID.UP_EXT: _extended(VimKey.UP),
    VSStd2KCmdID.UP_EXT_COL: _extended(VimKey.UP),
    VSStd2KCmdID.DOWN: _user_input(VimKey.DOWN),
    VSStd2KCmdID.DOWN_EXT: _extended(VimKey.DOWN),
    VSStd2KCmdID.DOWN_EXT_COL: _extended(VimKey.DOWN),
    VSStd2KCmdID.PAGEUP: _user_input(VimKey.PAGE_UP),
    VSStd2KCmdID.PAGEUP_EXT: _extended(VimKey.PAGE_UP),
    VSStd2KCmdID.PAGEDN: _user_input(VimKey.PAGE_DOWN),
    VSStd2KCmdID.PAGEDN_EXT: _extended(VimKey.PAGE_DOWN),
    # The host sends BOL and EOL for the Home and End keys, even though HOME and END
    # are defined.
    VSStd2KCmdID.BOL: _user_input(VimKey.HOME),
    VSStd2KCmdID.BOL_EXT: _extended(VimKey.HOME),
    VSStd2KCmdID.BOL_EXT_COL: _extended(VimKey.HOME),
    VSStd2KCmdID.EOL: _user_input(VimKey.END),
    VSStd2KCmdID.EOL_EXT: _extended(VimKey.END),
    VSStd2KCmdID.EOL_EXT_COL: _extended(VimKey.END),
    # Sent when the undo command runs, whether from the toolbar or a key binding.
    VSStd2KCmdID.UNDO: UNDO,
    VSStd2KCmdID.UNDONOMOVE: UNDO,
    VSStd2KCmdID.REDO: REDO,
    VSStd2KCmdID.REDONOMOVE: REDO,
    VSStd2KCmdID.TOGGLE_OVERTYPE_MODE: _user_input(VimKey.INSERT),
}

COMMAND_TABLES: typing.Mapping[uuid.UUID, typing.Mapping[int, TableEntry]] = {
    GUID_VSStandardCommandSet97: STD97_COMMANDS,
    VSStd2K: STD2K_COMMANDS,
}


def _unrecognized(reason: UnrecognizedReason, detail: str):
    logger.debug("Unrecognized (%s): %s", reason.value, detail)
    return Unrecognized(reason, detail)


def decode(
    group: uuid.UUID,
    command_id: int,
    variant: typing.Optional[Variant] = None,
    modifiers: KeyModifiers = KeyModifiers.NONE,
) -> DecodeResult:
    """Translate a native command into the key input and command kind it stands for.

    The modifiers are the ones the user is holding right now; the native command
    can't tell us about them. They are added to any modifiers the command already
    implies, such as the Shift of a selection-extending command.

    Returns an Unrecognized rather than raising; most native commands mean nothing
    to the editing engine, and the host should simply handle them itself.
    """
    table = COMMAND_TABLES.get(group)
    if table is None:
        return _unrecognized(UnrecognizedReason.UNKNOWN_GROUP, f"group {group}")
    entry = table.get(command_id)
    if entry is None:
        return _unrecognized(UnrecognizedReason.UNKNOWN_COMMAND, f"command {command_id} in group {group}")

    match entry:
        case Fixed(key_input=key_input, kind=kind):
            pass
        case TypedChar():
            char = variant_char(variant)
            if char is None:
                return _unrecognized(UnrecognizedReason.BAD_VARIANT, f"{variant!r} is not a 16-bit character")
            key_input = char_to_key_input(char)
            kind = EditCommandKind.USER_INPUT
        case HistoryGated(kind=kind):
            match variant_presence(variant):
                case VariantPresence.PRESENT_SPECIFIC:
                    return _unrecognized(
                        UnrecognizedReason.TARGETED_HISTORY,
                        f"command {command_id} targets history point {variant.value!r}",
                    )
                case VariantPresence.ABSENT | VariantPresence.PRESENT_IGNORABLE:
                    key_input = DEFAULT_KEY_INPUT

    return EditCommand(
        key_input=apply_modifiers(key_input, modifiers),
        kind=kind,
        group=group,
        command_id=command_id,
    )


def decode_key_input(group: uuid.UUID, data: OleCommandData) -> typing.Optional[KeyInput]:
    match decode(group, data.command_id, data.variant):
        case EditCommand(key_input=key_input):
            return key_input
    return None


### Encoding

# Keys with a plain native command of their own. Tab is missing because it depends on
# Shift.
ENCODABLE_KEYS: typing.Mapping[VimKey, VSStd2KCmdID] = {
    VimKey.ENTER: VSStd2KCmdID.RETURN,
    VimKey.ESCAPE: VSStd2KCmdID.CANCEL,
    VimKey.DELETE: VSStd2KCmdID.DELETE,
    VimKey.BACK: VSStd2KCmdID.BACKSPACE,
    VimKey.UP: VSStd2KCmdID.UP,
    VimKey.DOWN: VSStd2KCmdID.DOWN,
    VimKey.LEFT: VSStd2KCmdID.LEFT,
    VimKey.RIGHT: VSStd2KCmdID.RIGHT,
    VimKey.PAGE_UP: VSStd2KCmdID.PAGEUP,
    VimKey.PAGE_DOWN: VSStd2KCmdID.PAGEDN,
    VimKey.INSERT: VSStd2KCmdID.TOGGLE_OVERTYPE_MODE,
}


def encode(key_input: KeyInput) -> EncodeResult:
    """Translate a key input into the native editor command which performs it.

    Never produces the selection-extending forms, the undo/redo family or BOL/EOL;
    those only ever come from the host.
    """
    match key_input.key:
        case VimKey.TAB:
            if key_input.modifiers == KeyModifiers.SHIFT:
                return OleCommand.std2k(VSStd2KCmdID.BACKTAB)
            return OleCommand.std2k(VSStd2KCmdID.TAB)
        case key if key in ENCODABLE_KEYS:
            return OleCommand.std2k(ENCODABLE_KEYS[key])

    if key_input.char is None:
        return _unrecognized(UnrecognizedReason.NO_MAPPING, f"{key_input} has no native command")
    try:
        data = OleCommandData.allocate(key_input.char)
    except VariantError as e:
        return _unrecognized(UnrecognizedReason.NO_MAPPING, str(e))
    return OleCommand(group=VSStd2K, data=data)
