from __future__ import annotations

import enum
import typing
import uuid

import msgspec

from .hostconsts import VSStd2K, VSStd2KCmdID
from .keys import KeyInput
from .variants import Variant, char_variant


class EditCommandKind(enum.Enum):
    # treat it as though the user typed the key
    USER_INPUT = enum.auto()
    # the host already performed a gesture (such as extending the selection) which
    # should not be re-derived from the plain key
    VISUAL_STUDIO_COMMAND = enum.auto()
    UNDO = enum.auto()
    REDO = enum.auto()


class EditCommand(msgspec.Struct, frozen=True, kw_only=True):
    key_input: KeyInput
    kind: EditCommandKind
    group: uuid.UUID
    command_id: int

    @property
    def is_user_input(self):
        return self.kind is EditCommandKind.USER_INPUT

    @property
    def is_undo(self):
        return self.kind is EditCommandKind.UNDO

    @property
    def is_redo(self):
        return self.kind is EditCommandKind.REDO


class OleCommandData(msgspec.Struct, frozen=True, kw_only=True):
    command_id: int
    variant: typing.Optional[Variant] = None

    @classmethod
    def allocate(cls, char: str):
        return cls(command_id=VSStd2KCmdID.TYPECHAR, variant=char_variant(char))


class OleCommand(msgspec.Struct, frozen=True, kw_only=True):
    group: uuid.UUID
    data: OleCommandData

    @classmethod
    def std2k(cls, command_id: VSStd2KCmdID):
        return cls(group=VSStd2K, data=OleCommandData(command_id=command_id))


@enum.unique
class UnrecognizedReason(enum.Enum):
    UNKNOWN_GROUP = "unknown_group"
    UNKNOWN_COMMAND = "unknown_command"
    TARGETED_HISTORY = "targeted_history"
    BAD_VARIANT = "bad_variant"
    NO_MAPPING = "no_mapping"


class Unrecognized(msgspec.Struct, frozen=True):
    reason: UnrecognizedReason
    detail: typing.Optional[str] = None

    def __bool__(self):
        return False


DecodeResult = EditCommand | Unrecognized
EncodeResult = OleCommand | Unrecognized
