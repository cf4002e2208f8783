import argparse
import json
import logging
import pathlib
import sys
import uuid

from .cmdtypes import EditCommand, OleCommand, Unrecognized
from .hostconsts import COMMAND_GROUPS
from .keys import KeyInput, KeyModifiers, VimKey
from .settings import Settings
from .translate import decode, encode
from .variants import Variant, variant_char


def describe_key_input(key_input: KeyInput):
    return {"key": key_input.key.name, "modifiers": key_input.modifiers.names, "char": key_input.char}


def describe_variant(variant: Variant | None):
    if variant is None:
        return None
    return {"value": variant.value, "char": variant_char(variant)}


def describe(result: EditCommand | OleCommand | Unrecognized):
    match result:
        case EditCommand():
            return {
                "key_input": describe_key_input(result.key_input),
                "kind": result.kind.name,
                "group": str(result.group),
                "command_id": int(result.command_id),
            }
        case OleCommand():
            return {
                "group": str(result.group),
                "command_id": int(result.data.command_id),
                "command": _command_name(result.group, result.data.command_id),
                "variant": describe_variant(result.data.variant),
            }
        case Unrecognized():
            return {"unrecognized": result.reason.value, "detail": result.detail}


def _command_name(group: uuid.UUID, command_id: int):
    enum_type = COMMAND_GROUPS.get(group)
    if enum_type is None:
        return None
    try:
        return enum_type(command_id).name
    except ValueError:
        return None


def _parse_command_id(group: uuid.UUID, value: str):
    try:
        return int(value, 0)
    except ValueError:
        pass
    enum_type = COMMAND_GROUPS.get(group)
    if enum_type is None or value not in enum_type.__members__:
        raise argparse.ArgumentTypeError(f"{value!r} is not a command id of group {group}")
    return enum_type[value]


def _add_modifier_args(parser: argparse.ArgumentParser):
    parser.add_argument("--shift", action="store_true")
    parser.add_argument("--control", action="store_true")
    parser.add_argument("--alt", action="store_true")


def _modifiers(args):
    return KeyModifiers.from_flags(shift=args.shift, control=args.control, alt=args.alt)


def _load_settings(path: pathlib.Path | None):
    settings = Settings.default() if path is None else Settings.load(path)
    logging.basicConfig(level=settings.log_level)
    return settings


def _emit(result):
    print(json.dumps(describe(result), indent=2))
    return 1 if isinstance(result, Unrecognized) else 0


decode_parser = argparse.ArgumentParser(prog="editcommands-decode")
decode_parser.add_argument("group", help="command group GUID or alias")
decode_parser.add_argument("command_id", help="numeric command id or command name")
decode_variant_group = decode_parser.add_mutually_exclusive_group()
decode_variant_group.add_argument("--char")
decode_variant_group.add_argument("--code", type=lambda v: int(v, 0))
decode_variant_group.add_argument("--history-point", type=int)
decode_variant_group.add_argument("--empty-variant", action="store_true")
_add_modifier_args(decode_parser)
decode_parser.add_argument("--settings", type=pathlib.Path)


def decode_cli(argv=None):
    args = decode_parser.parse_args(sys.argv[1:] if argv is None else argv)
    settings = _load_settings(args.settings)
    try:
        group = settings.resolve_group(args.group)
        command_id = _parse_command_id(group, args.command_id)
    except (KeyError, argparse.ArgumentTypeError) as e:
        decode_parser.error(str(e))

    variant = None
    if args.char is not None:
        variant = Variant(value=args.char)
    elif args.code is not None:
        variant = Variant(value=args.code)
    elif args.history_point is not None:
        variant = Variant(value=args.history_point)
    elif args.empty_variant:
        variant = Variant()
    return _emit(decode(group, command_id, variant, _modifiers(args)))


encode_parser = argparse.ArgumentParser(prog="editcommands-encode")
encode_parser.add_argument("key", choices=[k.name for k in VimKey])
encode_parser.add_argument("--char")
_add_modifier_args(encode_parser)
encode_parser.add_argument("--settings", type=pathlib.Path)


def encode_cli(argv=None):
    args = encode_parser.parse_args(sys.argv[1:] if argv is None else argv)
    _load_settings(args.settings)
    key_input = KeyInput(key=VimKey[args.key], modifiers=_modifiers(args), char=args.char)
    return _emit(encode(key_input))


table_parser = argparse.ArgumentParser(prog="editcommands-table")
table_parser.add_argument("--settings", type=pathlib.Path)


def command_table():
    "Decode every enumerated command of both groups with no payload and no held modifiers."
    table = {}
    for group, enum_type in COMMAND_GROUPS.items():
        rows = {}
        for command_id in enum_type:
            result = decode(group, command_id)
            if isinstance(result, EditCommand):
                rows[command_id.name] = describe(result)
        table[str(group)] = rows
    return table


def command_table_cli(argv=None):
    args = table_parser.parse_args(sys.argv[1:] if argv is None else argv)
    _load_settings(args.settings)
    print(json.dumps(command_table(), indent=2))
    return 0
