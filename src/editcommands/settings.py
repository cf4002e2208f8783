import dataclasses
import json
import pathlib
import typing
import uuid

import cattrs
from cattrs.gen import make_dict_structure_fn, make_dict_unstructure_fn, override

from .hostconsts import GUID_VSStandardCommandSet97, VSStd2K

COMMAND_GROUP_ALIASES = {
    "std97": GUID_VSStandardCommandSet97,
    "std2k": VSStd2K,
}


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(uuid.UUID, str)
settings_converter.register_structure_hook(uuid.UUID, lambda v, _: uuid.UUID(v))


@dataclasses.dataclass(kw_only=True)
class Settings:
    log_level: str = "WARNING"
    command_groups: dict[str, uuid.UUID] = dataclasses.field(default_factory=lambda: dict(COMMAND_GROUP_ALIASES))
    path: typing.Optional[pathlib.Path] = dataclasses.field(default=None, repr=False)

    def resolve_group(self, name: str) -> uuid.UUID:
        "Look up a command group by alias, falling back to parsing it as a GUID."
        if name in self.command_groups:
            return self.command_groups[name]
        try:
            return uuid.UUID(name)
        except ValueError:
            raise KeyError(name) from None

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self.path
        raw = settings_converter.unstructure(self)
        with dest.open("w") as f:
            json.dump(raw, f, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as f:
            raw = json.load(f)
        settings = settings_converter.structure(raw, cls)
        settings.path = src
        return settings

    @classmethod
    def default(cls):
        return cls()


settings_converter.register_structure_hook(
    Settings, make_dict_structure_fn(Settings, settings_converter, path=override(omit=True))
)
settings_converter.register_unstructure_hook(
    Settings, make_dict_unstructure_fn(Settings, settings_converter, path=override(omit=True))
)
