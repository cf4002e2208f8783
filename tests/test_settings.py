import json
import uuid

import pytest

from editcommands.hostconsts import GUID_VSStandardCommandSet97, VSStd2K
from editcommands.settings import Settings


def test_default_settings():
    settings = Settings.default()
    assert settings.log_level == "WARNING"
    assert settings.resolve_group("std97") == GUID_VSStandardCommandSet97
    assert settings.resolve_group("std2k") == VSStd2K


def test_resolve_group_by_guid():
    settings = Settings.default()
    assert settings.resolve_group("{1496A755-94DE-11D0-8C3F-00C04FC2AAE2}") == VSStd2K
    with pytest.raises(KeyError):
        settings.resolve_group("nonsense")


def test_load_and_save(tmp_path):
    src = tmp_path / "settings.json"
    src.write_text(json.dumps({"log_level": "DEBUG", "command_groups": {"editor": str(VSStd2K)}}))
    settings = Settings.load(src)
    assert settings.path == src
    assert settings.log_level == "DEBUG"
    assert settings.command_groups == {"editor": VSStd2K}

    settings.command_groups["legacy"] = GUID_VSStandardCommandSet97
    settings.save()
    raw = json.loads(src.read_text())
    assert raw == {
        "log_level": "DEBUG",
        "command_groups": {"editor": str(VSStd2K), "legacy": str(GUID_VSStandardCommandSet97)},
    }
    assert Settings.load(src).resolve_group("legacy") == GUID_VSStandardCommandSet97


def test_load_fills_defaults(tmp_path):
    src = tmp_path / "settings.json"
    src.write_text("{}")
    settings = Settings.load(src)
    assert settings.command_groups == Settings.default().command_groups
    assert isinstance(settings.command_groups["std2k"], uuid.UUID)
