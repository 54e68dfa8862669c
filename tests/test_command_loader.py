"""Tests for directory-based command discovery."""

from discord_router.command_loader import (
    capitalize_first,
    load_commands,
    register_builtin_commands,
)
from discord_router.commands import CommandRouter

_COMMAND_TEMPLATE = (
    "from discord_router.commands import Command\n"
    "\n"
    "class {cls}(Command):\n"
    "{extra}"
    "    async def execute(self, client, token, channel_id, args):\n"
    "        pass\n"
)


def _write_command(directory, stem, cls=None, extra=""):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{stem}.py"
    path.write_text(_COMMAND_TEMPLATE.format(cls=cls or capitalize_first(stem), extra=extra))
    return path


def test_capitalize_first():
    assert capitalize_first("ping") == "Ping"
    assert capitalize_first("roll_dice") == "Roll_dice"
    assert capitalize_first("") == ""


def test_loads_commands_with_prefix(tmp_path):
    _write_command(tmp_path, "ping")
    _write_command(tmp_path, "roll")
    router = CommandRouter()

    triggers = load_commands(router, tmp_path)

    assert triggers == ["!ping", "!roll"]
    assert type(router.get("!ping")).__name__ == "Ping"
    assert type(router.get("!roll")).__name__ == "Roll"


def test_nested_directories_keep_file_trigger(tmp_path):
    _write_command(tmp_path / "moderation", "kick")
    router = CommandRouter()

    assert load_commands(router, tmp_path) == ["!kick"]


def test_custom_prefix(tmp_path):
    _write_command(tmp_path, "ping")
    router = CommandRouter()

    assert load_commands(router, tmp_path, prefix="?") == ["?ping"]


def test_explicit_trigger_attribute(tmp_path):
    _write_command(tmp_path, "hello", extra='    trigger = "!hi"\n')
    router = CommandRouter()

    assert load_commands(router, tmp_path) == ["!hi"]
    assert "!hello" not in router


def test_falls_back_to_first_command_subclass(tmp_path):
    _write_command(tmp_path, "weather", cls="Forecast")
    router = CommandRouter()

    assert load_commands(router, tmp_path) == ["!weather"]
    assert type(router.get("!weather")).__name__ == "Forecast"


def test_broken_files_are_skipped(tmp_path):
    _write_command(tmp_path, "good")
    (tmp_path / "syntax.py").write_text("def broken(:\n")
    (tmp_path / "empty.py").write_text("VALUE = 1\n")
    (tmp_path / "__init__.py").write_text("")
    (tmp_path / "_helpers.py").write_text("raise RuntimeError('never imported')\n")
    router = CommandRouter()

    assert load_commands(router, tmp_path) == ["!good"]
    assert len(router) == 1


def test_missing_directory_registers_nothing(tmp_path):
    router = CommandRouter()
    assert load_commands(router, tmp_path / "nope") == []
    assert len(router) == 0


def test_builtin_commands():
    router = CommandRouter()
    assert register_builtin_commands(router) == ["!echo", "!ping", "!react"]
