"""Command discovery from a directory of Python files.

Each ``<name>.py`` file below the commands directory contributes one
command, registered as ``<prefix><name>``. The command class is the one
named after the file with its first letter upper-cased (``ping.py`` ->
``Ping``); failing that, the first Command subclass defined in the
module. Subdirectories are walked recursively and only organize files;
they do not change the trigger.
"""

import importlib
import importlib.util
import inspect
import sys
from pathlib import Path
from types import ModuleType
from typing import List, Optional, Type

import structlog

from .commands.base import Command, CommandRouter
from .exceptions import CommandLoadError

logger = structlog.get_logger("discord_router.loader")

BUILTIN_DIR = Path(__file__).parent / "builtin"
BUILTIN_PACKAGE = f"{__package__}.builtin"

# Namespace for modules loaded straight from files outside any package
_EXTERNAL_NAMESPACE = "discord_router_commands"


def capitalize_first(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def _module_name(commands_dir: Path, path: Path, package: Optional[str]) -> str:
    parts = path.relative_to(commands_dir).with_suffix("").parts
    return ".".join((package or _EXTERNAL_NAMESPACE,) + parts)


def _import(module_name: str, path: Path, package: Optional[str]) -> ModuleType:
    if package is not None:
        return importlib.import_module(module_name)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise CommandLoadError("Cannot build import spec", path=str(path))
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


def find_command_class(module: ModuleType, stem: str) -> Optional[Type[Command]]:
    """Pick the command class a module contributes.

    Prefers the class named after the file; otherwise the first concrete
    Command subclass defined in the module itself (not imported into it).
    """
    named = getattr(module, capitalize_first(stem), None)
    if isinstance(named, type) and issubclass(named, Command):
        return named
    for attr in module.__dict__.values():
        if (
            isinstance(attr, type)
            and issubclass(attr, Command)
            and attr is not Command
            and attr.__module__ == module.__name__
            and not inspect.isabstract(attr)
        ):
            return attr
    return None


def load_commands(
    router: CommandRouter,
    commands_dir: Path,
    *,
    prefix: str = "!",
    package: Optional[str] = None,
) -> List[str]:
    """Import every command file below commands_dir and register it.

    Files that fail to import or hold no command are logged and skipped;
    the remaining files still load.

    Args:
        router: Router to register commands on.
        commands_dir: Directory to scan recursively.
        prefix: Prepended to the file name to form the trigger.
        package: Dotted package name of commands_dir when it is an
            importable package; files are then imported normally.

    Returns:
        Sorted list of triggers that were registered.
    """
    commands_dir = Path(commands_dir)
    if not commands_dir.is_dir():
        logger.info("command_loader_no_dir", path=str(commands_dir))
        return []

    registered: List[str] = []
    for path in sorted(commands_dir.rglob("*.py")):
        if path.name == "__init__.py" or path.name.startswith("_"):
            continue
        stem = path.stem
        try:
            module = _import(_module_name(commands_dir, path, package), path, package)
            cls = find_command_class(module, stem)
            if cls is None:
                raise CommandLoadError("No Command class found", path=str(path))
            trigger = cls.trigger or f"{prefix}{stem}"
            router.register_command(trigger, cls())
        except Exception as e:
            logger.error(
                "command_load_failed",
                path=str(path),
                error=str(e),
                error_type=type(e).__name__,
            )
            continue
        registered.append(trigger)
        logger.debug("command_loaded", trigger=trigger, command=cls.__name__)

    registered.sort()
    logger.info(
        "command_loader_complete",
        path=str(commands_dir),
        commands=len(registered),
    )
    return registered


def register_builtin_commands(router: CommandRouter, *, prefix: str = "!") -> List[str]:
    """Register the commands shipped in discord_router/builtin/."""
    return load_commands(router, BUILTIN_DIR, prefix=prefix, package=BUILTIN_PACKAGE)
