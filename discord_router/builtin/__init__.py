"""Commands shipped with discord_router, registered by register_builtin_commands()."""
