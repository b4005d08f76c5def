"""
CLI utilities for command line reconstruction and option parsing.
"""

from pathlib import Path

import click


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return "json_to_freezed"

    if not cli_args:
        return "json_to_freezed"

    cmd_parts = ["json_to_freezed"]

    arguments = []  # For positional arguments
    options = []  # For optional arguments

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if not value:
            continue

        if isinstance(param, click.Option) and param.is_flag:
            options.append(param.opts[0])
            continue

        values = value if isinstance(value, (list, tuple)) else [value]
        formatted_values = []
        for v in values:
            # Show file paths as file names only
            if isinstance(v, (str, Path)):
                path_obj = Path(str(v))
                formatted_values.append(path_obj.name if path_obj.exists() else str(v))
            else:
                formatted_values.append(str(v))

        if isinstance(param, click.Argument):
            arguments.extend(formatted_values)

        elif isinstance(param, click.Option):
            # Skip if it's the default value
            if hasattr(param, "default") and value == param.default:
                continue

            flag = param.opts[0] if param.opts else f"--{param_name}"
            for formatted_value in formatted_values:
                options.extend([flag, formatted_value])

    cmd_parts.extend(arguments)
    cmd_parts.extend(options)

    return " ".join(cmd_parts)


def parse_rename(value: str) -> tuple[str, str]:
    """Split an ``OLD=NEW`` rename option.

    Raises:
        click.BadParameter: If the value is not of the form OLD=NEW
    """
    old_name, sep, new_name = value.partition("=")
    old_name, new_name = old_name.strip(), new_name.strip()
    if not sep or not old_name or not new_name:
        raise click.BadParameter(f"expected OLD=NEW, got {value!r}", param_hint="--rename")
    return old_name, new_name
