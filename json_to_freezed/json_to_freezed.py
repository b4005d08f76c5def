import json
import logging
from pathlib import Path

import click

from .cli_utils import parse_rename
from .config import FieldMode, GeneratorConfig, OutputMode
from .errors import GenerationError
from .generator import FreezedGenerator, output_file_name
from .writer import AtomicWriter


@click.command()
@click.option("--name", "-n", default=None, type=str, help="underscore_file base name, defaults to the input file name")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--field-mode",
    "-m",
    default=None,
    type=click.Choice([mode.value for mode in FieldMode]),
    help="Modifier of the generated fields",
)
@click.option("--rename", "-r", "renames", multiple=True, help="Rename a generated class, OLD=NEW (repeatable)")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True, allow_dash=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True, allow_dash=True))
def json_to_freezed(name, config, field_mode, renames, force, verbose, path, output):
    """Generate Dart freezed models from the JSON document at PATH (- for stdin)."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    if force:
        config.output.mode = OutputMode.FORCE

    renames = [parse_rename(rename) for rename in renames]

    if name is None:
        name = config.default_file_name if path == "-" else Path(path).stem

    with click.open_file(path, encoding="utf-8") as f:
        json_text = f.read()

    try:
        result = FreezedGenerator(config).generate(json_text, name, field_mode)
        for old_name, new_name in renames:
            result = result.rename_class(old_name, new_name)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    if output == "-":
        click.echo(result.text, nl=False)
    else:
        if output is None:
            output = Path.cwd() / output_file_name(result.file_name, config.file_extension)
        _write_output(Path(output), result.text, config)
        click.echo(f"Wrote {output}", err=True)

    click.echo(f"Classes: {', '.join(result.class_names)}", err=True)


def _write_output(output: Path, content: str, config: GeneratorConfig) -> None:
    writer = AtomicWriter()
    validate = config.output.validate_before_write
    try:
        if not config.output.atomic_write:
            if output.exists() and config.output.mode is OutputMode.ERROR_IF_EXISTS:
                raise FileExistsError(f"Output file already exists: {output}. Use --force to overwrite.")
            output.write_text(content, encoding="utf-8")
        elif config.output.mode is OutputMode.FORCE:
            writer.write(output, content, validate)
        else:
            writer.write_if_not_exists(output, content, validate)
    except (FileExistsError, GenerationError) as e:
        raise click.ClickException(str(e)) from e
