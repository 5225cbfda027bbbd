import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .pipeline import (
    CodeGeneratorConfig,
    OutputMode,
    PipelineGenerator,
    StaleOutputError,
    WireModelError,
    check_all,
    load_manifest,
    load_schema,
    write_all,
)

logger = logging.getLogger(__name__)


def _load_config(path):
    if path is None:
        return CodeGeneratorConfig()
    with open(path, encoding="utf-8") as f:
        return CodeGeneratorConfig.from_dict(json.load(f))


@click.group()
@click.option("--verbose", "-v", count=True, help="-v for progress, -vv for debug output")
def cli(verbose):
    """Generate versioned wire models from example JSON responses."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option("--package", "-p", required=True, type=str, help="Dotted package of the generated modules")
@click.option("--name", "-n", default=None, type=str, help="Type name of the root object (default: schema file stem)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--api-version", default=None, type=int, help="API major version the models belong to")
@click.option("--object-path", default=None, type=str, help="'/'-separated path of the root object in the document")
@click.option("--force", is_flag=True, default=False, help="Overwrite generated files that differ")
@click.option("--check", is_flag=True, default=False, help="Fail if files on disk differ from a fresh generation")
@click.argument("schema", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output_dir", type=click.Path(file_okay=False, resolve_path=True))
def generate(package, name, config, api_version, object_path, force, check, schema, output_dir):
    """Generate the wire models of one example document."""
    config = _load_config(config)
    if force:
        config.output.mode = OutputMode.FORCE

    if name is None:
        name = Path(schema).stem

    try:
        codegen = PipelineGenerator(
            name,
            load_schema(schema),
            config,
            package=package,
            source_name=Path(schema).name,
            api_version=api_version,
            object_path=object_path,
            command_line=reconstruct_command_line(generate),
        )
        if check:
            codegen.check(output_dir)
            click.echo("Generated models are up to date")
            return
        written = codegen.write(output_dir)
    except StaleOutputError as e:
        raise click.ClickException(f"{e}. Run without --check to regenerate.") from e
    except (WireModelError, json.JSONDecodeError) as e:
        raise click.ClickException(f"{Path(schema).name}: {e}") from e

    for path in written:
        click.echo(f"Wrote {path}")


@cli.command("generate-all")
@click.option("--jobs", "-j", default=1, type=click.IntRange(min=1), help="Runs generated concurrently")
@click.option("--force", is_flag=True, default=False, help="Overwrite generated files that differ")
@click.option("--check", is_flag=True, default=False, help="Fail if files on disk differ from a fresh generation")
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def generate_all(jobs, force, check, manifest):
    """Generate every model listed in a manifest file."""
    try:
        parsed = load_manifest(manifest)
        if force:
            parsed.config.output.mode = OutputMode.FORCE
        if check:
            check_all(parsed, jobs)
            click.echo("Generated models are up to date")
            return
        written = write_all(parsed, jobs)
    except StaleOutputError as e:
        raise click.ClickException(f"{e}. Run without --check to regenerate.") from e
    except (WireModelError, json.JSONDecodeError) as e:
        raise click.ClickException(f"{Path(manifest).name}: {e}") from e

    for path in written:
        click.echo(f"Wrote {path}")
    logger.info("%d file(s) changed", len(written))


@cli.command("lint-adapters")
def lint_adapters():
    """Check that every version adapter covers its domain type and wire model."""
    from .adapters import AdapterLintError, lint_all

    try:
        mappings = lint_all()
    except AdapterLintError as e:
        raise click.ClickException(str(e)) from e

    for mapping in mappings:
        click.echo(f"{mapping.name} v{mapping.api_version}: ok")


if __name__ == "__main__":
    cli()
