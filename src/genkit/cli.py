import click
import logging
import traceback
import yaml
from typing import Dict, List, Optional, Tuple

from .config import Config, ConfigModel
from .images import DefaultImageCatalog, DefaultImageLookup
from .registry import generator_registry
from .utils import setup_logger, parse_module_levels, deep_merge
from .exceptions import (
    GenkitError,
    ConfigurationError,
    DefinitionError,
    ResolutionError,
)
from . import constants
from . import __version__


def parse_properties(pairs: Tuple[str, ...]) -> Dict[str, str]:
    """Parse repeated `-D key=value` options"""
    properties = {}
    for pair in pairs:
        if '=' not in pair:
            raise click.BadParameter(f"expected key=value, got '{pair}'", param_hint="-D")
        key, value = pair.split('=', 1)
        properties[key.strip()] = value
    return properties


def handle_errors(func):
    """Decorator to handle common exceptions"""
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigurationError as e:
            _report("Configuration error", e)
        except DefinitionError as e:
            _report("Definition error", e)
        except ResolutionError as e:
            _report("Resolution error", e)
        except GenkitError as e:
            _report("An unexpected application error occurred", e)
    return wrapper


def _report(kind: str, error: Exception):
    logging.error(f"{kind}: {error}")
    ctx = click.get_current_context()
    if ctx.obj.get('debug'):
        traceback.print_exc()
    raise click.Abort()


@handle_errors
def do_resolve(config_file: str, properties: Dict[str, str], mode: Optional[str], strategy: Optional[str],
               base_image: Optional[str], native: Optional[bool], generator: Optional[str],
               primary: bool, output: Optional[str]):
    """Execute resolve command"""
    config = Config(config_file)
    name = generator or config.generator

    overrides: Dict = {"project": {"properties": properties}}
    if mode:
        overrides["mode"] = mode
    if strategy:
        overrides["strategy"] = strategy
    if base_image:
        overrides.setdefault("generators", {}).setdefault(name, {})[constants.OPT_FROM] = base_image
    if native is not None:
        overrides.setdefault("generators", {}).setdefault(name, {})[constants.OPT_NATIVE_IMAGE] = native
    merged = deep_merge(config.model.model_dump(by_alias=True), overrides)
    config.model = ConfigModel.model_validate(merged)

    generator_cls = generator_registry.generator(name)
    lookup = DefaultImageLookup(config.default_images)
    images = generator_cls(config.context(), lookup).customize(config.images, primary=primary)

    rendered = yaml.safe_dump(
        [img.model_dump(by_alias=True, exclude_none=True, mode="json") for img in images],
        sort_keys=False,
    )
    if output:
        config.fs.write_text(output, rendered)
        logging.info(f"Wrote {len(images)} image configuration(s) to '{output}'")
    else:
        click.echo(rendered, nl=False)


@handle_errors
def do_defaults(config_file: Optional[str]):
    """Execute defaults command"""
    overrides = Config(config_file).default_images if config_file else None
    lookup = DefaultImageLookup(overrides)
    catalog = DefaultImageCatalog(lookup)
    rows: List[Tuple[str, str, str]] = []
    for packaging, target, _ in catalog.entries():
        rows.append((packaging.value, target.value, catalog.lookup(packaging, target)))
    width = max(len(f"{p}/{t}") for p, t, _ in rows)
    for packaging, target, image in rows:
        click.echo(f"{f'{packaging}/{target}':<{width}}  {image}")


@click.group()
@click.version_option(version=__version__, prog_name="genkit")
@click.option('--debug', is_flag=True, help='Enable debug logging.')
@click.option('--log-levels', '-l', help='Per-module log levels, e.g. "probe=DEBUG,images.*=WARNING".')
@click.option('--log-file', '-f', type=click.Path(dir_okay=False), help='Also write logs to this file.')
@click.pass_context
def cli(ctx, debug: bool, log_levels: Optional[str], log_file: Optional[str]):
    """genkit - resolve the base image of generated application images."""
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    setup_logger(debug=debug, module_levels=parse_module_levels(log_levels) or None, log_file=log_file)


@cli.command()
@click.argument('config_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--property', '-D', 'properties', multiple=True, metavar='KEY=VALUE',
              help='Project property, may be repeated.')
@click.option('--mode', '-m', type=click.Choice([m.value for m in constants.RuntimeMode]),
              help='Runtime mode, overrides the descriptor.')
@click.option('--strategy', '-s', type=click.Choice([s.value for s in constants.BuildStrategy]),
              help='Build strategy, overrides the descriptor.')
@click.option('--from', 'base_image', help='Pin the base image for the generator.')
@click.option('--native/--no-native', default=None, help='Force native or runtime packaging.')
@click.option('--generator', '-g', help='Generator name, overrides the descriptor.')
@click.option('--secondary', is_flag=True, help='Mark the generated image as not primary.')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write YAML here instead of stdout.')
def resolve(config_file, properties, mode, strategy, base_image, native, generator, secondary, output):
    """Resolve the base image and print the resulting image configurations."""
    do_resolve(config_file, parse_properties(properties), mode, strategy, base_image, native,
               generator, not secondary, output)


@cli.command()
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Descriptor whose default_images block overrides the packaged defaults.')
def defaults(config_file):
    """Show the default base image for every packaging and runtime mode."""
    do_defaults(config_file)
