import json
import logging

import click

from .config import GeneratorConfig
from .errors import GraphQLToJsonSchemaError
from .generator import Generator


@click.command()
@click.option("--schema", "schemas", multiple=True, required=True, help="Schema file, glob, URL or inline SDL; repeatable, and may be followed by more sources")
@click.option("--json", "json_path", required=True, type=click.Path(dir_okay=False, resolve_path=True))
@click.option("--rootType", "root_type", default=None, type=str, help="Root object type (default: Query)")
@click.option("--typings", "typings_path", default=None, type=click.Path(dir_okay=False, resolve_path=True))
@click.option("--markdown", "--md", "markdown_dir", default=None, type=click.Path(file_okay=False, resolve_path=True))
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("extra_schemas", nargs=-1, type=str)
def graphql_to_json_schema(schemas, extra_schemas, json_path, root_type, typings_path, markdown_dir, config, verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flag overrides config file
    if root_type is not None:
        config.root_type = root_type

    # Values following the first --schema value, e.g. a shell-expanded glob
    schemas = schemas + extra_schemas

    try:
        generator = Generator.from_sources(schemas, config)
        generator.write(json_path, typings_path=typings_path, markdown_dir=markdown_dir)
    except GraphQLToJsonSchemaError as e:
        raise click.ClickException(str(e)) from e
