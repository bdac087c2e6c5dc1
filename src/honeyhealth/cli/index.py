"""
CLI command for ``honeyhealth index``: summarise a convention model.

Usage::

    honeyhealth index -m model/
    honeyhealth index -m model/ -m extra/ --duplicates --format json
"""

import json as _json

import click

from honeyhealth.cli.common import build_index, model_option


@click.command("index")
@model_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--duplicates", is_flag=True, help="List names declared more than once.")
def index_cmd(models, output_format, duplicates):
    """Load the convention model and summarise what it declares."""
    index = build_index(models)
    declared = [
        attribute
        for table in (index.attribute_map, index.templates)
        for attribute in table.values()
        if attribute is not None
    ]
    deprecated = sum(1 for attribute in declared if attribute.is_deprecated)
    enumerated = sum(1 for attribute in declared if attribute.is_complex)

    if output_format == "json":
        payload = {
            "documents": [str(p) for p in index.sources],
            "attributes": len(index.attribute_map),
            "templates": len(index.templates),
            "prefixes": len(index.prefixes),
            "deprecated": deprecated,
            "enumerated": enumerated,
            "duplicates": [
                {
                    "name": d.name,
                    "first_source": d.first_source,
                    "second_source": d.second_source,
                    "template": d.template,
                }
                for d in index.duplicates
            ],
        }
        click.echo(_json.dumps(payload, indent=2))
        return

    click.echo(f"Documents:  {len(index.sources)}")
    click.echo(f"Attributes: {len(index.attribute_map)}")
    click.echo(f"Templates:  {len(index.templates)}")
    click.echo(f"Prefixes:   {len(index.prefixes)}")
    click.echo(f"Deprecated: {deprecated}")
    click.echo(f"Enumerated: {enumerated}")
    click.echo(f"Duplicates: {len(index.duplicates)}")
    if duplicates:
        for d in index.duplicates:
            click.echo(f"  {d.name}: {d.first_source} -> {d.second_source}")
