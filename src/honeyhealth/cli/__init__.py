"""
honey-health CLI - check telemetry field names against semantic conventions.

Commands:
    honeyhealth check    Classify individual field names
    honeyhealth report   Dataset health report from a column export
    honeyhealth index    Summarise a convention model
"""

import click

from honeyhealth.config import get_config
from honeyhealth.log import configure_logging

from .check import check
from .index import index_cmd
from .report import report


@click.group()
@click.version_option(package_name="honey-health")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default=None,
    help="Logging level (default from HONEYHEALTH_LOG_LEVEL).",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"]),
    default=None,
    help="Log format (default from HONEYHEALTH_LOG_FORMAT).",
)
def main(log_level, log_format):
    """Honey Health - how well do your datasets follow the semantic conventions?

    Provide OpenTelemetry semantic convention model directories to find
    mismatches and suggestions.
    """
    config = get_config()
    configure_logging(
        level=log_level or config.log_level,
        fmt=log_format or config.log_format,
        service_name=config.service_name,
    )


main.add_command(check)
main.add_command(report)
main.add_command(index_cmd, name="index")


if __name__ == "__main__":
    main()
