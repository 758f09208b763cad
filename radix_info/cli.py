#!/usr/bin/env python3
"""
radix-info CLI Interface
"""

import click
import sys
import logging

from .harvester import RadixInfoHarvester, setup_logging
from .models import DEFAULT_BASE_URL, HarvesterConfig
from .exceptions import HarvestError, RadixInfoError


@click.command()
@click.option('-b', '--base-url', default=DEFAULT_BASE_URL, show_default=True,
              help='Base URL of the Radix node API')
@click.argument('output_path', default='.', required=False, type=click.Path(file_okay=False))
def cli(base_url, output_path):
    """Harvest Radix node status into OUTPUT_PATH/radix_info.prom (default: current directory)"""

    setup_logging(logging.INFO)

    config = HarvesterConfig(base_url=base_url, output_dir=output_path)

    try:
        RadixInfoHarvester(config).run()
    except HarvestError as e:
        click.echo(f"Harvest failed at {e.stage}: {e.cause}", err=True)
        sys.exit(1)
    except RadixInfoError as e:
        click.echo(f"Harvest failed: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()
