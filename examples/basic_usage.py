#!/usr/bin/env python3
"""
Basic usage example for radix-info
"""

import logging

from radix_info import HarvesterConfig, RadixInfoHarvester, RadixInfoError, setup_logging


def main():
    setup_logging(logging.DEBUG)

    config = HarvesterConfig(base_url="http://localhost:3333", output_dir="/tmp")
    harvester = RadixInfoHarvester(config)

    # Collect without writing to inspect the values
    try:
        registry = harvester.collect()
    except RadixInfoError as e:
        print(f"ERROR Harvest failed: {e}")
        return
    finally:
        harvester.client.close()

    for name, value in sorted(registry.as_dict().items()):
        print(f"{name} {value}")

    # Full run: collect again and write /tmp/radix_info.prom
    path = RadixInfoHarvester(config).run()
    print(f"SUCCESS Wrote {path}")


if __name__ == "__main__":
    main()
