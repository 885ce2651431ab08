#!/usr/bin/env python3
"""
Examples of programmatic usage of hetznerkit.

Reads the API tokens from the environment, a .env file or
~/.hetznerkit/config.yaml (HCLOUD_TOKEN / HETZNER_DNS_TOKEN), lists a few
resources and, when EXAMPLE_CREATE_SERVER=true, creates a server and waits
for its create action.

Usage:
    python examples.py
"""

import asyncio
import os

from hetznerkit import Hetzner, HetznerAPIError, HetznerDns, setup_logging
from hetznerkit.domain.errors import ActionError, ActionTimeoutError
from hetznerkit.infrastructure.config.settings import get_config, get_dns_token, load_configuration
from hetznerkit.infrastructure.monitoring.logger_setup import level_from_name


async def example_list_servers(hetzner: Hetzner):
    """Iterates over every running server, page by page."""
    print("\n===== Example: Running Servers =====")
    count = 0
    async for server in hetzner.servers.iterate({"status": "running", "sort": "name:asc"}):
        count += 1
        print(f"{server['id']:>10}  {server['name']}  {server['public_net']['ipv4']['ip']}")
    print(f"{count} running server(s)")


async def example_locations(hetzner: Hetzner):
    print("\n===== Example: Locations =====")
    for location in await hetzner.locations.list_all():
        print(f"{location['name']:>6}  {location['city']}, {location['country']}")


async def example_create_server(hetzner: Hetzner, name: str = "hetznerkit-example"):
    """Creates a server and waits for its create action to finish."""
    print("\n===== Example: Create Server =====")
    created = await hetzner.servers.create({
        "name": name,
        "server_type": "cx22",
        "image": "ubuntu-24.04",
        "location": "fsn1",
    })
    print(f"Server {created['server']['id']} created, waiting for action {created['action']['id']}...")
    try:
        action = await hetzner.actions.poll(created["action"]["id"], interval_ms=1000, timeout_ms=120_000)
        print(f"Action finished: {action['status']}")
    except ActionTimeoutError as e:
        print(f"Gave up waiting: {e}")
    except ActionError as e:
        print(f"Server creation failed: {e}")


async def example_dns_zones(dns: HetznerDns):
    print("\n===== Example: DNS Zones =====")
    async for zone in dns.zones.iterate():
        records = await dns.records.list_all(zone["id"])
        print(f"{zone['name']}: {len(records)} record(s)")


async def main():
    """Run the examples."""
    load_configuration()
    setup_logging(log_level=level_from_name(get_config("logging.level", "warning")))

    try:
        async with Hetzner() as hetzner:
            await example_list_servers(hetzner)
            await example_locations(hetzner)
            if get_config("example.create_server", False) is True:
                await example_create_server(hetzner)
            else:
                print("\nSkipping server creation (set EXAMPLE_CREATE_SERVER=true to enable)")

        if get_dns_token():
            async with HetznerDns() as dns:
                await example_dns_zones(dns)
        else:
            print("\nSkipping DNS example (no DNS token configured)")
    except ValueError as e:
        print(f"Configuration error: {e}")
    except HetznerAPIError as e:
        print(f"API error: {e} (code={e.code}, status={e.status_code})")


if __name__ == "__main__":
    if not os.environ.get("HCLOUD_TOKEN"):
        print("Hint: export HCLOUD_TOKEN or add it to a .env file before running the examples.")
    asyncio.run(main())
