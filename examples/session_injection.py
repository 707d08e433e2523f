"""Example showing session injection for Home Assistant integration."""

import asyncio

from aiohttp import ClientSession

from pylifxcloud import LifxClient, LifxConfig


async def main() -> None:
    """Demonstrate session injection pattern for HA integration."""
    # The application owns the session; the client never closes it
    async with ClientSession() as session:
        print("Using application-managed aiohttp session")

        config = LifxConfig(token="your-access-token", timeout=10)
        client = LifxClient(config=config, session=session)

        lights = await client.list_lights()
        print(f"Found {len(lights)} light(s) using injected session")

        for light in lights:
            print(f"  - {light.label} ({light.id})")

        # Session remains open for other requests
        print("\nSession still available for other requests")


if __name__ == "__main__":
    asyncio.run(main())
