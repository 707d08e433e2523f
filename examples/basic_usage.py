"""Basic usage example for pylifxcloud library."""

import asyncio

from pylifxcloud import LifxClient


async def main() -> None:
    """List every light on the account."""
    async with LifxClient(token="your-access-token") as client:
        lights = await client.list_lights("all")
        print(f"Found {len(lights)} light(s)")

        for light in lights:
            print(f"\nLight: {light.label}")
            print(f"  ID: {light.id}")
            print(f"  Product: {light.product.name}")
            print(f"  Group: {light.group.name}")
            print(f"  Location: {light.location.name}")
            print(f"  Connected: {light.connected}")
            print(f"  Power: {light.power}")
            print(f"  Brightness: {light.brightness:.0%}")
            print(f"  Color: hue={light.color.hue} saturation={light.color.saturation} kelvin={light.color.kelvin}")
            if light.product.capabilities.has_variable_color_temp:
                caps = light.product.capabilities
                print(f"  Kelvin range: {caps.min_kelvin:.0f}-{caps.max_kelvin:.0f}")


if __name__ == "__main__":
    asyncio.run(main())
