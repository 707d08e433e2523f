"""Light control example for pylifxcloud library."""

import asyncio

from pylifxcloud import Breathe, Color, LifxAPIError, LifxClient, State, StateDelta, States, StateWithSelector


async def main() -> None:
    """Demonstrate state changes, deltas, batches and effects."""
    async with LifxClient(token="your-access-token") as client:
        selector = "label:Desk"

        print("Turning on, warm white at 60%...")
        response = await client.set_state(
            selector, State(power="on", color=Color("white", kelvin=2700), brightness=0.6, duration=1.0)
        )
        if response is not None:
            for result in response.results:
                print(f"  {result.label}: {result.status}")

        await asyncio.sleep(2)

        print("Dimming by 20%...")
        await client.state_delta(selector, StateDelta(brightness=-0.2))

        print("Setting two groups at once...")
        await client.set_states(
            States(
                states=(
                    StateWithSelector("group:Kitchen", State(color="blue")),
                    StateWithSelector("group:Office", State(color="orange")),
                ),
                defaults=State(power="on", duration=2.0),
            )
        )

        print("Breathing red three times...")
        try:
            await client.breathe(selector, Breathe(color="red", period=2.0, cycles=3))
        except LifxAPIError as err:
            print(f"  Effect failed: {err}")

        await asyncio.sleep(6)

        print("Toggling...")
        await client.toggle(selector, duration=1.0)

        # Fire and forget: no result, errors are discarded
        await client.fast_power_off("all")


if __name__ == "__main__":
    asyncio.run(main())
