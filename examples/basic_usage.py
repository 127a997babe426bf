"""Basic usage examples for the F1 Grid loader."""

import asyncio

from f1grid import AsyncDirectoryLoader, DirectoryLoader, LoadFailure, filter_drivers, flag_url


def main() -> None:
    with DirectoryLoader() as loader:
        print("=== Loading drivers (session 9472) ===")
        result = loader.load()
        if isinstance(result, LoadFailure):
            print(f"  Load failed ({result.kind.value}): {result.message}")
            return

        for d in loader.directory:
            print(f"  #{d.driver_number} {d.full_name} - {d.team_name} [{flag_url(d.country_code)}]")

        print("\n=== Search: 'ferrari' ===")
        for d in filter_drivers(loader.directory, "ferrari"):
            print(f"  {d.name_acronym} {d.broadcast_name}")


async def main_async() -> None:
    async with AsyncDirectoryLoader() as loader:
        # Both calls share a single request
        first, second = await asyncio.gather(loader.load(), loader.refresh())
        print(f"\n=== Async: {len(loader.directory)} drivers, shared={first is second} ===")


if __name__ == "__main__":
    main()
    asyncio.run(main_async())
