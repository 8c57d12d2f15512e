#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from brainz.ws.api import MusicBrainzAPI
from brainz.ws.core import BrowseBy, ClientConfig, EntityKind


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List every release of an artist, page by page")
    p.add_argument("mbid", nargs="?", default="5b11f4ce-a62d-471e-81fc-a69a8278c7da")
    p.add_argument("--page-size", type=int, default=100)
    p.add_argument("--max-pages", type=int, default=3)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    # One request per second, as the service asks
    config = ClientConfig.from_env(min_request_interval=1.0)

    async with MusicBrainzAPI(config=config) as api:
        print(f"{'Date':10} | {'Country':7} | {'Status':14} | Title")
        print("-" * 65)
        async for release in api.browse_all(
            EntityKind.RELEASE,
            BrowseBy.ARTIST,
            args.mbid,
            page_size=args.page_size,
            max_pages=args.max_pages,
        ):
            date = str(release.date) if release.date else ""
            print(f"{date:10} | {release.country or '':7} | {str(release.status or ''):14} | {release.title}")


if __name__ == "__main__":
    asyncio.run(main())
