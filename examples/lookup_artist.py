#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from brainz.ws.api import MusicBrainzAPI
from brainz.ws.core import EntityKind, Relationship, Subquery, set_user_agent


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Look up one MusicBrainz artist by MBID")
    p.add_argument("mbid", nargs="?", default="5b11f4ce-a62d-471e-81fc-a69a8278c7da")
    p.add_argument("--user-agent", default="brainz-ws-examples/0.1.0 ( you@example.com )")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    set_user_agent(args.user_agent)

    async with MusicBrainzAPI() as api:
        artist = await api.lookup(
            EntityKind.ARTIST,
            args.mbid,
            includes=[Subquery.ALIASES, Subquery.TAGS, Relationship.URL],
        )

    span = artist.life_span
    print("=" * 65)
    print(f"Name       : {artist.name}")
    print(f"Sort name  : {artist.sort_name}")
    print(f"Type       : {artist.type}")
    print(f"Country    : {artist.country}")
    print(f"Active     : {span.begin if span else '?'} - {span.end if span and span.end else ''}")
    print(f"Aliases    : {len(artist.aliases or [])}")
    print("=" * 65)
    for relation in artist.relations or []:
        if relation.url is not None:
            print(f"{relation.type:25} | {relation.url.resource}")


if __name__ == "__main__":
    asyncio.run(main())
