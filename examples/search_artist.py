#!/usr/bin/env python3
from __future__ import annotations

import argparse

from brainz.ws.api import SyncMusicBrainzAPI
from brainz.ws.core import EntityKind
from brainz.ws.search import SearchQueryBuilder


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search artists by name (blocking client)")
    p.add_argument("name", nargs="?", default="Nirvana")
    p.add_argument("--country", default=None)
    p.add_argument("limit", nargs="?", type=int, default=10)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    query = SearchQueryBuilder(EntityKind.ARTIST).where("artist", args.name)
    if args.country:
        query.and_().where("country", args.country)

    result = SyncMusicBrainzAPI().search(EntityKind.ARTIST, query, limit=args.limit)
    print(f"{result.count} matches for {query.build()!r}")
    print("-" * 65)
    for artist in result.entities:
        print(f"{artist.score or 0:>3} | {artist.id} | {artist.name} ({artist.disambiguation or '-'})")


if __name__ == "__main__":
    main()
