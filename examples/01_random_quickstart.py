from __future__ import annotations

import itertools

from _infra import banner, enable_debug_logs

from haskellite import random as R


def main() -> None:
    banner("01_random_quickstart: dice, loot tables, weather, playlists")
    enable_debug_logs()

    dice = R.random_int(max=6, offset=1, seed=7)
    print("rolls:", list(itertools.islice(dice, 10)))

    loot = R.Weighted({"common": 70, "rare": 25, "legendary": 5}, seed=7)
    print("loot:", list(itertools.islice(loot, 10)))

    # Weather only changes by one step per day
    weather = ["sunny", "cloudy", "rain", "storm"]
    drift = R.random_int(max=3, offset=-1, seed=7)
    forecast = R.random_markov(
        lambda i: min(max((i or 0) + drift.next(), 0), len(weather) - 1),
        initial=0,
    ).map(weather.__getitem__)
    print("forecast:", list(itertools.islice(forecast, 7)))

    # Never play one of the last three tracks again
    tracks = R.random_list_item(["intro", "verse", "bridge", "chorus", "outro"], seed=7)
    playlist = R.Precached(R.random_non_repeating(3, tracks), depth=4)
    print("up next:", playlist.peek())
    print("playlist:", [playlist.next() for _ in range(8)])


if __name__ == "__main__":
    main()
