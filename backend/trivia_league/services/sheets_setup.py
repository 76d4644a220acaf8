from trivia_league.layout import HEADER_RANGES


def initialize_headers(store):
    """Write row 1 of every tab. Safe to re-run; it only overwrites the header row."""
    for a1_range, headers in HEADER_RANGES.values():
        store.update_range(a1_range, [headers])
    return list(HEADER_RANGES)
