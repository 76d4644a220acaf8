import logging
from typing import Sequence

from trivia_league.layout import STANDINGS_SHEET
from trivia_league.services.store import TabularStore
from .records import TeamStanding

logger = logging.getLogger(__name__)

DEFAULT_CLEAR_ROWS = 1000


def persist_standings(
    store: TabularStore,
    standings: Sequence[TeamStanding],
    sheet: str = STANDINGS_SHEET,
    clear_rows: int = DEFAULT_CLEAR_ROWS,
) -> int:
    """Replace the cached standings body with ``standings``.

    Clears rows 2..clear_rows (header kept), then writes one row per standing
    in rank order. This is a total replace in two separate store calls, not a
    transaction: if the write fails after the clear, the tab is left empty and
    the error propagates. Returns the number of rows written.
    """
    store.clear_range(f'{sheet}!A2:I{clear_rows}')
    if not standings:
        logger.info(f"[standings-cache] cleared {sheet}, nothing to write")
        return 0

    rows = [s.to_row() for s in standings]
    store.update_range(f'{sheet}!A2:I{len(rows) + 1}', rows)
    logger.info(f"[standings-cache] wrote {len(rows)} rows to {sheet}")
    return len(rows)
