"""Performance ranking of staff."""

from collections.abc import Sequence

import pandas as pd

from hrmetrics.domains.workforce.models import StaffRecord


def rank_top_performers(
    records: Sequence[StaffRecord],
    staff: pd.DataFrame,
    limit: int = 5,
) -> list[StaffRecord]:
    """Return the ``limit`` highest-rated staff, best first.

    ``staff`` must be the frame built from ``records`` (same row order).
    Equal ratings keep their roster order.
    """
    ranked = staff.sort_values("performance_rating", ascending=False, kind="stable")
    return [records[i] for i in ranked.index[:limit]]
