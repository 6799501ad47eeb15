"""Salary distribution across fixed compensation buckets."""

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SalaryBucket:
    label: str
    floor: float
    ceiling: float

    def contains(self, salary: float) -> bool:
        return self.floor <= salary < self.ceiling


@dataclass(frozen=True)
class BucketCount:
    bucket: SalaryBucket
    count: int

    @property
    def label(self) -> str:
        return self.bucket.label


# Half-open [floor, ceiling) intervals; a boundary salary belongs to the higher bucket
SALARY_BUCKETS: list[SalaryBucket] = [
    SalaryBucket("<50K", 0, 50_000),
    SalaryBucket("50-70K", 50_000, 70_000),
    SalaryBucket("70-90K", 70_000, 90_000),
    SalaryBucket(">90K", 90_000, np.inf),
]


def salary_distribution(staff: pd.DataFrame) -> list[BucketCount]:
    """Count staff per salary bucket. Every bucket is reported, even when empty."""
    labels = [b.label for b in SALARY_BUCKETS]
    bins = [b.floor for b in SALARY_BUCKETS] + [SALARY_BUCKETS[-1].ceiling]
    binned = pd.cut(staff["salary"], bins=bins, right=False, labels=labels)
    counts = binned.value_counts(sort=False).reindex(labels, fill_value=0)

    distribution = [BucketCount(bucket, int(counts[bucket.label])) for bucket in SALARY_BUCKETS]
    logger.info("Salary distribution: %s", {d.label: d.count for d in distribution})
    return distribution


def salary_range(staff: pd.DataFrame) -> tuple[int, int] | None:
    """Lowest and highest salary on the roster, None when the roster is empty."""
    if staff.empty:
        return None
    return int(staff["salary"].min()), int(staff["salary"].max())
