"""Engine and report configuration."""

import dataclasses
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import yaml

type ConfigDict = dict[str, str | int | float | bool | list[str]]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricThresholds:
    high_performer_rating: float = 4.5
    pending_review_rating: float = 4.0
    low_attendance_rate: float = 90.0


@dataclass(frozen=True)
class BaselineOffsets:
    """Offsets used to derive the comparison period when none is supplied."""

    total_staff: int = -2
    average_salary: int = -1500
    average_attendance: int = 2
    average_performance: float = -0.1


@dataclass(frozen=True)
class MetricSettings:
    thresholds: MetricThresholds = field(default_factory=MetricThresholds)
    baseline_offsets: BaselineOffsets = field(default_factory=BaselineOffsets)
    recent_hire_days: int = 30
    attendance_window_days: int = 7
    top_performer_count: int = 5


@dataclass(frozen=True)
class ReportConfig:
    title: str
    subtitle: str
    report_prefix: str
    report_type: str
    classification: str
    data_sources: list[str]
    attendance_target: int
    review_interval_days: int
    output_dir: Path
    export_format: str
    metrics: MetricSettings = field(default_factory=MetricSettings)


_DATA_SOURCES = ["HRIS", "Attendance System", "Performance Management"]


def load_report_config(env: str = "production") -> ReportConfig:
    match env:
        case "production":
            output_dir = Path("/data/hr/reports")
            classification = "Internal Use Only"
        case "staging":
            output_dir = Path("/data/hr/reports-staging")
            classification = "Internal Use Only - Staging"
        case "development":
            output_dir = Path("output/reports")
            classification = "Internal Use Only - Development"
        case other:
            raise ValueError(f"Unknown environment: {other}")

    return ReportConfig(
        title="HR Dashboard",
        subtitle="Comprehensive Analytics Report",
        report_prefix="HR-Dashboard-Report",
        report_type="Executive Summary",
        classification=classification,
        data_sources=list(_DATA_SOURCES),
        attendance_target=95,
        review_interval_days=30,
        output_dir=output_dir,
        export_format="pdf",
    )


def get_env_config() -> ConfigDict:
    """Read report config overrides from pyproject.toml, if present."""
    pyproject = Path(__file__).parent.parent / "pyproject.toml"
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("hrmetrics", {})


def load_config_file(path: str | Path) -> ConfigDict:
    """Load an override file (YAML or TOML, chosen by suffix)."""
    path = Path(path)
    match path.suffix:
        case ".yaml" | ".yml":
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        case ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        case ext:
            raise ValueError(f"Unsupported config format: {ext}")
    return data.get("hrmetrics", data)


def apply_overrides(config: ReportConfig, overrides: ConfigDict) -> ReportConfig:
    """Return a copy of ``config`` with known keys replaced.

    A nested ``metrics`` table overrides MetricSettings scalars and a
    ``thresholds`` table inside it overrides MetricThresholds.
    """
    known = {f.name for f in dataclasses.fields(ReportConfig)}
    changes = {}
    for key, value in overrides.items():
        match key:
            case "output_dir":
                changes[key] = Path(value)
            case "metrics":
                changes[key] = _override_metrics(config.metrics, value)
            case k if k in known:
                changes[k] = value
            case unknown:
                logger.debug("Ignoring unknown config key: %r", unknown)
    return dataclasses.replace(config, **changes)


def _override_metrics(settings: MetricSettings, overrides: dict) -> MetricSettings:
    changes = {}
    for key, value in overrides.items():
        match key:
            case "thresholds":
                changes[key] = dataclasses.replace(settings.thresholds, **value)
            case "baseline_offsets":
                changes[key] = dataclasses.replace(settings.baseline_offsets, **value)
            case _:
                changes[key] = value
    return dataclasses.replace(settings, **changes)
