"""
Configuration tests.
"""

from pathlib import Path

import pytest

from hrmetrics.config import apply_overrides, load_config_file, load_report_config


class TestReportConfig:
    @pytest.mark.parametrize("env", ["production", "staging", "development"])
    def test_known_environments(self, env):
        config = load_report_config(env)

        assert config.title == "HR Dashboard"
        assert config.report_prefix == "HR-Dashboard-Report"
        assert config.metrics.thresholds.high_performer_rating == 4.5

    def test_development_writes_locally(self):
        assert load_report_config("development").output_dir == Path("output/reports")

    def test_unknown_environment(self):
        with pytest.raises(ValueError, match="Unknown environment"):
            load_report_config("qa")


class TestOverrides:
    def test_scalar_and_path_overrides(self):
        config = apply_overrides(
            load_report_config("development"),
            {"attendance_target": 97, "output_dir": "/tmp/reports", "unknown_key": 1},
        )

        assert config.attendance_target == 97
        assert config.output_dir == Path("/tmp/reports")

    def test_nested_metric_overrides(self):
        config = apply_overrides(
            load_report_config("development"),
            {"metrics": {"recent_hire_days": 14, "thresholds": {"low_attendance_rate": 85.0}}},
        )

        assert config.metrics.recent_hire_days == 14
        assert config.metrics.thresholds.low_attendance_rate == 85.0
        assert config.metrics.thresholds.high_performer_rating == 4.5

    def test_base_config_is_unchanged(self):
        base = load_report_config("development")
        apply_overrides(base, {"attendance_target": 50})

        assert base.attendance_target == 95


class TestConfigFiles:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "report.yaml"
        path.write_text("hrmetrics:\n  attendance_target: 98\n  metrics:\n    top_performer_count: 3\n")

        overrides = load_config_file(path)
        config = apply_overrides(load_report_config("development"), overrides)

        assert config.attendance_target == 98
        assert config.metrics.top_performer_count == 3

    def test_toml_file(self, tmp_path):
        path = tmp_path / "report.toml"
        path.write_text('classification = "Restricted"\n')

        assert load_config_file(path) == {"classification": "Restricted"}

    def test_unsupported_suffix(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported config format"):
            load_config_file(tmp_path / "report.ini")
