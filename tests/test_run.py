"""
Command-line entry point tests.
"""

import json

import pytest

from hrmetrics.run import main, validate_all


class TestValidateAll:
    def test_valid_exports(self, data_dir):
        results = validate_all(data_dir)

        assert [r["domain"] for r in results] == ["workforce", "attendance", "recruitment"]
        assert all(r["valid"] for r in results)
        assert results[0]["row_count"] == 3

    def test_missing_exports(self, tmp_path):
        results = validate_all(tmp_path)

        assert not any(r["valid"] for r in results)


class TestMain:
    def test_validate_exits_nonzero_on_missing_data(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["--data-dir", str(tmp_path), "--validate"])

        assert excinfo.value.code == 1

    def test_unknown_environment(self, data_dir):
        with pytest.raises(SystemExit) as excinfo:
            main(["--data-dir", str(data_dir), "--env", "qa"])

        assert excinfo.value.code == 2

    def test_json_export(self, data_dir, tmp_path):
        output_dir = tmp_path / "out"
        main([
            "--data-dir", str(data_dir),
            "--now", "2024-06-30T09:00:00",
            "--export", "json",
            "--output-dir", str(output_dir),
        ])

        written = output_dir / "HR-Dashboard-Report-2024-06-30.json"
        payload = json.loads(written.read_text())
        assert payload["title"] == "HR Dashboard Analytics Report"
        assert len(payload["pages"]) == 3

    def test_dashboard_shows_pipeline_stages(self, data_dir, capsys):
        main(["--data-dir", str(data_dir), "--now", "2024-06-30T09:00:00"])
        out = capsys.readouterr().out

        assert "Recruitment Pipeline (1 open)" in out
        for stage in ("Applied", "Screening", "Interview", "Offer", "Hired"):
            assert stage in out
