"""
Tests for CLI: forecast command, cost model flag, output handling, error cases.
"""

import json
import subprocess
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
REQUEST = ROOT / "examples" / "checkout_review.yaml"


def _run_cli(args: list[str]) -> tuple[int, str, str]:
    """
    Run CLI command and return (exit_code, stdout, stderr).

    Args:
        args: CLI arguments (without 'quotacast' command)
    """
    cmd = [sys.executable, "-m", "quotacast.cli"] + args
    result = subprocess.run(
        cmd, capture_output=True, text=True, encoding="utf-8", cwd=str(ROOT)
    )
    return result.returncode, result.stdout, result.stderr


def test_cli_forecast_basic():
    exit_code, stdout, _ = _run_cli(["forecast", str(REQUEST)])
    assert exit_code == 0
    data = json.loads(stdout)
    assert data["schema_version"] == "1.0"
    assert data["multi_scenario"]["recommended_approach"] == "Balanced"


def test_cli_forecast_output_file():
    with tempfile.TemporaryDirectory() as tmp:
        out = Path(tmp) / "report.json"
        exit_code, stdout, _ = _run_cli(["forecast", str(REQUEST), "--output", str(out)])
        assert exit_code == 0
        assert stdout == ""
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["roi"]["best_option"] == "Zero-based"


def test_cli_forecast_cost_model_flag():
    exit_code, stdout, _ = _run_cli(
        ["forecast", str(REQUEST), "--cost-model", str(ROOT / "examples" / "cost_models.yaml")]
    )
    assert exit_code == 0
    assert json.loads(stdout)["cost_model"]["name"] == "team"


def test_cli_missing_path():
    exit_code, _, stderr = _run_cli(["forecast", "/nonexistent/request.yaml"])
    assert exit_code == 1
    assert "does not exist" in stderr


def test_cli_invalid_request():
    with tempfile.TemporaryDirectory() as tmp:
        bad = Path(tmp) / "bad.yaml"
        bad.write_text("parameters: {}\n", encoding="utf-8")
        exit_code, _, stderr = _run_cli(["forecast", str(bad)])
        assert exit_code == 1
        assert "workflow" in stderr


def test_cli_strict_warnings():
    with tempfile.TemporaryDirectory() as tmp:
        req = Path(tmp) / "complex.yaml"
        req.write_text(
            "workflow:\n  id: big\n  estimated_complexity: 11\n  steps:\n"
            "    - {id: s1, type: vibe}\n",
            encoding="utf-8",
        )
        exit_code, _, stderr = _run_cli(["forecast", str(req)])
        assert exit_code == 0
        assert "Warning: naive forecast has low confidence" in stderr

        exit_code, _, _ = _run_cli(["forecast", str(req), "--strict"])
        assert exit_code == 1


def test_cli_no_command():
    exit_code, stdout, _ = _run_cli([])
    assert exit_code == 1
    assert "forecast" in stdout
