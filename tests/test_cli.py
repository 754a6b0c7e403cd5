"""Tests for the CLI interface."""
import json
import subprocess
import sys
from pathlib import Path

CLI = [sys.executable, "-m", "voxel_shapes"]
ROOT = Path(__file__).parent.parent


def run_cli(*args: str, stdin: str | None = None) -> dict:
    """Run CLI command and return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT), input=stdin,
    )
    assert result.returncode == 0, f"CLI failed: {result.stderr}\n{result.stdout}"
    return json.loads(result.stdout)


def run_cli_expect_fail(*args: str) -> dict:
    """Run CLI command expecting failure, return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode != 0
    return json.loads(result.stdout)


class TestShapes:
    def test_sphere(self):
        data = run_cli("sphere", "1", "0")
        assert data["ok"] is True
        assert data["count"] == 4
        assert data["points"][0] == [-1.0, 0.0, 0.0]

    def test_sphere_invalid_geometry(self):
        data = run_cli_expect_fail("sphere", "2", "3")
        assert data["ok"] is False
        assert data["kind"] == "InvalidGeometry"

    def test_circle(self):
        data = run_cli("circle", "1", "1", "2", "--axis", "z")
        assert data["points"] == [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [2.0, 0.0, 0.0]]

    def test_circle_invalid_axis(self):
        data = run_cli_expect_fail("circle", "2", "2", "--axis", "w")
        assert data["kind"] == "InvalidAxis"

    def test_ellipse(self):
        data = run_cli("ellipse", "1", "2", "0", "--axis", "y")
        assert data["count"] == 3

    def test_torus(self):
        data = run_cli("torus", "2", "1", "-a", "x")
        assert data["ok"] is True
        assert data["count"] > 0

    def test_line(self):
        data = run_cli("line", "--begin", "0", "0", "0", "--end", "3", "0", "0")
        assert data["points"][0] == [0.0, 0.0, 0.0]
        assert 3 <= data["count"] <= 5

    def test_line_degenerate(self):
        data = run_cli_expect_fail("line", "--begin", "1", "1", "1", "--end", "1", "1", "1")
        assert data["kind"] == "DegenerateSegment"


class TestBatch:
    def test_batch(self):
        requests = json.dumps([
            {"op": "sphere", "params": [1, 0]},
            {"op": "circle", "params": [1, 1, 0], "axis": "y"},
        ])
        data = run_cli("batch", requests)
        assert data["requests_applied"] == 2
        assert [r["count"] for r in data["results"]] == [4, 1]

    def test_batch_stdin(self):
        data = run_cli("batch", "--stdin", stdin=json.dumps({"op": "sphere", "params": [1, 0]}))
        assert data["requests_applied"] == 1

    def test_batch_stops_on_failure(self):
        requests = json.dumps([
            {"op": "sphere", "params": [1, 0]},
            {"op": "sphere", "params": [1, "big"]},
            {"op": "sphere", "params": [2, 0]},
        ])
        data = run_cli_expect_fail("batch", requests)
        assert data["applied"] == 1
        assert data["kind"] == "InvalidParameterType"
        assert len(data["results"]) == 1

    def test_batch_malformed_transform(self):
        request = json.dumps({
            "op": "comp",
            "transform": {"name": "permute"},
            "points": [[1, 2, 3]],
        })
        data = run_cli_expect_fail("batch", request)
        assert data["ok"] is False
        assert data["kind"] == "InvalidOperands"
        assert data["applied"] == 0

    def test_batch_params_not_a_list(self):
        data = run_cli_expect_fail("batch", json.dumps({"op": "sphere", "params": 5}))
        assert "Invalid request" in data["error"]

    def test_batch_invalid_json(self):
        data = run_cli_expect_fail("batch", "{not json")
        assert "Invalid JSON" in data["error"]

    def test_batch_invalid_request(self):
        data = run_cli_expect_fail("batch", json.dumps([{"params": [1]}]))
        assert "Invalid request" in data["error"]


class TestRender:
    def test_render(self, tmp_path):
        out = tmp_path / "sphere.png"
        data = run_cli("render", json.dumps({"op": "sphere", "params": [2, 0]}), "-o", str(out))
        assert data["ok"] is True
        assert out.exists()


def test_version():
    result = subprocess.run([*CLI, "version"], capture_output=True, text=True, cwd=str(ROOT))
    assert result.returncode == 0
    assert result.stdout.startswith("voxel-shapes v")
