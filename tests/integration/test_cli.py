"""Integration tests for the command-line interface.

These run the CLI in a subprocess and cover:
- Presets from a config file in the scanned directory
- Quick filters without a config file
- Every output format
- Exit codes for usage, configuration and lookup errors
- Output closed early by the reader
"""

import json
import subprocess
import sys

import pytest

# Skip all tests in this module unless --run-cli-tests is given
# This prevents these slow tests from running during normal test runs
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)

CONFIG = """\
version: "1.0"
defaults:
  exclude: ["**/build/**"]
presets:
  python:
    description: Python sources
    extensions: [py]
  docs:
    patterns: ["docs/**", "**/*.md"]
    type: file
    output: ascii
"""


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "project"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "docs").mkdir()
    (base_dir / "node_modules").mkdir()
    (base_dir / "build").mkdir()

    (base_dir / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "docs" / "guide.txt").write_text("Guide\n")
    (base_dir / "README.md").write_text("# Test Project\n")
    (base_dir / "build" / "generated.py").write_text("x = 1\n")
    (base_dir / "node_modules" / "module.py").write_text("y = 2\n")
    (base_dir / "ftree.yaml").write_text(CONFIG)
    return base_dir


def run_cli(args, cwd=None, timeout=10):
    """Run the ftree CLI with the given arguments.

    Args:
        args: List of CLI arguments
        cwd: Working directory
        timeout: Seconds before the run is aborted

    Returns:
        The completed process.
    """
    cmd = [sys.executable, "-m", "ftree.cli.main"] + args
    return subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, cwd=cwd, timeout=timeout)


def test_preset_from_working_directory(temp_project):
    result = run_cli(["-f", "paths", "python"], cwd=temp_project)

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["src/main.py", "src/utils/helpers.py"]


def test_preset_output_format(temp_project):
    result = run_cli(["docs", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["+-- [D] docs", "|   \\-- guide.txt", "\\-- README.md"]


def test_json_output(temp_project):
    result = run_cli(["-f", "json", "python", str(temp_project)])

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert [child["name"] for child in data["children"]] == ["src"]


def test_quick_filter(temp_project, tmp_path):
    result = run_cli(["--ext", "py", "--exclude", "src/utils/**", "-f", "paths", str(temp_project)], cwd=tmp_path)

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["build/generated.py", "src/main.py"]


def test_list(temp_project):
    result = run_cli(["--list", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["python  Python sources", "docs"]


def test_output_file(temp_project, tmp_path):
    output = tmp_path / "tree.md"
    result = run_cli(["--report", "-o", str(output), "python", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout == ""
    assert output.read_text(encoding="utf-8").startswith("## 🌲 Filter: `python` (2 files, 2 dirs)")


def test_verbose_logging(temp_project):
    result = run_cli(["-v", "python", str(temp_project)])

    assert result.returncode == 0
    assert "Running preset 'python'" in result.stderr


def test_version():
    result = run_cli(["--version"])

    assert result.returncode == 0
    assert result.stdout.startswith("ftree ")


@pytest.mark.parametrize(
    "args,code,message",
    [
        ([], 2, "a preset name or at least one quick filter option is required"),
        (["-f", "yaml", "python"], 2, "invalid choice"),
        (["missing"], 3, 'Preset "missing" not found. Available: python, docs'),
    ],
)
def test_exit_codes(temp_project, args, code, message):
    result = run_cli(args, cwd=temp_project)

    assert result.returncode == code
    assert message in result.stderr


def test_invalid_config_exit_code(temp_project):
    (temp_project / "ftree.yaml").write_text("presets:\n  a: {}\n")
    result = run_cli(["a", str(temp_project)])

    assert result.returncode == 1
    assert "Invalid config" in result.stderr
    assert "missing version" in result.stderr


def test_nonexistent_directory(tmp_path):
    result = run_cli(["--ext", "py", str(tmp_path / "missing")])

    assert result.returncode == 1
    assert "is not a valid directory" in result.stderr


@pytest.mark.skipif(sys.platform == "win32", reason="Requires a POSIX shell")
def test_output_closed_early(tmp_path):
    for i in range(2000):
        (tmp_path / f"file{i:04d}.txt").write_text("")

    result = subprocess.run(
        f"{sys.executable} -m ftree.cli.main --ext txt -f paths {str(tmp_path)} | head -n 5",
        shell=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        timeout=10,
    )

    assert result.stdout.splitlines() == [f"file{i:04d}.txt" for i in range(5)]
    assert "Traceback" not in result.stderr
