"""Unit tests for the CLI main module."""

from unittest.mock import patch

import pytest

from ftree.cli.main import format_preset_list, main
from ftree.config import Configuration

CONFIG = """\
version: "1.0"
defaults:
  output: paths
presets:
  big:
    description: Files, biggest first
    type: file
    sortBy: size-desc
  text:
    extensions: [txt]
    output: markdown
aliases:
  t:
    description: Shorthand for text files
    extensions: [txt]
"""


@pytest.fixture
def project(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"x" * 500)
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_bytes(b"x" * 2000)
    (tmp_path / "notes.md").write_bytes(b"x" * 10)
    (tmp_path / "ftree.yaml").write_text(CONFIG, encoding="utf-8")
    return tmp_path


def run_main(argv):
    """Run main and return its exit code (0 when it returns normally)."""
    try:
        main(argv)
    except SystemExit as e:
        return e.code
    return 0


def test_run_preset_from_directory_config(project, capsys):
    assert run_main(["big", str(project)]) == 0
    assert capsys.readouterr().out == "sub/b.txt\na.txt\nftree.yaml\nnotes.md\n"


def test_run_preset_markdown(project, capsys):
    assert run_main(["--show-size", "text", str(project)]) == 0
    assert capsys.readouterr().out == "├── 📁 sub\n│   └── 📄 b.txt (2.0 KB)\n└── 📄 a.txt (500 B)\n"


def test_run_alias(project, capsys):
    assert run_main(["-f", "paths", "t", str(project)]) == 0
    assert capsys.readouterr().out == "a.txt\nsub/b.txt\n"


def test_reads_sys_argv(project, capsys):
    with patch("sys.argv", ["ftree", "-f", "paths", "text", str(project)]):
        assert run_main(None) == 0
    assert capsys.readouterr().out == "a.txt\nsub/b.txt\n"


def test_explicit_config_file(project, tmp_path_factory, capsys):
    other = tmp_path_factory.mktemp("elsewhere") / "custom.yaml"
    other.write_text('version: "1"\npresets:\n  md:\n    extensions: [md]\n    output: paths\n')

    assert run_main(["-c", str(other), "md", str(project)]) == 0
    assert capsys.readouterr().out == "notes.md\n"


def test_depth_and_sort_override_preset(project, capsys):
    assert run_main(["--depth", "1", "--sort", "size-asc", "big", str(project)]) == 0
    assert capsys.readouterr().out == "notes.md\nftree.yaml\na.txt\n"


def test_sort_without_preset_lists_current_directory(project, monkeypatch, capsys):
    monkeypatch.chdir(project)

    assert run_main(["--depth", "1", "--sort", "name", "-f", "paths"]) == 0
    assert capsys.readouterr().out == "a.txt\nftree.yaml\nnotes.md\nsub\n"


def test_quick_filter(project, capsys):
    assert run_main(["--ext", "txt", "-f", "paths", str(project)]) == 0
    assert capsys.readouterr().out == "a.txt\nsub/b.txt\n"


def test_quick_filter_needs_no_config(tmp_path, capsys):
    (tmp_path / "big.bin").write_bytes(b"x" * 4096)
    (tmp_path / "small.bin").write_bytes(b"x" * 10)

    assert run_main(["--min-size", "1KB", "-f", "paths", str(tmp_path)]) == 0
    assert capsys.readouterr().out == "big.bin\n"


def test_report(project, capsys):
    assert run_main(["--report", "big", str(project)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("## 🌲 Filter: `big` (4 files, 1 dirs)\n\n```\nsub/b.txt\n")
    assert out.endswith("```\n\n> Generated by ftree\n")


def test_output_file(project, tmp_path_factory, capsys):
    output = tmp_path_factory.mktemp("out") / "tree.txt"

    assert run_main(["-o", str(output), "-f", "paths", "text", str(project)]) == 0
    assert output.read_text(encoding="utf-8") == "a.txt\nsub/b.txt\n"
    assert capsys.readouterr().out == ""


def test_empty_result_prints_nothing(project, capsys):
    assert run_main(["--ext", "rs", "-f", "paths", str(project)]) == 0
    assert capsys.readouterr().out == ""


def test_list_presets(project, capsys):
    assert run_main(["-l", str(project)]) == 0
    assert capsys.readouterr().out == "big  Files, biggest first\ntext\nt  Shorthand for text files\n"


def test_format_preset_list():
    config = Configuration.from_mapping({"version": "1", "presets": {"a": {"description": "first"}, "b": {}}})
    assert format_preset_list(config) == "a  first\nb"


def test_preset_not_found(project, capsys):
    assert run_main(["huge", str(project)]) == 3
    assert capsys.readouterr().err == 'Error: Preset "huge" not found. Available: big, text, t\n'


def test_missing_config(tmp_path, capsys):
    assert run_main(["big", str(tmp_path)]) == 1
    assert "Error: Config file not found" in capsys.readouterr().err


def test_invalid_config(project, capsys):
    (project / "ftree.yaml").write_text("version: 1\npresets: {}\n")

    assert run_main(["big", str(project)]) == 1
    assert "Error: Invalid config" in capsys.readouterr().err


def test_invalid_directory(tmp_path, capsys):
    assert run_main(["--ext", "md", str(tmp_path / "missing")]) == 1
    assert "is not a valid directory" in capsys.readouterr().err


def test_usage_error(capsys):
    assert run_main([]) == 2
    assert "Error: a preset name or at least one quick filter option is required" in capsys.readouterr().err


def test_argparse_error(capsys):
    assert run_main(["-f", "yaml", "p"]) == 2
    assert "invalid choice" in capsys.readouterr().err


def test_broken_pipe(project):
    with (
        patch("ftree.cli.main.write_output", side_effect=BrokenPipeError),
        patch("sys.stdout"),
        patch("os.open"),
        patch("os.dup2"),
    ):
        assert run_main(["big", str(project)]) == 141


def test_keyboard_interrupt(project):
    with patch("ftree.cli.main.FilterTree", side_effect=KeyboardInterrupt):
        assert run_main(["big", str(project)]) == 130
