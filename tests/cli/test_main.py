"""Unit tests for the CLI main module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dirscaffold.cli.main import main, non_directory_name


@pytest.fixture
def temp_project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.rs").write_text("fn main() {}\n")
    (tmp_path / "app.log").write_text("log\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "README.md").write_text("# readme\n")
    return tmp_path


def test_main_writes_tree_to_stdout(temp_project, capfd):
    main([str(temp_project)])
    out, err = capfd.readouterr()
    assert out == f"{temp_project}\n|-- README.md\n|-- app.log\n|-- node_modules/\n`-- src/\n    `-- main.rs\n"
    assert err == ""


def test_main_with_options(temp_project, capfd):
    main(["-I", "*.log|node_modules", "-L", "1", "--dirsfirst", str(temp_project)])
    out, _ = capfd.readouterr()
    assert out == f"{temp_project}\n|-- src/\n`-- README.md\n"


def test_main_dirs_only(temp_project, capfd):
    main(["-d", str(temp_project)])
    out, _ = capfd.readouterr()
    assert out == f"{temp_project}\n|-- node_modules/\n`-- src/\n"


def test_main_writes_to_output_file(temp_project, tmp_path_factory, capfd):
    output = tmp_path_factory.mktemp("out") / "tree.txt"
    main(["-o", str(output), str(temp_project)])
    assert capfd.readouterr().out == ""
    assert output.read_text(encoding="utf-8").startswith(f"{temp_project}\n|-- README.md\n")


def test_main_missing_root(tmp_path, capfd):
    missing = tmp_path / "missing"
    with pytest.raises(SystemExit) as excinfo:
        main([str(missing)])
    assert excinfo.value.code == 1
    out, err = capfd.readouterr()
    assert out == ""
    assert err == f"Error: {missing}: No such file or directory\n"


def test_main_invalid_pattern(temp_project, capfd):
    with pytest.raises(SystemExit) as excinfo:
        main(["-I", "src/main.rs", str(temp_project)])
    assert excinfo.value.code == 1
    out, err = capfd.readouterr()
    assert out == ""
    assert err.startswith("Error: Invalid exclusion pattern 'src/main.rs'")


def test_main_file_root_prints_name(temp_project, capfd):
    main([str(temp_project / "README.md")])
    assert capfd.readouterr().out == "README.md\n"


def test_main_usage_error_exits_2(capfd):
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-flag"])
    assert excinfo.value.code == 2


def test_main_broken_pipe_is_absorbed(temp_project, capfd):
    with patch("dirscaffold.cli.main.render", side_effect=BrokenPipeError()):
        main([str(temp_project)])
    assert capfd.readouterr().err == ""


def test_main_exit_code_after_sigpipe(temp_project, capfd):
    with patch("dirscaffold.cli.main.setup_signal_handling"):
        with patch("dirscaffold.cli.main.signal_handler") as mock_handler:
            mock_handler.exit_code.return_value = 141
            with pytest.raises(SystemExit) as excinfo:
                main([str(temp_project)])
    assert excinfo.value.code == 141
    mock_handler.restore.assert_called_once()


def test_non_directory_name(temp_project):
    assert non_directory_name(temp_project / "README.md") == "README.md"
    assert non_directory_name(temp_project / "src") is None
    assert non_directory_name(temp_project / "missing") is None
    assert non_directory_name(Path(temp_project)) is None


def test_main_prints_root_path_as_given(tmp_path, monkeypatch, capfd):
    (tmp_path / "proj").mkdir()
    (tmp_path / "proj" / "a.txt").touch()
    monkeypatch.chdir(tmp_path)
    main(["./proj/"])
    assert capfd.readouterr().out == "./proj/\n`-- a.txt\n"


def test_main_default_root_is_dot(tmp_path, monkeypatch, capfd):
    (tmp_path / "a.txt").touch()
    monkeypatch.chdir(tmp_path)
    main([])
    assert capfd.readouterr().out == ".\n`-- a.txt\n"


@pytest.mark.skipif(os.name != "posix", reason="Arbitrary filename bytes require a POSIX filesystem")
def test_main_undecodable_name(tmp_path, tmp_path_factory, capfd):
    root = tmp_path / "root"
    root.mkdir()
    (root / "ok.txt").touch()
    (root / "zz.txt").touch()
    try:
        (root / os.fsdecode(b"bad\xff.txt")).touch()
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")

    output = tmp_path_factory.mktemp("out") / "tree.txt"
    main(["-o", str(output), str(root)])
    assert capfd.readouterr().err == ""
    assert output.read_bytes() == os.fsencode(str(root)) + b"\n|-- bad\xff.txt\n|-- ok.txt\n`-- zz.txt\n"
