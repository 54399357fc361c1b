"""Unit tests for the argument parser module in dirscaffold CLI."""

import argparse
from pathlib import Path

import pytest

from dirscaffold.cli.argparser import build_walk_options, create_parser, positive_int, validate_args


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.directory == "."
    assert args.level is None
    assert args.ignore == []
    assert not args.all
    assert not args.dirs_only
    assert not args.dirsfirst
    assert args.output is None


def test_all_options(parser):
    args = parser.parse_args(
        ["-L", "2", "-I", "*.log|dist", "-I", "build", "-a", "-d", "--dirsfirst", "-o", "t.txt", "src"]
    )
    assert args.directory == "src"
    assert args.level == 2
    assert args.ignore == ["*.log|dist", "build"]
    assert args.all
    assert args.dirs_only
    assert args.dirsfirst
    assert args.output == Path("t.txt")


@pytest.mark.parametrize("value", ["0", "-3", "two", "1.5"])
def test_invalid_level_is_usage_error(parser, value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-L", value])
    assert excinfo.value.code == 2
    assert "must be a positive integer" in capsys.readouterr().err


def test_positive_int():
    assert positive_int("3") == 3
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int("0")


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-V"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("dirscaffold ")


def test_validate_args_rejects_directory_output(parser, tmp_path):
    args = parser.parse_args(["-o", str(tmp_path)])
    with pytest.raises(ValueError) as excinfo:
        validate_args(args)
    assert "--output" in str(excinfo.value)


def test_validate_args_accepts_file_output(parser, tmp_path):
    validate_args(parser.parse_args(["-o", str(tmp_path / "out.txt")]))
    validate_args(parser.parse_args([]))


def test_build_walk_options(parser):
    options = build_walk_options(parser.parse_args(["-L", "3", "-I", "a|b", "-I", "c", "-d", "--dirsfirst"]))
    assert options.max_depth == 3
    assert options.exclude_patterns == ("a", "b", "c")
    assert options.directories_only
    assert options.dirs_first
    assert options.show_hidden
