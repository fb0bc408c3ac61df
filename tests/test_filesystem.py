import os

import pytest

from nmode.filesystem import (
    FileSystemError,
    check_valid_path,
    check_valid_path_from_alternatives,
    create_dir,
    does_dir_exist,
    does_file_exist,
    executable_exists,
    first_dir_containing_dir,
    first_dir_containing_file,
    first_existing_dir,
    first_existing_file,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "sub").mkdir()
    (tmp_path / "b" / "cfg.xml").write_text("<x/>")
    (tmp_path / "plain.txt").write_text("data")
    return tmp_path


def test_dir_and_file_checks(tree):
    assert does_dir_exist(tree / "a") is True
    assert does_dir_exist(tree / "plain.txt") is False
    assert does_file_exist(tree / "plain.txt") is True
    assert does_file_exist(tree / "a") is False
    assert does_file_exist(str(tree / "missing")) is False


def test_first_dir_containing_dir(tree):
    dirs = [str(tree / "missing"), str(tree / "a"), str(tree / "b")]
    assert first_dir_containing_dir(dirs, "sub") == str(tree / "b")
    assert first_dir_containing_dir(dirs, "nothing") is None


def test_first_dir_containing_file(tree):
    dirs = [str(tree / "a"), str(tree / "b")]
    assert first_dir_containing_file(dirs, "cfg.xml") == str(tree / "b")
    assert first_dir_containing_file(dirs, "sub") is None


def test_absolute_name_gives_empty_string(tree):
    assert first_dir_containing_dir([], str(tree / "b" / "sub")) == ""
    assert first_dir_containing_file([], str(tree / "plain.txt")) == ""
    assert first_dir_containing_file([str(tree)], str(tree / "nope")) is None


def test_first_existing(tree):
    assert first_existing_dir([str(tree / "x"), str(tree / "b")]) == str(tree / "b")
    assert first_existing_dir([str(tree / "plain.txt")]) is None
    files = [str(tree / "a"), str(tree / "plain.txt")]
    assert first_existing_file(files) == str(tree / "plain.txt")
    assert first_existing_file([]) is None


def test_check_valid_path_relative(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert check_valid_path("a", True, True) == str(tree / "a")
    assert check_valid_path("plain.txt", False, True) == str(tree / "plain.txt")


def test_check_valid_path_missing(tree):
    with pytest.raises(FileSystemError):
        check_valid_path(str(tree / "gone"), True, True)
    assert check_valid_path(str(tree / "gone"), True, False) == str(tree / "gone")


def test_check_valid_path_wrong_kind(tree):
    with pytest.raises(FileSystemError):
        check_valid_path(str(tree / "a"), False, True)


def test_alternatives_not_found(tree):
    with pytest.raises(FileSystemError, match="could not be found"):
        check_valid_path_from_alternatives("cfg.xml", None, [str(tree)], True)
    assert check_valid_path_from_alternatives("cfg.xml", None, [], False) is None


def test_alternatives_found(tree):
    result = check_valid_path_from_alternatives("cfg.xml", str(tree / "b"), [], True)
    assert result == str(tree / "b" / "cfg.xml")


def test_alternatives_missing_in_dir(tree):
    with pytest.raises(FileSystemError):
        check_valid_path_from_alternatives("cfg.xml", str(tree / "a"), [], True)
    result = check_valid_path_from_alternatives("cfg.xml", str(tree / "a"), [], False)
    assert result == str(tree / "a" / "cfg.xml")


def test_create_dir(tree):
    target = tree / "new"
    create_dir(str(target))
    assert target.is_dir()
    with pytest.raises(FileSystemError, match="already exists"):
        create_dir(str(target))


def test_executable_exists(tree, monkeypatch):
    tool = tree / "a" / "tool"
    tool.write_text("#!/bin/sh\n")
    tool.chmod(0o755)
    monkeypatch.setenv("PATH", os.pathsep.join([str(tree / "b"), str(tree / "a")]))
    assert executable_exists("tool") is True
    assert executable_exists("absent-tool") is False


def test_executable_empty_path(monkeypatch):
    monkeypatch.setenv("PATH", "")
    with pytest.raises(FileSystemError, match="PATH"):
        executable_exists("anything")