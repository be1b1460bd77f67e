import io
from pathlib import Path

import pytest

from semv.__main__ import main


def resolve_test_files(test_name):
    input_file = test_name + ".in"
    expected_file = test_name + ".out"

    # get current dir
    current_dir = Path(__file__).parent.absolute()

    # get absolute path to inputs folder
    test_folder = current_dir / Path("in-out")

    # get input path and check if exists
    input_path = test_folder / Path(input_file)
    assert input_path.exists()

    # get expected test file real path
    expected_path = test_folder / Path(expected_file)
    assert expected_path.exists()

    return input_path, expected_path


@pytest.mark.parametrize(
    "test_name, flags",
    [
        ("c01", []),
        ("c02", ["--sort"]),
        ("c04", ["-f", "4"]),
    ],
)
# capsys will capture the stdout/stderr outputs generated during the test
def test_cli(test_name, flags, capsys):
    input_path, expected_path = resolve_test_files(test_name)

    main([*flags, str(input_path)])
    captured = capsys.readouterr()
    with open(expected_path) as f_ex:
        expect = f_ex.read()

    assert captured.out == expect
    assert captured.err == ""


@pytest.mark.parametrize("test_name", ["c03"])
def test_cli_invalid_versions(test_name, capsys):
    input_path, expected_path = resolve_test_files(test_name)

    with pytest.raises(SystemExit) as sys_error:
        main(["--format", "N", "-s", str(input_path)])
    assert sys_error.value.code == 1

    captured = capsys.readouterr()
    with open(expected_path) as f_ex:
        expect = f_ex.read()

    assert captured.out == expect
    assert captured.err == (
        "Invalid version: invalid semantic version: 'abc'\n"
        "Invalid version: invalid semantic version: '1-beta'\n"
    )


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1.2.3-rc.1\n0.1.0\n"))

    main(["-f", "2", "-s"])
    captured = capsys.readouterr()

    assert captured.out == "0.1\n1.2\n"
    assert captured.err == ""


@pytest.mark.parametrize("spec", ["X", "6", "G5"])
def test_cli_invalid_format(spec, capsys):
    with pytest.raises(SystemExit) as sys_error:
        main(["-f", spec])
    assert sys_error.value.code == 2

    captured = capsys.readouterr()
    assert "is not a valid format for Version" in captured.err
