from pathlib import Path

import pytest

from xenodon.arg_parse import (
    ArgParseError,
    Command,
    Flag,
    Parameter,
    Positional,
    float_range_opt,
    int_range_opt,
    parse,
    parse_float,
    path_opt,
    string_opt,
)
from xenodon.errors import Error


def make_command():
    return Command(
        flags=[Flag("dag", "--dag"), Flag("quiet", "--quiet", "q")],
        parameters=[
            Parameter("chan", int_range_opt(0, 255), "channel difference", "--chan-diff"),
            Parameter("shader", string_opt(), "shader", "--shader", "s"),
        ],
        positional=[
            Positional("src", path_opt(), "source tiff path"),
            Positional("dst", path_opt(), "destination svo path"),
        ],
    )


def test_positionals_and_defaults():
    values = parse(["a.tiff", "b.svo"], make_command())
    assert values == {
        "dag": False,
        "quiet": False,
        "src": Path("a.tiff"),
        "dst": Path("b.svo"),
    }


def test_flags_and_parameters():
    values = parse(["-q", "a", "--chan-diff", "12", "-s", "x", "--dag", "b"], make_command())
    assert values["quiet"] is True
    assert values["dag"] is True
    assert values["chan"] == 12
    assert values["shader"] == "x"
    assert values["dst"] == Path("b")


def test_duplicate_flag_with_short():
    with pytest.raises(ArgParseError) as exc:
        parse(["--quiet", "-q", "a", "b"], make_command())
    assert str(exc.value) == "Duplicate specification of flag --quiet/-q"


def test_duplicate_parameter_without_short():
    with pytest.raises(ArgParseError) as exc:
        parse(["--chan-diff", "1", "--chan-diff", "2", "a", "b"], make_command())
    assert str(exc.value) == "Duplicate specification of parameter --chan-diff"


def test_parameter_missing_argument():
    with pytest.raises(ArgParseError) as exc:
        parse(["a", "b", "-s"], make_command())
    assert str(exc.value) == "Parameter -s expects argument <shader>"


def test_invalid_parameter_value():
    with pytest.raises(ArgParseError) as exc:
        parse(["--chan-diff", "300", "a", "b"], make_command())
    assert str(exc.value) == "Invalid value for <channel difference> of parameter --chan-diff"


def test_unrecognized_option():
    with pytest.raises(ArgParseError) as exc:
        parse(["--nope", "a", "b"], make_command())
    assert str(exc.value) == "Unrecognized option --nope"


def test_unexpected_positional():
    with pytest.raises(ArgParseError) as exc:
        parse(["a", "b", "c"], make_command())
    assert str(exc.value) == "Unexpected positional argument 'c'"


def test_missing_positional():
    with pytest.raises(ArgParseError) as exc:
        parse(["a"], make_command())
    assert str(exc.value) == "Missing required positional argument <destination svo path>"


def test_invalid_positional():
    cmd = Command(positional=[Positional("n", int_range_opt(), "count")])
    with pytest.raises(ArgParseError) as exc:
        parse(["x1"], cmd)
    assert str(exc.value) == "Invalid value for positional argument <count>"


def test_arg_parse_error_is_error():
    with pytest.raises(Error):
        parse([], make_command())


@pytest.mark.parametrize("text", ["1.5", "-0.25", "10", ".5", "3."])
def test_parse_float_valid(text):
    assert parse_float(text) == float(text)


@pytest.mark.parametrize("text", ["1e5", "+1", "1-2", "-", ".", "1.2.3", " 1", "inf", "1_0"])
def test_parse_float_invalid(text):
    with pytest.raises(ValueError):
        parse_float(text)


def test_int_range_opt_bounds():
    convert = int_range_opt(0, 255)
    assert convert("0") == 0
    assert convert("255") == 255
    for bad in ["-1", "256", "+3", " 3", "3.0", ""]:
        with pytest.raises(ValueError):
            convert(bad)


def test_int_range_opt_default_is_32_bit():
    convert = int_range_opt()
    assert convert("-5") == -5
    with pytest.raises(ValueError):
        convert(str(2**31))


def test_float_range_opt_minimum():
    convert = float_range_opt(0.0)
    assert convert("0") == 0.0
    assert convert("2.5") == 2.5
    with pytest.raises(ValueError):
        convert("-0.1")


def test_string_and_path_opt_round_trip():
    assert string_opt()("hello world") == "hello world"
    assert path_opt()("dir/file.svo") == Path("dir") / "file.svo"