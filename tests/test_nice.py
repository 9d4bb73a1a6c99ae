import pytest

from winix.nice import (
    NiceError,
    NiceOptions,
    WindowsPriority,
    build_command_line,
    execute,
    format_priority_name,
    increment_to_windows_priority,
    parse_arguments,
    validate_options,
    windows_priority_to_class,
)


def test_parse_direct_increment():
    options = parse_arguments(["-10", "calc.exe"])
    assert options.increment == -10
    assert options.explicit_increment is None
    assert options.command == "calc.exe"
    assert options.arguments == []


def test_parse_explicit_increment_with_arguments():
    options = parse_arguments(["-n", "15", "ping", "example.com", "-t"])
    assert options.explicit_increment == 15
    assert options.increment is None
    assert options.command == "ping"
    assert options.arguments == ["example.com", "-t"]


def test_parse_plain_command():
    options = parse_arguments(["notepad.exe", "file.txt"])
    assert options == NiceOptions(command="notepad.exe", arguments=["file.txt"])


def test_parse_non_numeric_dash_is_command_without_arguments():
    options = parse_arguments(["-foo", "bar"])
    assert options.command == "-foo"
    assert options.arguments == []


def test_parse_missing_n_value():
    with pytest.raises(NiceError, match="Option -n requires an increment value"):
        parse_arguments(["-n"])


def test_parse_bad_n_value():
    with pytest.raises(NiceError, match="Invalid increment value: abc"):
        parse_arguments(["-n", "abc", "cmd"])


@pytest.mark.parametrize("args", [["-n", "25", "cmd"], ["-25", "cmd"], ["-n", "-21", "cmd"]])
def test_parse_out_of_range(args):
    with pytest.raises(NiceError, match="Invalid nice increment"):
        parse_arguments(args)


def test_validate_requires_command():
    with pytest.raises(NiceError, match="No command specified"):
        validate_options(NiceOptions(increment=5))


def test_validate_rejects_both_increments():
    with pytest.raises(NiceError, match="both -increment and -n"):
        validate_options(NiceOptions(increment=-5, explicit_increment=5, command="x"))


def test_validate_rejects_blank_command():
    with pytest.raises(NiceError, match="Command cannot be empty"):
        validate_options(NiceOptions(command="   "))


def test_execute_without_args_shows_usage():
    with pytest.raises(NiceError, match="Usage: nice"):
        execute([])


def test_execute_rejects_both_increments():
    with pytest.raises(NiceError, match="both -increment and -n"):
        execute(["-n", "5", "-5", "cmd"])


@pytest.mark.parametrize(
    "increment, expected",
    [
        (-20, WindowsPriority.REALTIME),
        (-16, WindowsPriority.REALTIME),
        (-15, WindowsPriority.HIGH),
        (-11, WindowsPriority.HIGH),
        (-10, WindowsPriority.ABOVE_NORMAL),
        (-6, WindowsPriority.ABOVE_NORMAL),
        (-5, WindowsPriority.NORMAL),
        (5, WindowsPriority.NORMAL),
        (6, WindowsPriority.BELOW_NORMAL),
        (10, WindowsPriority.BELOW_NORMAL),
        (11, WindowsPriority.IDLE),
        (19, WindowsPriority.IDLE),
    ],
)
def test_increment_mapping(increment, expected):
    assert increment_to_windows_priority(increment) is expected


@pytest.mark.parametrize("increment", [-21, 20])
def test_increment_mapping_out_of_range(increment):
    with pytest.raises(NiceError):
        increment_to_windows_priority(increment)


def test_priority_classes_are_distinct_flags():
    classes = {windows_priority_to_class(p) for p in WindowsPriority}
    assert len(classes) == len(WindowsPriority)
    assert windows_priority_to_class(WindowsPriority.NORMAL) == 0x20


def test_priority_names():
    assert format_priority_name(WindowsPriority.ABOVE_NORMAL) == "above normal"
    assert format_priority_name(WindowsPriority.IDLE) == "idle"


def test_build_command_line_quotes():
    line = build_command_line("my app.exe", ["a b", 'say "hi"', "plain"])
    assert line == '"my app.exe" "a b" "say \\"hi\\"" plain'


def test_build_command_line_keeps_quoted_command():
    assert build_command_line('"my app.exe"', []) == '"my app.exe"'