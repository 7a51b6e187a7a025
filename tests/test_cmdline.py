import pytest

from fieldrobot.cmdline import (
    ArgType,
    CmdLineArg,
    CmdLineParser,
    cmd_option_exists,
    get_cmd_option,
)


def _args():
    return [
        CmdLineArg("count", "-c", "--count", ArgType.INT, "3", "how many"),
        CmdLineArg("scale", "-s", "--scale", ArgType.DOUBLE, "", "scale factor"),
        CmdLineArg("name", "-n", "--name", ArgType.STRING, "", "a name"),
        CmdLineArg("verbose", "-v", "--verbose", ArgType.BOOL, "", "talk more"),
    ]


def test_get_cmd_option():
    argv = ["-a", "1", "-b"]
    assert get_cmd_option(argv, "-a") == "1"
    assert get_cmd_option(argv, "-b") is None
    assert get_cmd_option(argv, "-z") is None


def test_cmd_option_exists():
    assert cmd_option_exists(["-a", "1"], "-a")
    assert not cmd_option_exists(["-a", "1"], "-b")


def test_parses_values():
    parser = CmdLineParser("prog", _args(), ["-c", "7", "--scale", "2.5", "-n", "field", "-v"])
    assert parser["count"] == 7
    assert parser["scale"] == 2.5
    assert parser["name"] == "field"
    assert parser["verbose"] is True


def test_defaults_apply():
    parser = CmdLineParser("prog", _args(), [])
    assert parser["count"] == 3
    assert parser["name"] is None


def test_help_prints_usage_and_exits(capsys):
    with pytest.raises(SystemExit) as info:
        CmdLineParser("prog", _args(), ["--help"], examples="prog -c 2")
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: prog [OPTION] ...")
    assert "\t-c, --count\thow many" in out
    assert "prog -c 2" in out


def test_missing_mandatory_exits():
    args = [CmdLineArg("file", "-f", "--file", ArgType.STRING, "", "input", mandatory=True)]
    with pytest.raises(SystemExit):
        CmdLineParser("prog", args, [])


def test_missing_value_exits():
    with pytest.raises(SystemExit):
        CmdLineParser("prog", _args(), ["-c"])


def test_bad_int_raises():
    with pytest.raises(ValueError):
        CmdLineParser("prog", _args(), ["-c", "many"])


def test_unknown_name_raises():
    parser = CmdLineParser("prog", _args(), ["-c", "5"])
    assert parser["count"] == 5
    with pytest.raises(KeyError):
        parser["missing"]