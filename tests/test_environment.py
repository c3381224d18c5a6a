import pytest

from minishell.environment import Environment, get_value, get_var, name_length


@pytest.fixture
def environment():
    return Environment(["PATHX=1", "PATH=/bin:/usr/bin", "HOME=/home/user", "EMPTY="])


def test_get_var_and_value_split_entry():
    assert get_var("HOME=/home/user") == "HOME"
    assert get_value("HOME=/home/user") == "/home/user"


def test_value_may_contain_equals_sign():
    assert get_value("OPTS=a=b") == "a=b"


def test_name_length_matches_var():
    for entry in ("PATH=/bin", "_x1=2", "A=", "ABC"):
        assert name_length(entry) == len(get_var(entry))


def test_name_length_rejects_bad_start():
    assert name_length("9X=1") == 0
    assert name_length("") == 0
    assert name_length(None) == 0
    assert get_var("=x") == ""


def test_name_stops_at_non_name_char():
    assert get_var("HOME/dir") == "HOME"


def test_get_value_of_missing_entry_is_empty():
    assert get_value(None) == ""


def test_find_requires_exact_name(environment):
    assert environment.find("PATH") == "PATH=/bin:/usr/bin"
    assert environment.find("PATHX") == "PATHX=1"
    assert environment.find("PAT") is None
    assert environment.find("NOPE") is None


def test_value(environment):
    assert environment.value("HOME") == "/home/user"
    assert environment.value("EMPTY") == ""
    assert environment.value("MISSING") is None


def test_set_new_entry_appends(environment):
    before = list(environment)
    environment.set("NEW=value")
    assert list(environment) == before + ["NEW=value"]


def test_set_replaces_and_moves_to_end(environment):
    size = len(environment)
    environment.set("PATH=/opt")
    entries = list(environment)
    assert len(environment) == size
    assert entries[-1] == "PATH=/opt"
    assert "PATH=/bin:/usr/bin" not in entries
    assert environment.value("PATH") == "/opt"


@pytest.mark.parametrize("entry", ["NOEQUALS", "1A=x", "=x", "", "A-B=x"])
def test_set_rejects_non_assignment(environment, entry):
    before = list(environment)
    with pytest.raises(ValueError):
        environment.set(entry)
    assert list(environment) == before


def test_unset_removes_entry(environment):
    environment.unset("PATH")
    assert environment.find("PATH") is None
    assert environment.value("PATHX") == "1"
    assert len(environment) == 3


def test_unset_missing_is_noop(environment):
    before = list(environment)
    environment.unset("MISSING")
    assert list(environment) == before


def test_unset_removes_only_first_duplicate():
    environment = Environment(["A=1", "A=2"])
    environment.unset("A")
    assert list(environment) == ["A=2"]


def test_set_then_unset_round_trip(environment):
    before = list(environment)
    environment.set("TEMP=x")
    environment.unset("TEMP")
    assert list(environment) == before


def test_expand_single_variable(environment):
    assert environment.expand("cd $HOME") == "cd /home/user"


def test_expand_several_variables(environment):
    assert environment.expand("$HOME:$PATHX/end") == "/home/user:1/end"


def test_expand_missing_variable_is_empty(environment):
    assert environment.expand("a$MISSING b") == "a b"


def test_expand_lone_dollar_dropped(environment):
    assert environment.expand("cost $") == "cost "
    assert environment.expand("$1") == "1"


def test_expand_without_dollar_unchanged(environment):
    assert environment.expand("plain text") == "plain text"
    assert environment.expand("") == ""


def test_constructor_copies_entries():
    source = ["A=1"]
    environment = Environment(source)
    source.append("B=2")
    environment.set("C=3")
    assert list(environment) == ["A=1", "C=3"]
    assert source == ["A=1", "B=2"]


def test_iteration_does_not_expose_storage(environment):
    entries = list(environment)
    entries.clear()
    assert len(environment) == 4


def test_from_environ_copies_and_drops_oldpwd(monkeypatch):
    monkeypatch.setenv("MINISHELL_SAMPLE", "sample")
    monkeypatch.setenv("OLDPWD", "/previous")
    environment = Environment.from_environ()
    assert environment.value("MINISHELL_SAMPLE") == "sample"
    assert environment.value("OLDPWD") is None
    assert "MINISHELL_SAMPLE=sample" in list(environment)