from __future__ import annotations

import pytest

from uncased_env import ASCII, UNICODE, EnvLookup, VarNotFoundError


def test_ascii_scenario():
    env = EnvLookup({"HeLlO": "world"}, folding=ASCII)
    assert env.uncased_var("Hello") == "world"
    assert env.lower_var("hello") == "world"
    assert env.upper_var("HELLO") == "world"


def test_unicode_scenario():
    env = EnvLookup({"Maße": "42"}, folding=UNICODE)
    assert env.uncased_var("mAßE") == "42"
    assert env.lower_var("maße") == "42"
    assert env.upper_var("MASSE") == "42"


def test_ascii_folding_leaves_non_ascii_alone():
    env = EnvLookup({"Maße": "42"}, folding=ASCII)
    assert env.uncased_var("mAßE") == "42"
    with pytest.raises(VarNotFoundError):
        env.upper_var("MASSE")
    with pytest.raises(VarNotFoundError):
        env.uncased_var("MASSE")
    with pytest.raises(VarNotFoundError):
        EnvLookup({"ÉTÉ": "x"}, folding=ASCII).lower_var("été")


@pytest.mark.parametrize("folding", [ASCII, UNICODE])
def test_missing_everywhere(folding):
    env = EnvLookup({"PATH": "/bin", "HOME": "/root"}, folding=folding)
    for lookup in (env.exact_var, env.uncased_var, env.lower_var, env.upper_var):
        with pytest.raises(VarNotFoundError):
            lookup("ghost")


def test_not_found_details():
    env = EnvLookup({}, folding=ASCII)
    with pytest.raises(VarNotFoundError) as info:
        env.upper_var("ghost")
    assert info.value.key == "ghost"
    assert info.value.policy == "upper"
    assert "ghost" in str(info.value)


def test_not_found_is_a_key_error():
    env = EnvLookup({}, folding=ASCII)
    with pytest.raises(KeyError):
        env.exact_var("GHOST")


def test_exact_var_is_case_sensitive():
    env = EnvLookup({"Token": "abc"}, folding=ASCII)
    assert env.exact_var("Token") == "abc"
    with pytest.raises(VarNotFoundError):
        env.exact_var("TOKEN")


def test_exact_and_uncased_agree():
    env = EnvLookup({"Db_Host": "localhost"}, folding=ASCII)
    assert env.exact_var("Db_Host") == "localhost"
    for variant in ("db_host", "DB_HOST", "dB_hOsT"):
        assert env.uncased_var(variant) == "localhost"


def test_lower_var_prefers_literal_lowercase_name():
    env = EnvLookup({"HTTP_PROXY": "upper", "http_proxy": "lower"}, folding=ASCII)
    assert env.lower_var("HTTP_Proxy") == "lower"
    assert env.upper_var("http_proxy") == "upper"


def test_uncased_var_returns_first_in_enumeration_order():
    env = EnvLookup({"Mode": "first", "MODE": "second"}, folding=ASCII)
    assert env.uncased_var("mode") == "first"


def test_reads_mapping_at_call_time():
    data = {}
    env = EnvLookup(data, folding=ASCII)
    with pytest.raises(VarNotFoundError):
        env.uncased_var("level")
    data["LEVEL"] = "debug"
    assert env.uncased_var("level") == "debug"
    assert env.uncased_var("level") == "debug"
    del data["LEVEL"]
    with pytest.raises(VarNotFoundError):
        env.lower_var("level")


def test_reads_process_environment(monkeypatch):
    env = EnvLookup(folding=ASCII)
    monkeypatch.setenv("UNCASED_ENV_TEST_VAR", "on")
    assert env.exact_var("UNCASED_ENV_TEST_VAR") == "on"
    assert env.uncased_var("uncased_env_test_var") == "on"
    monkeypatch.delenv("UNCASED_ENV_TEST_VAR")
    with pytest.raises(VarNotFoundError):
        env.uncased_var("uncased_env_test_var")


def test_iterators():
    env = EnvLookup({"Alpha": "1", "beta": "2"}, folding=ASCII)
    assert list(env.lower_vars()) == [("alpha", "1"), ("beta", "2")]
    assert list(env.upper_vars()) == [("ALPHA", "1"), ("BETA", "2")]
    found = [v for k, v in env.uncased_vars() if k == "BETA"]
    assert found == ["2"]


def test_unicode_iterators_expand():
    env = EnvLookup({"Maße": "42"}, folding=UNICODE)
    assert list(env.upper_vars()) == [("MASSE", "42")]
    assert list(env.lower_vars()) == [("maße", "42")]


def test_repr_mentions_folding():
    assert "unicode" in repr(EnvLookup({}, folding=UNICODE))


@pytest.mark.parametrize("folding", [ASCII, UNICODE])
@pytest.mark.parametrize("key", ["BAD\ud800", "", "A=B", "=", "x\ud83dy"])
@pytest.mark.parametrize("operation", ["exact_var", "uncased_var", "lower_var", "upper_var"])
def test_unusual_keys_are_not_found(folding, key, operation):
    env = EnvLookup(folding=folding)
    with pytest.raises(VarNotFoundError) as info:
        getattr(env, operation)(key)
    assert info.value.key == key
