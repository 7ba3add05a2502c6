"""Tests for environment sources."""

from env_reader.tools.builtin.system import EnvironmentSource, MappingEnvironment, ProcessEnvironment


def test_process_environment_lookup(monkeypatch):
    """Test ProcessEnvironment reads os.environ."""
    monkeypatch.setenv("ENV_READER_PROCESS_TEST", "value")
    assert ProcessEnvironment().lookup("ENV_READER_PROCESS_TEST") == "value"


def test_process_environment_missing(monkeypatch):
    """Test ProcessEnvironment returns None for unset variables."""
    monkeypatch.delenv("ENV_READER_PROCESS_TEST", raising=False)
    assert ProcessEnvironment().lookup("ENV_READER_PROCESS_TEST") is None


def test_mapping_environment():
    """Test MappingEnvironment is an exact-key lookup."""
    env = MappingEnvironment({"FOO": "bar"})
    assert env.lookup("FOO") == "bar"
    assert env.lookup("foo") is None
    assert MappingEnvironment().lookup("FOO") is None


def test_mapping_environment_copies_input():
    """Test later changes to the source dict are not visible."""
    source = {"FOO": "bar"}
    env = MappingEnvironment(source)
    source["FOO"] = "changed"
    assert env.lookup("FOO") == "bar"


def test_mapping_environment_repr_hides_values():
    """Test repr lists names but not values."""
    text = repr(MappingEnvironment({"API_KEY": "secret-value"}))
    assert "API_KEY" in text
    assert "secret-value" not in text


def test_sources_satisfy_protocol():
    """Test both sources implement EnvironmentSource."""
    assert isinstance(ProcessEnvironment(), EnvironmentSource)
    assert isinstance(MappingEnvironment(), EnvironmentSource)
