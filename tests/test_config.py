import pytest

from perplexity_core.config import Settings, load_settings
from perplexity_core.errors import ConfigError

ENV = {
    "PERPLEXITY_API_KEY": "pplx-secret",
    "BASE_URL": "https://api.perplexity.ai/chat/completions",
}


def test_load_required_values():
    settings = load_settings(ENV)
    assert settings == Settings(
        api_key="pplx-secret",
        base_url="https://api.perplexity.ai/chat/completions",
        timeout=None,
    )


@pytest.mark.parametrize("missing", ["PERPLEXITY_API_KEY", "BASE_URL"])
def test_missing_required_value(missing):
    env = {k: v for k, v in ENV.items() if k != missing}
    with pytest.raises(ConfigError, match=f"{missing} environment variable is required"):
        load_settings(env)


def test_blank_value_counts_as_missing():
    with pytest.raises(ConfigError, match="PERPLEXITY_API_KEY"):
        load_settings({**ENV, "PERPLEXITY_API_KEY": "   "})


def test_timeout_is_parsed():
    assert load_settings({**ENV, "PERPLEXITY_TIMEOUT": "30"}).timeout == 30.0


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_bad_timeout(value):
    with pytest.raises(ConfigError, match="PERPLEXITY_TIMEOUT"):
        load_settings({**ENV, "PERPLEXITY_TIMEOUT": value})


def test_settings_are_immutable():
    settings = load_settings(ENV)
    with pytest.raises(AttributeError):
        settings.api_key = "other"


def test_repr_hides_api_key():
    assert "pplx-secret" not in repr(load_settings(ENV))


def test_reads_os_environ_by_default(monkeypatch):
    for key, value in ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("PERPLEXITY_TIMEOUT", raising=False)
    assert load_settings().api_key == "pplx-secret"
