import pytest

import site_mapper.core.config as config_module  # type: ignore[import]

from tests.helpers.site_imports import ConfigurationError, load_configuration

ENV_KEYS = [
    "SITEMAP_MAX_LINKS",
    "SITEMAP_WORKERS",
    "SITEMAP_REQUEST_TIMEOUT",
    "SITEMAP_USER_AGENT",
]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    monkeypatch.setattr(config_module, "load_dotenv", lambda *_args, **_kwargs: False)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_load_configuration_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = load_configuration("https://example.com/")

    assert config.target_url == "https://example.com/"
    assert config.base_origin == "https://example.com/"
    assert config.max_links == 100
    assert config.max_workers == 15
    assert config.request_timeout is None
    assert config.user_agent is None
    assert config.output_path == (tmp_path / "sitemap.xml").resolve()


def test_load_configuration_uses_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("SITEMAP_MAX_LINKS", "25")
    monkeypatch.setenv("SITEMAP_WORKERS", "4")
    monkeypatch.setenv("SITEMAP_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("SITEMAP_USER_AGENT", "site-mapper/test")

    config = load_configuration("https://example.com", str(tmp_path / "out.xml"))

    assert config.max_links == 25
    assert config.max_workers == 4
    assert config.request_timeout == 2.5
    assert config.user_agent == "site-mapper/test"
    assert config.output_path == (tmp_path / "out.xml").resolve()


def test_explicit_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("SITEMAP_MAX_LINKS", "25")
    monkeypatch.setenv("SITEMAP_WORKERS", "4")

    config = load_configuration("https://example.com", max_links=3, max_workers=1)

    assert config.max_links == 3
    assert config.max_workers == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_links": -1},
        {"max_workers": 0},
        {"request_timeout": 0},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        load_configuration("https://example.com", **kwargs)


def test_non_numeric_environment_value_is_rejected(monkeypatch):
    monkeypatch.setenv("SITEMAP_MAX_LINKS", "lots")

    with pytest.raises(ConfigurationError):
        load_configuration("https://example.com")


def test_missing_target_is_rejected():
    with pytest.raises(ConfigurationError):
        load_configuration("")
