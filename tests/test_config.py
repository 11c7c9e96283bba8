from types import SimpleNamespace

import pytest

import config


def test_api_token_resolution_order(monkeypatch, caplog):
    fake_secrets: dict[str, object] = {"ESCROW_API_TOKEN": "secret-token"}
    fake_streamlit = SimpleNamespace(secrets=fake_secrets)
    monkeypatch.setattr(config, "st", fake_streamlit, raising=False)
    monkeypatch.setenv("ESCROW_API_TOKEN", "env-token")

    # Direct Streamlit secret wins over environment variables.
    assert config.get_api_token() == "secret-token"

    # Nested escrow section is used when the top-level key is missing.
    fake_secrets.pop("ESCROW_API_TOKEN")
    fake_secrets["escrow"] = {"ESCROW_API_TOKEN": "section-token"}
    assert config.get_api_token() == "section-token"

    # Environment variable is the final fallback.
    fake_secrets["escrow"].pop("ESCROW_API_TOKEN")  # type: ignore[index]
    assert config.get_api_token() == "env-token"

    # When no token is available a single info log is emitted.
    monkeypatch.delenv("ESCROW_API_TOKEN", raising=False)
    fake_secrets.clear()
    caplog.clear()
    with caplog.at_level("INFO"):
        assert config.get_api_token() == ""
    assert "ESCROW_API_TOKEN not configured" in caplog.text

    # Subsequent calls remain silent until a token is set again.
    caplog.clear()
    with caplog.at_level("INFO"):
        assert config.get_api_token() == ""
    assert caplog.text == ""

    # Setting a token resets the log guard.
    fake_secrets["ESCROW_API_TOKEN"] = "restored"
    assert config.get_api_token() == "restored"


def test_get_setting_trims_and_defaults(monkeypatch):
    monkeypatch.setattr(config, "st", SimpleNamespace(secrets={"LOG_LEVEL": "  debug  ", "BLANK": "   "}))
    monkeypatch.delenv("BLANK", raising=False)

    assert config.get_setting("LOG_LEVEL") == "debug"
    assert config.get_setting("BLANK", "fallback") == "fallback"
    assert config.get_setting("MISSING_SETTING_FOR_TEST", "x") == "x"


def test_get_setting_tolerates_unavailable_secrets(monkeypatch):
    class _NoSecrets:
        def __getitem__(self, key):
            raise FileNotFoundError("no secrets.toml")

    monkeypatch.setattr(config, "st", SimpleNamespace(secrets=_NoSecrets()))
    monkeypatch.setenv("ESCROW_ENV", "staging")

    assert config.get_setting("ESCROW_ENV") == "staging"


@pytest.mark.parametrize(("value", "expected"), [(None, 30.0), ("", 30.0), ("12.5", 12.5), (5, 5.0)])
def test_normalise_timeout(value, expected):
    assert config._normalise_timeout(value) == expected


@pytest.mark.parametrize("value", ["soon", "-1", 0, True])
def test_normalise_timeout_warns_on_invalid_values(value):
    with pytest.warns(RuntimeWarning):
        assert config._normalise_timeout(value) == 30.0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, False), ("yes", True), ("OFF", False), (1, True), (True, True), ("", False)],
)
def test_normalise_bool(value, expected):
    assert config._normalise_bool(value) is expected


def test_normalise_bool_warns_on_unknown_value():
    with pytest.warns(RuntimeWarning):
        assert config._normalise_bool("maybe", default=True) is True


def test_normalise_positive_int():
    assert config._normalise_positive_int("5", default=3) == 5
    assert config._normalise_positive_int("-2", default=3) == 3
    assert config._normalise_positive_int(None, default=3) == 3
    with pytest.warns(RuntimeWarning):
        assert config._normalise_positive_int("many", default=3) == 3


def test_language_and_origin_helpers():
    assert config._normalise_language(" ar ") == "AR"
    assert config._normalise_language(None) == "EN"
    assert config._split_origins("http://a, ,http://b ") == ["http://a", "http://b"]


def test_label_domains_cover_every_wizard():
    from wizard_pages import WIZARDS

    assert {wizard.label_domain for wizard in WIZARDS.values()} <= set(config.LABEL_DOMAIN_PATHS)
