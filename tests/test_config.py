import pytest

from gedcomx7.config import CONFIG_ENV, GXConfig, get_config, load_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults_fill_missing_sections():
    cfg = GXConfig({})

    assert cfg.numbering["ambiguous_anchor_role"] == "HUSB"
    assert cfg.numbering["report_ambiguous_sex"] is True
    assert cfg.header["product"] == "GEDCOMX7"
    assert cfg.schema == {}
    assert cfg.debug is False


def test_partial_sections_are_merged():
    cfg = GXConfig({"numbering": {"report_ambiguous_sex": False}})

    assert cfg.numbering == {"ambiguous_anchor_role": "HUSB", "report_ambiguous_sex": False}


def test_env_override(tmp_path, monkeypatch):
    path = tmp_path / "custom.yml"
    path.write_text("numbering:\n  ambiguous_anchor_role: WIFE\nheader:\n  product: OTHER\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))

    cfg = load_config()

    assert cfg.numbering["ambiguous_anchor_role"] == "WIFE"
    assert cfg.header["product"] == "OTHER"
    assert cfg.header["version"] == "0.1.0"


def test_missing_override_file_raises(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "nope.yml"))

    with pytest.raises(FileNotFoundError):
        load_config()


def test_get_config_is_cached(tmp_path, monkeypatch):
    path = tmp_path / "custom.yml"
    path.write_text("debug: true\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))

    assert get_config() is get_config()
    assert get_config().debug is True
