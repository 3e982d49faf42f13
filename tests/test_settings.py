from top100_archive.config.settings import AppSettings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = AppSettings(_env_file=None)
    assert settings.records_limit == 50
    assert settings.tolerant_playoff_matching is False
    assert settings.standings_csv is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STANDINGS_CSV", str(tmp_path / "standings.csv"))
    monkeypatch.setenv("TOLERANT_PLAYOFF_MATCHING", "true")
    settings = AppSettings(_env_file=None)
    assert settings.standings_csv == tmp_path / "standings.csv"
    assert settings.tolerant_playoff_matching is True


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert load_settings().log_level == "INFO"


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"
