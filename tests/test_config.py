import pytest

from gedcom_validator.config import CONFIG_ENV_VAR, GVConfig, load_config


def test_defaults_when_sections_missing():
    cfg = GVConfig({})
    assert cfg.report_file == "GedcomService_output.txt"
    assert cfg.missing_name == "null"
    assert cfg.enabled_rules is None
    assert cfg.debug is False


def test_load_explicit_file(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text(
        "paths:\n  report_file: out/report.txt\n"
        "reporting:\n  missing_name: unknown\n"
        "rules:\n  enabled: [US03, US24]\n"
        "debug: true\n",
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.report_file == "out/report.txt"
    assert cfg.missing_name == "unknown"
    assert cfg.enabled_rules == ["US03", "US24"]
    assert cfg.debug is True


def test_env_var_points_at_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.yml"))
    with pytest.raises(FileNotFoundError):
        load_config()


def test_empty_missing_name_is_kept(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("reporting:\n  missing_name: ''\n", encoding="utf-8")
    assert load_config(path).missing_name == ""
