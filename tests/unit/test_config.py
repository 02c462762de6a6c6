import pytest
from pydantic import ValidationError

from lib.config.generate_loader import NO_SERVICE_ERROR, load_generate_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_generate_config(str(tmp_path / "absent.yaml"))
    assert cfg.error_field == "message"
    assert cfg.no_service_error == NO_SERVICE_ERROR
    assert cfg.services == []
    assert cfg.log_level == "INFO"


def test_values_from_file(tmp_path):
    path = tmp_path / "generate.yaml"
    path.write_text(
        "generate:\n"
        "  error_field: error\n"
        "  services: ['tests.fakes:EchoService']\n"
        "logging:\n"
        "  level: debug\n"
    )
    cfg = load_generate_config(str(path))
    assert cfg.error_field == "error"
    assert cfg.services == ["tests.fakes:EchoService"]
    assert cfg.log_level == "debug"
    assert cfg.raw["logging"] == {"level": "debug"}


def test_env_var_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "other.yaml"
    path.write_text("generate:\n  error_field: failure\n")
    monkeypatch.setenv("GENERATE_CONFIG", str(path))
    assert load_generate_config().error_field == "failure"


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "generate.yaml"
    path.write_text("generate:\n  error_feild: oops\n")
    with pytest.raises(ValidationError):
        load_generate_config(str(path))
