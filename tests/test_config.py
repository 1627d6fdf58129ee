import pytest

from clinicflow import create_app
from clinicflow.config import Config, ProductionConfig, TestingConfig, config, get_config


def test_get_config_follows_flask_env(monkeypatch):
    monkeypatch.setenv("FLASK_ENV", "production")
    assert get_config() is ProductionConfig

    monkeypatch.setenv("FLASK_ENV", "unknown")
    assert get_config() is config["default"]


def test_app_carries_clinic_settings(app):
    assert app.config["CURRENCY"] == "INR"
    assert set(app.config["DOCTOR_INFO"]) == {"name", "qualifications", "registration", "phone"}
    assert set(app.config["CLINIC_INFO"]) == {"name", "address", "phone", "email", "timings"}
    assert app.config["SEED_DATA_DIR"] == Config.SEED_DATA_DIR
    assert "PROJECT_ROOT" not in app.config


def test_production_refuses_default_secret(monkeypatch):
    monkeypatch.setattr(ProductionConfig, "SECRET_KEY", None)

    with pytest.raises(ValueError):
        create_app("production")


def test_testing_config():
    assert TestingConfig.TESTING is True
    assert TestingConfig.SECRET_KEY == "testing-secret-key"


class TestCors:
    def test_api_allows_any_origin(self, client):
        response = client.get("/api/patients", headers={"Origin": "http://localhost:3000"})

        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_pdf_download_name_is_exposed(self, client):
        response = client.get("/api/prescriptions/pr1/print", headers={"Origin": "http://localhost:3000"})

        assert "Content-Disposition" in response.headers["Access-Control-Expose-Headers"]
