"""Fábrica da aplicação, configuração por ambiente e comando de seed."""

import pytest

from trocas import create_app
from trocas.config import ProductionConfig, config_name_from_env
from trocas.models import Settings, User


@pytest.mark.parametrize("app_env,node_env,expected", [
    (None, None, "development"),
    ("production", None, "production"),
    (None, "test", "testing"),
    ("TESTING", "production", "testing"),
    ("staging", None, "default"),
])
def test_config_name_from_env(monkeypatch, app_env, node_env, expected):
    for name, value in (("APP_ENV", app_env), ("NODE_ENV", node_env)):
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)
    assert config_name_from_env() == expected


def test_production_requires_jwt_secret(monkeypatch):
    monkeypatch.setattr(ProductionConfig, "JWT_SECRET", None)
    with pytest.raises(RuntimeError):
        create_app("production")


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.get_json()
    assert body["status"] == "ok"
    assert body["timestamp"]


def test_unknown_route_answers_json(client):
    res = client.get("/api/nada")
    assert res.status_code == 404
    assert "message" in res.get_json()


def test_seed_is_idempotent(app):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed"])
    assert first.exit_code == 0, first.output
    assert "Usuários criados: 2" in first.output

    second = runner.invoke(args=["seed"])
    assert "Usuários criados: 0" in second.output

    with app.app_context():
        admin = User.query.filter_by(login_identifier="90001").one()
        assert admin.is_admin()
        assert admin.check_password("senhaforte123")
        encarregado = User.query.filter_by(login_identifier="10001").one()
        assert encarregado.check_password("password123")
        assert Settings.load().submission_start_day == "MONDAY"


def test_seeded_admin_can_log_in(app, client):
    app.test_cli_runner().invoke(args=["seed"])
    res = client.post("/api/auth/login", json={"loginIdentifier": "90001", "password": "senhaforte123"})
    assert res.status_code == 200
    assert res.get_json()["user"]["role"] == "ADMINISTRADOR"
