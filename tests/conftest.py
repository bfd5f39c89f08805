"""Fixtures compartilhadas da suíte.

Cada teste recebe uma aplicação nova com banco sqlite em memória. Os
fixtures de usuário devolvem apenas o ``id``: os objetos ORM não atravessam
o limite do ``app_context`` em que foram criados.

Visão geral
-----------
app / client        aplicação de teste e cliente HTTP
admin_id            administrador 90001 (senha ``senhaforte123``)
encarregado_id      encarregado 10001 (senha ``password123``)
other_id            segundo encarregado 10002, para testes de dono
*_headers           cabeçalho ``Authorization: Bearer`` de cada usuário
open_window         janela de submissão aberta a semana toda
saturday            primeiro sábado de março do ano que vem
swap_payload        monta o corpo de criação de uma solicitação
create_request      envia a solicitação e devolve o JSON criado
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from trocas import create_app
from trocas.extensions import db
from trocas.models import Settings, User
from trocas.models.user import ROLE_ADMIN, ROLE_ENCARREGADO
from trocas.utils.tokens import issue_token


@pytest.fixture
def app():
    app = create_app("testing")
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _create_user(app, login_identifier, name, role, password, active=True) -> int:
    with app.app_context():
        user = User(login_identifier=login_identifier, name=name, role=role, is_active=active)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user.id


def _headers(app, user_id) -> dict:
    with app.app_context():
        user = db.session.get(User, user_id)
        return {"Authorization": f"Bearer {issue_token(user)}"}


# ── Usuários ──────────────────────────────────────────────────────────────────


@pytest.fixture
def admin_id(app) -> int:
    return _create_user(app, "90001", "Admin Sistema", ROLE_ADMIN, "senhaforte123")


@pytest.fixture
def encarregado_id(app) -> int:
    return _create_user(app, "10001", "Encarregado Teste", ROLE_ENCARREGADO, "password123")


@pytest.fixture
def other_id(app) -> int:
    return _create_user(app, "10002", "Outro Encarregado", ROLE_ENCARREGADO, "password123")


@pytest.fixture
def admin_headers(app, admin_id) -> dict:
    return _headers(app, admin_id)


@pytest.fixture
def encarregado_headers(app, encarregado_id) -> dict:
    return _headers(app, encarregado_id)


@pytest.fixture
def other_headers(app, other_id) -> dict:
    return _headers(app, other_id)


# ── Solicitações ──────────────────────────────────────────────────────────────


@pytest.fixture
def open_window(app):
    with app.app_context():
        settings = Settings.load()
        settings.submission_start_day = "SUNDAY"
        settings.submission_end_day = "SATURDAY"
        db.session.commit()


@pytest.fixture
def saturday() -> date:
    """Sábado no começo de um mês futuro: +1 dia é TROCA, +7 é SUBSTITUICAO."""
    d = date(date.today().year + 1, 3, 1)
    while d.weekday() != 5:
        d += timedelta(days=1)
    return d


@pytest.fixture
def swap_payload():
    def build(swap_date: date, payback_date: date, **overrides) -> dict:
        payload = {
            "employeeIdOut": "12345",
            "employeeIdIn": "54321",
            "swapDate": swap_date.isoformat(),
            "paybackDate": payback_date.isoformat(),
            "employeeFunction": "MOTORISTA",
            "groupOut": "G1",
            "groupIn": "G2",
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def create_request(client, encarregado_headers, open_window, swap_payload, saturday):
    def send(payback_offset: int = 1, headers: dict | None = None, **overrides) -> dict:
        payload = swap_payload(saturday, saturday + timedelta(days=payback_offset), **overrides)
        res = client.post("/api/requests", json=payload, headers=headers or encarregado_headers)
        assert res.status_code == 201, res.get_json()
        return res.get_json()["request"]

    return send
