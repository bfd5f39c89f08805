from __future__ import annotations
import click
from flask import Flask
from .extensions import db
from .models.settings import Settings
from .models.user import User, ROLE_ADMIN, ROLE_ENCARREGADO

def register_seed_command(app: Flask):
    @app.cli.command("seed")
    def seed():
        """Cria usuários de teste (administrador + encarregado) e a janela padrão."""
        created = 0

        def upsert_user(login_identifier, name, role, password):
            nonlocal created
            u = User.query.filter_by(login_identifier=login_identifier).first()
            if not u:
                u = User(login_identifier=login_identifier, name=name, role=role, is_active=True)
                u.set_password(password)
                db.session.add(u)
                created += 1
            else:
                u.name = name
                u.role = role
                u.is_active = True
            return u

        upsert_user("90001", "Admin Sistema", ROLE_ADMIN, "senhaforte123")
        upsert_user("10001", "Encarregado Teste", ROLE_ENCARREGADO, "password123")

        db.session.commit()
        settings = Settings.load()
        click.echo(f"Seed concluído. Usuários criados: {created}")
        click.echo(f"Janela de submissão: {settings.submission_start_day} a {settings.submission_end_day}")
