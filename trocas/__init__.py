from __future__ import annotations

import os
from flask import Flask, jsonify
from dotenv import load_dotenv

from .config import config, config_name_from_env
from .errors import register_error_handlers
from .extensions import db, login_manager


def create_app(config_name: str | None = None) -> Flask:
    load_dotenv()

    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config[config_name or config_name_from_env()])

    if not app.config.get("JWT_SECRET"):
        raise RuntimeError("JWT_SECRET não configurado.")

    # instance/ guarda o sqlite padrão
    os.makedirs(app.instance_path, exist_ok=True)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)

    # token Bearer -> usuário
    from .models.user import User
    from .utils.tokens import bearer_token, decode_token

    @login_manager.request_loader
    def load_user_from_request(req):
        token = bearer_token(req.headers.get("Authorization"))
        claims = decode_token(token) if token else None
        if not claims:
            return None
        try:
            user = db.session.get(User, int(claims.get("sub")))
        except (TypeError, ValueError):
            return None
        if user is None or not user.is_active:
            return None
        return user

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"message": "Autenticação necessária. Token inválido ou expirado."}), 401

    # register blueprints
    from .blueprints.main.routes import main_bp
    from .blueprints.auth.routes import auth_bp
    from .blueprints.swaps.routes import swaps_bp
    from .blueprints.settings.routes import bp as settings_bp
    from .blueprints.users.routes import bp as users_bp
    from .blueprints.audit.routes import bp as audit_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(swaps_bp)
    app.register_blueprint(settings_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(audit_bp)

    register_error_handlers(app)

    # create db tables
    with app.app_context():
        # garante que todos os models sejam importados/registrados no metadata
        from . import models  # noqa: F401
        db.create_all()
        models.Settings.load()

    # CLI commands
    from .seed import register_seed_command
    register_seed_command(app)

    return app
