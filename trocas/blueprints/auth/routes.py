from flask import Blueprint, jsonify, current_app
from flask_login import login_required, current_user
from ...extensions import db
from ...models.user import User, ROLE_ADMIN
from ...utils.audit import record_audit
from ...utils.forms import validate_json
from ...utils.security import require_roles
from ...utils.tokens import issue_token
from .forms import LoginForm, RegisterForm

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

@auth_bp.post("/login")
def login():
    form = validate_json(LoginForm)
    user = User.query.filter_by(login_identifier=form.loginIdentifier.data).first()
    if not user or not user.check_password(form.password.data):
        return jsonify({"message": "Credenciais inválidas."}), 401

    if not user.is_active:
        current_app.logger.warning("Login attempt for deactivated user: %s", user.login_identifier)
        return jsonify({"message": "Conta de usuário desativada."}), 403

    token = issue_token(user)
    record_audit(user, "USER_LOGIN", "User logged in successfully.")
    return jsonify({"token": token, "user": user.to_dict()})

@auth_bp.get("/me")
@login_required
def me():
    return jsonify({"user": current_user.to_dict()})

# Só administradores cadastram usuários
@auth_bp.post("/register")
@login_required
@require_roles(ROLE_ADMIN, message="Acesso negado. Apenas administradores podem registrar novos usuários.")
def register():
    form = validate_json(RegisterForm)
    if User.query.filter_by(login_identifier=form.loginIdentifier.data).first():
        return jsonify({"message": "Crachá já está em uso."}), 409

    user = User(
        name=form.name.data,
        login_identifier=form.loginIdentifier.data,
        role=form.role.data,
        is_active=True,
    )
    user.set_password(form.password.data)
    db.session.add(user)
    db.session.commit()

    record_audit(
        current_user,
        "ADMIN_CREATE_USER",
        f"Admin created user '{user.name}' (ID: {user.id}) with role {user.role}.",
        user.id,
        "User",
    )
    return jsonify({"user": user.to_dict()}), 201
