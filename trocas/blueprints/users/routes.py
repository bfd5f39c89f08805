from __future__ import annotations

import json

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from ...errors import ValidationError
from ...extensions import db
from ...models import User
from ...models.user import ROLE_ADMIN
from ...utils.audit import record_audit
from ...utils.forms import validate_json
from ...utils.security import require_roles
from .forms import UserUpdateForm, UserStatusForm

bp = Blueprint("users", __name__, url_prefix="/api/users")

NOT_FOUND = "Usuário não encontrado."


@bp.get("")
@login_required
@require_roles(ROLE_ADMIN, message="Acesso negado. Apenas administradores podem listar usuários.")
def index():
    users = User.query.order_by(User.name.asc()).all()
    return jsonify({"users": [u.to_dict() for u in users]})


@bp.patch("/<int:user_id>")
@login_required
@require_roles(ROLE_ADMIN)
def update(user_id: int):
    u = db.get_or_404(User, user_id, description=NOT_FOUND)
    form = validate_json(UserUpdateForm)

    changes = {}
    if form.name.data:
        changes["name"] = form.name.data
    if form.role.data:
        changes["role"] = form.role.data

    # o admin pode trocar o próprio nome, mas não a própria role
    if u.id == current_user.id and changes.get("role", u.role) != u.role:
        return jsonify({"message": "Administradores não podem alterar a própria role."}), 403

    for field, value in changes.items():
        setattr(u, field, value)
    db.session.commit()

    record_audit(
        current_user,
        "ADMIN_UPDATE_USER",
        f"Admin updated user {u.name} (ID: {u.id}). Changes: {json.dumps(changes, ensure_ascii=False)}",
        u.id,
        "User",
    )
    return jsonify({"user": u.to_dict()})


@bp.patch("/<int:user_id>/status")
@login_required
@require_roles(ROLE_ADMIN)
def update_status(user_id: int):
    u = db.get_or_404(User, user_id, description=NOT_FOUND)
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    form = validate_json(UserStatusForm, payload)
    # o formulário só enxerga texto; "false" em string não é booleano
    if not isinstance(payload.get("isActive"), bool):
        raise ValidationError(issues={"isActive": ['O estado "isActive" deve ser um booleano (true ou false).']})

    if u.id == current_user.id:
        return jsonify({"message": "Você não pode alterar o status da sua própria conta."}), 403

    u.is_active = form.isActive.data == "true"
    db.session.commit()

    record_audit(
        current_user,
        "ADMIN_UPDATE_USER_STATUS",
        f"Admin set isActive={'true' if u.is_active else 'false'} for user {u.name} (ID: {u.id}).",
        u.id,
        "User",
    )
    return jsonify({"user": u.to_dict()})
