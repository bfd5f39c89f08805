from __future__ import annotations

from flask import Blueprint, jsonify
from flask_login import login_required, current_user

from ...extensions import db
from ...models import Settings
from ...models.user import ROLE_ADMIN
from ...utils.audit import record_audit
from ...utils.forms import validate_json
from ...utils.security import require_roles
from .forms import SettingsForm

bp = Blueprint("settings", __name__, url_prefix="/api/settings")


@bp.get("")
@login_required
def show():
    return jsonify({"settings": Settings.load().to_dict()})


@bp.put("")
@login_required
@require_roles(ROLE_ADMIN, message="Acesso negado. Apenas administradores podem atualizar configurações.")
def update():
    form = validate_json(SettingsForm)

    settings = Settings.load()
    settings.submission_start_day = form.submissionStartDay.data
    settings.submission_end_day = form.submissionEndDay.data
    db.session.commit()

    record_audit(
        current_user,
        "UPDATE_SETTINGS",
        f"Submission window set to {settings.submission_start_day}-{settings.submission_end_day}.",
        settings.id,
        "Settings",
    )
    return jsonify({"settings": settings.to_dict()})
