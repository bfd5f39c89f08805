from __future__ import annotations
from datetime import datetime, time, timedelta
from flask import Blueprint, jsonify
from flask_login import login_required
from ...models import AuditLog
from ...models.user import ROLE_ADMIN
from ...utils.audit_format import serialize_log
from ...utils.forms import validate_args
from ...utils.security import require_roles
from .forms import AuditLogListForm

bp = Blueprint("audit", __name__, url_prefix="/api/audit")

SORT_COLUMNS = {
    "timestamp": AuditLog.timestamp,
    "action": AuditLog.action,
    "userLoginIdentifier": AuditLog.user_login_identifier,
}

@bp.get("")
@login_required
@require_roles(ROLE_ADMIN, message="Acesso negado. Apenas administradores podem visualizar logs de auditoria.")
def index():
    form = validate_args(AuditLogListForm)

    query = AuditLog.query
    if form.action.data:
        query = query.filter(AuditLog.action == form.action.data)
    if form.userId.data:
        query = query.filter(AuditLog.user_id == form.userId.data)
    if form.userLoginIdentifier.data:
        query = query.filter(AuditLog.user_login_identifier == form.userLoginIdentifier.data)
    if form.targetResourceType.data:
        query = query.filter(AuditLog.target_resource_type == form.targetResourceType.data)

    # período por dia inteiro: início às 00:00, fim exclusivo no dia seguinte
    if form.timestampStart.data:
        query = query.filter(AuditLog.timestamp >= datetime.combine(form.timestampStart.data, time.min))
    if form.timestampEnd.data:
        query = query.filter(AuditLog.timestamp < datetime.combine(form.timestampEnd.data, time.min) + timedelta(days=1))

    total = query.count()

    column = SORT_COLUMNS[form.sortBy.data or "timestamp"]
    ordering = column.asc() if form.sortOrder.data == "asc" else column.desc()
    limit = form.limit.data or 10
    offset = form.offset.data or 0
    logs = query.order_by(ordering, AuditLog.id.desc()).offset(offset).limit(limit).all()

    return jsonify({"auditLogs": [serialize_log(log) for log in logs], "totalCount": total})
