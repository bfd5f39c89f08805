from __future__ import annotations
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from ..extensions import db
from ..models.audit_log import AuditLog

def record_audit(user, action: str, details: str | None = None,
                 target_id: int | None = None, target_type: str | None = None) -> AuditLog | None:
    """Grava um registro de auditoria.

    Falhas são registradas no log e engolidas: a ação principal já foi
    concluída e não pode ser desfeita por causa da auditoria.
    """
    try:
        log = AuditLog(
            user_id=user.id,
            user_login_identifier=user.login_identifier,
            action=action,
            details=details,
            target_resource_id=target_id,
            target_resource_type=target_type,
        )
        db.session.add(log)
        db.session.commit()
        return log
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(
            "Falha ao registrar auditoria [%s] do usuário %s", action, getattr(user, "id", None)
        )
        return None
