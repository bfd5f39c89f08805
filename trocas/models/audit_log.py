from __future__ import annotations
from datetime import datetime
from ..extensions import db

class AuditLog(db.Model):
    __tablename__ = "audit_logs"

    id = db.Column(db.Integer, primary_key=True)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    # USER_LOGIN, CREATE_SWAP_REQUEST, ADMIN_UPDATE_USER, etc
    action = db.Column(db.String(60), nullable=False, index=True)
    details = db.Column(db.Text, nullable=True)

    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    user_login_identifier = db.Column(db.String(32), nullable=False, index=True)

    target_resource_id = db.Column(db.Integer, nullable=True)
    target_resource_type = db.Column(db.String(40), nullable=True, index=True)

    performed_by = db.relationship("User", backref=db.backref("audit_logs", lazy="dynamic"))

    def __repr__(self) -> str:
        return f"<AuditLog {self.id} {self.action}>"
