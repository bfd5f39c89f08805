from __future__ import annotations
from datetime import datetime
from ..extensions import db

FUNCTION_CHOICES = ("MOTORISTA", "COBRADOR")
GROUP_CHOICES = ("G1", "G2", "FIXO_DOMINGO", "SAB_DOMINGO", "FIXO_SABADO")

EVENT_TROCA = "TROCA"
EVENT_SUBSTITUICAO = "SUBSTITUICAO"
EVENT_CHOICES = (EVENT_TROCA, EVENT_SUBSTITUICAO)

STATUS_SOLICITADO = "SOLICITADO"
STATUS_AGENDADO = "AGENDADO"
STATUS_NAO_REALIZADA = "NAO_REALIZADA"
STATUS_REALIZADO = "REALIZADO"
STATUS_CHOICES = (STATUS_SOLICITADO, STATUS_AGENDADO, STATUS_NAO_REALIZADA, STATUS_REALIZADO)

# o encarregado só pode apagar enquanto a troca não foi agendada/realizada
DELETABLE_STATUSES = (STATUS_SOLICITADO, STATUS_NAO_REALIZADA)

class SwapRequest(db.Model):
    __tablename__ = "swap_requests"

    id = db.Column(db.Integer, primary_key=True)

    # crachás de quem sai e de quem entra
    employee_id_out = db.Column(db.String(20), nullable=False, index=True)
    employee_id_in = db.Column(db.String(20), nullable=False, index=True)

    swap_date = db.Column(db.Date, nullable=False, index=True)
    payback_date = db.Column(db.Date, nullable=False, index=True)

    employee_function = db.Column(db.String(20), nullable=False)
    group_out = db.Column(db.String(20), nullable=False)
    group_in = db.Column(db.String(20), nullable=False)

    event_type = db.Column(db.String(20), nullable=False, index=True)
    status = db.Column(db.String(20), default=STATUS_SOLICITADO, nullable=False, index=True)
    observation = db.Column(db.Text, nullable=True)

    submitted_by_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    submitted_by = db.relationship("User", backref=db.backref("swap_requests", lazy="dynamic"))

    # substituições geram um registro espelho com os dados invertidos
    is_mirror = db.Column(db.Boolean, default=False, nullable=False)
    related_request_id = db.Column(db.Integer, db.ForeignKey("swap_requests.id"), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def build_mirror(self) -> "SwapRequest":
        return SwapRequest(
            employee_id_out=self.employee_id_in,
            employee_id_in=self.employee_id_out,
            swap_date=self.payback_date,
            payback_date=self.swap_date,
            group_out=self.group_in,
            group_in=self.group_out,
            employee_function=self.employee_function,
            event_type=self.event_type,
            status=self.status,
            submitted_by_id=self.submitted_by_id,
            is_mirror=True,
            related_request_id=self.id,
            observation=f"Registro espelho automático da solicitação {self.id}",
        )

    def is_deletable(self) -> bool:
        return self.status in DELETABLE_STATUSES

    def to_dict(self) -> dict:
        submitter = self.submitted_by
        return {
            "id": self.id,
            "employeeIdOut": self.employee_id_out,
            "employeeIdIn": self.employee_id_in,
            "swapDate": self.swap_date.isoformat(),
            "paybackDate": self.payback_date.isoformat(),
            "employeeFunction": self.employee_function,
            "groupOut": self.group_out,
            "groupIn": self.group_in,
            "eventType": self.event_type,
            "status": self.status,
            "observation": self.observation,
            "submittedById": self.submitted_by_id,
            "submittedBy": {
                "id": submitter.id,
                "name": submitter.name,
                "loginIdentifier": submitter.login_identifier,
                "role": submitter.role,
            } if submitter else None,
            "isMirror": self.is_mirror,
            "relatedRequestId": self.related_request_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<SwapRequest {self.id} {self.employee_id_out}->{self.employee_id_in} {self.status}>"
