from __future__ import annotations
from datetime import datetime
from ..extensions import db

# mesma ordem do calendário brasileiro (domingo primeiro)
DAYS_OF_WEEK = ("SUNDAY", "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY")

SETTINGS_ID = 1

class Settings(db.Model):
    """Linha única (id=1) com a janela semanal de envio de solicitações."""

    __tablename__ = "settings"

    id = db.Column(db.Integer, primary_key=True)
    submission_start_day = db.Column(db.String(10), default="MONDAY", nullable=False)
    submission_end_day = db.Column(db.String(10), default="WEDNESDAY", nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @classmethod
    def load(cls) -> "Settings":
        """Retorna a linha de configurações, criando com os padrões se faltar."""
        settings = db.session.get(cls, SETTINGS_ID)
        if settings is None:
            settings = cls(id=SETTINGS_ID, submission_start_day="MONDAY", submission_end_day="WEDNESDAY")
            db.session.add(settings)
            db.session.commit()
        return settings

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "submissionStartDay": self.submission_start_day,
            "submissionEndDay": self.submission_end_day,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<Settings {self.submission_start_day}-{self.submission_end_day}>"
