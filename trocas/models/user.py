from __future__ import annotations
from datetime import datetime
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from ..extensions import db

ROLE_ADMIN = "ADMINISTRADOR"
ROLE_ENCARREGADO = "ENCARREGADO"
ROLE_CHOICES = (ROLE_ADMIN, ROLE_ENCARREGADO)

class User(db.Model, UserMixin):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)

    # Crachá (login do sistema)
    login_identifier = db.Column(db.String(32), unique=True, nullable=False, index=True)

    password_hash = db.Column(db.String(255), nullable=False)

    # ADMINISTRADOR ou ENCARREGADO
    role = db.Column(db.String(20), default=ROLE_ENCARREGADO, nullable=False, index=True)

    # nunca apagamos usuários, apenas desativamos
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "loginIdentifier": self.login_identifier,
            "role": self.role,
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<User {self.login_identifier} {self.name}>"
