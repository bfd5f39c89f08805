from .user import User
from .swap import SwapRequest
from .settings import Settings
from .audit_log import AuditLog

__all__ = [
    # Usuários
    "User",

    # Solicitações de troca/substituição
    "SwapRequest",

    # Janela de submissão
    "Settings",

    # Auditoria
    "AuditLog",
]
