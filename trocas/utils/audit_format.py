"""Textos legíveis para o log de auditoria.

Os detalhes gravados em ``AuditLog.details`` são frases fixas em inglês
montadas pelas rotas; aqui extraímos os pedaços relevantes com regex e
remontamos a frase em português para a tela de auditoria.
"""
from __future__ import annotations

import re

ACTION_LABELS = {
    "USER_LOGIN": "Login de Usuário",
    "ADMIN_CREATE_USER": "Admin Criou Usuário",
    "ADMIN_UPDATE_USER": "Admin Atualizou Usuário",
    "ADMIN_UPDATE_USER_STATUS": "Admin Alterou Status de Usuário",
    "CREATE_SWAP_REQUEST": "Criou Solicitação de Troca",
    "UPDATE_REQUEST_STATUS": "Atualizou Status da Solicitação",
    "UPDATE_REQUEST_OBSERVATION": "Atualizou Observação da Solicitação",
    "DELETE_SWAP_REQUEST": "Deletou Solicitação de Troca",
    "UPDATE_SETTINGS": "Atualizou Configurações",
}

_CREATE_REQUEST_RE = re.compile(r"User created swap request (\d+) \(([^)]+)\) from (\d+) to (\d+)")
_STATUS_RE = re.compile(r"set to (\w+)")
_CREATE_USER_RE = re.compile(r"Admin created user '([^']+)'")
_UPDATE_USER_RE = re.compile(r"Admin updated user (.+?) \(ID: \d+\)\. Changes: (.+)")
_USER_STATUS_RE = re.compile(r"isActive=(true|false) for user (.+?) \(ID: \d+\)")
_SETTINGS_RE = re.compile(r"Submission window set to (\w+)-(\w+)")


def action_label(action: str) -> str:
    return ACTION_LABELS.get(action, action)


def describe(log) -> str:
    details = log.details or ""
    performer = log.performed_by
    user_name = performer.name if performer else log.user_login_identifier
    login = performer.login_identifier if performer else log.user_login_identifier
    target = f"{log.target_resource_id} ({log.target_resource_type})"

    if log.action == "USER_LOGIN":
        return f"Usuário {user_name} ({login}) fez login."

    if log.action == "ADMIN_CREATE_USER":
        m = _CREATE_USER_RE.search(details)
        created = m.group(1) if m else "[Nome Desconhecido]"
        return f"Admin {user_name} ({login}) criou o usuário {created}."

    if log.action == "CREATE_SWAP_REQUEST":
        m = _CREATE_REQUEST_RE.search(details)
        if m:
            request_id, event_type, out_id, in_id = m.groups()
            return f"Solicitação de Troca {event_type} (ID: {request_id}) de {out_id} para {in_id} criada por {user_name}."
        return f"Solicitação de Troca criada por {user_name}."

    if log.action == "UPDATE_REQUEST_STATUS":
        m = _STATUS_RE.search(details)
        new_status = m.group(1) if m else "[Status Desconhecido]"
        return f"Status da solicitação {target} atualizado para {new_status} por {user_name}."

    if log.action == "UPDATE_REQUEST_OBSERVATION":
        return f"Observação da solicitação {target} atualizada por {user_name}."

    if log.action == "DELETE_SWAP_REQUEST":
        return f"Solicitação de Troca {target} deletada por {user_name}."

    if log.action == "ADMIN_UPDATE_USER":
        m = _UPDATE_USER_RE.search(details)
        if m:
            return f"Admin {user_name} atualizou o usuário {m.group(1)}. Alterações: {m.group(2)}."
        return f"Admin {user_name} atualizou um usuário."

    if log.action == "ADMIN_UPDATE_USER_STATUS":
        m = _USER_STATUS_RE.search(details)
        if m:
            verb = "ativou" if m.group(1) == "true" else "desativou"
            return f"Admin {user_name} {verb} o usuário {m.group(2)}."
        return f"Admin {user_name} alterou o status de um usuário."

    if log.action == "UPDATE_SETTINGS":
        m = _SETTINGS_RE.search(details)
        if m:
            return f"Janela de submissão alterada para {m.group(1)} a {m.group(2)} por {user_name}."
        return f"Configurações atualizadas por {user_name}."

    return details or "-"


def serialize_log(log) -> dict:
    performer = log.performed_by
    return {
        "id": log.id,
        "timestamp": log.timestamp.isoformat(),
        "action": log.action,
        "actionLabel": action_label(log.action),
        "details": log.details,
        "description": describe(log),
        "userId": log.user_id,
        "userLoginIdentifier": log.user_login_identifier,
        "targetResourceId": log.target_resource_id,
        "targetResourceType": log.target_resource_type,
        "performedBy": {
            "name": performer.name,
            "loginIdentifier": performer.login_identifier,
            "role": performer.role,
        } if performer else None,
    }
