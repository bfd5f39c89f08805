"""Erros da API e tratadores que respondem sempre em JSON."""
from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .extensions import db


class ApiError(Exception):
    status_code = 400
    default_message = "Requisição inválida."

    def __init__(self, message: str | None = None, status_code: int | None = None, issues: dict | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.issues = issues

    def to_dict(self) -> dict:
        payload = {"message": self.message}
        if self.issues:
            payload["issues"] = self.issues
        return payload


class ValidationError(ApiError):
    """Falha de validação de formulário; ``issues`` traz as mensagens por campo."""

    default_message = "Erro de validação."


class BusinessRuleError(ApiError):
    """Regra de negócio violada (janela de submissão, dono da solicitação, etc)."""


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException):
        return jsonify({"message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        db.session.rollback()
        app.logger.exception("Erro inesperado: %s", err)
        return jsonify({"message": "Erro interno do servidor."}), 500
