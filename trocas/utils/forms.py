from __future__ import annotations
from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import DateField
from ..errors import ValidationError
from .dates import parse_iso_date


class JsonForm(FlaskForm):
    """Formulário alimentado por JSON/query string (API com token, sem CSRF)."""

    class Meta:
        csrf = False


class IsoDateField(DateField):
    def __init__(self, label=None, validators=None, invalid_message="Data inválida.", **kwargs):
        super().__init__(label, validators, **kwargs)
        self.invalid_message = invalid_message

    def process_formdata(self, valuelist):
        if not valuelist or not valuelist[0]:
            self.data = None
            return
        self.data = parse_iso_date(valuelist[0])
        if self.data is None:
            raise ValueError(self.invalid_message)


def strip(value):
    return value.strip() if isinstance(value, str) else value


def json_formdata(payload) -> MultiDict:
    """Converte o corpo JSON em MultiDict para o WTForms.

    ``null`` vira string vazia (o campo conta como enviado), booleanos viram
    ``"true"``/``"false"`` e listas viram valores repetidos.
    """
    data = MultiDict()
    if not isinstance(payload, dict):
        return data
    for key, value in payload.items():
        if value is None:
            data.add(key, "")
        elif isinstance(value, bool):
            data.add(key, "true" if value else "false")
        elif isinstance(value, (list, tuple)):
            for item in value:
                data.add(key, str(item))
        else:
            data.add(key, str(value))
    return data


def _check(form):
    if not form.validate():
        issues = {name: errors for name, errors in form.errors.items() if name is not None}
        message = form.form_errors[0] if form.form_errors else None
        raise ValidationError(message, issues=issues)
    return form


def validate_json(form_cls, payload=None):
    if payload is None:
        payload = request.get_json(silent=True)
    return _check(form_cls(formdata=json_formdata(payload)))


def validate_args(form_cls):
    return _check(form_cls(formdata=request.args))
