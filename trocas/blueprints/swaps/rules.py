"""Regras cruzadas de criação de uma solicitação.

Funções puras: recebem as datas já convertidas e o dia de referência e
devolvem a lista de ``(campo, mensagem)`` violados.
"""
from __future__ import annotations
from datetime import date
from ...utils.dates import same_month


def swap_field_issues(employee_id_out: str, employee_id_in: str,
                      swap_date: date, payback_date: date, today: date) -> list[tuple[str, str]]:
    issues = []

    if employee_id_out and employee_id_in and employee_id_out == employee_id_in:
        issues.append(("employeeIdIn", "Crachá de Entrada deve ser diferente do Crachá de Saída."))

    if swap_date < today:
        issues.append(("swapDate", "Data da Troca não pode ser no passado."))
    if payback_date < today:
        issues.append(("paybackDate", "Data do Pagamento não pode ser no passado."))

    if swap_date == payback_date:
        issues.append(("paybackDate", "Data da Troca e Data do Pagamento não podem ser o mesmo dia."))

    # mês e ano: janeiro/2025 e janeiro/2026 não são o mesmo mês
    if not same_month(swap_date, payback_date):
        issues.append(("paybackDate", "Troca deve ocorrer dentro do mesmo mês."))

    return issues
