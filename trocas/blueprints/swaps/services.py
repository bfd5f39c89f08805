from __future__ import annotations
from datetime import date
from sqlalchemy import func
from ...errors import BusinessRuleError
from ...extensions import db
from ...models.settings import Settings
from ...models.swap import (
    SwapRequest, EVENT_TROCA, EVENT_SUBSTITUICAO, EVENT_CHOICES,
    STATUS_SOLICITADO, STATUS_AGENDADO, STATUS_CHOICES,
)
from ...utils.dates import is_weekend, same_iso_week, within_submission_window, day_label, month_key

# nome do parâmetro de ordenação -> coluna
SORT_COLUMNS = {
    "createdAt": SwapRequest.created_at,
    "swapDate": SwapRequest.swap_date,
    "paybackDate": SwapRequest.payback_date,
    "id": SwapRequest.id,
    "employeeIdOut": SwapRequest.employee_id_out,
    "employeeIdIn": SwapRequest.employee_id_in,
    "employeeFunction": SwapRequest.employee_function,
    "groupOut": SwapRequest.group_out,
    "groupIn": SwapRequest.group_in,
    "eventType": SwapRequest.event_type,
    "status": SwapRequest.status,
    "updatedAt": SwapRequest.updated_at,
    "isMirror": SwapRequest.is_mirror,
    "relatedRequestId": SwapRequest.related_request_id,
}


def create_swap_request(form, user, today: date | None = None) -> SwapRequest:
    """Cria a solicitação (e o espelho, se for substituição) numa única transação."""
    today = today or date.today()
    swap_date = form.swapDate.data
    payback_date = form.paybackDate.data

    if not is_weekend(swap_date) or not is_weekend(payback_date):
        raise BusinessRuleError("As datas da troca e do pagamento devem ser Sábados ou Domingos.")

    if form.groupOut.data == form.groupIn.data:
        raise BusinessRuleError("Os grupos de folga dos funcionários devem ser diferentes.")

    settings = Settings.load()
    if not within_submission_window(today, settings.submission_start_day, settings.submission_end_day):
        raise BusinessRuleError(
            f"Fora do período de submissão. A janela abre na próxima {day_label(settings.submission_start_day)}."
        )

    event_type = EVENT_TROCA if same_iso_week(swap_date, payback_date) else EVENT_SUBSTITUICAO

    original = SwapRequest(
        employee_id_out=form.employeeIdOut.data,
        employee_id_in=form.employeeIdIn.data,
        swap_date=swap_date,
        payback_date=payback_date,
        employee_function=form.employeeFunction.data,
        group_out=form.groupOut.data,
        group_in=form.groupIn.data,
        event_type=event_type,
        status=STATUS_SOLICITADO,
        submitted_by_id=user.id,
        is_mirror=False,
    )
    db.session.add(original)
    db.session.flush()

    if event_type == EVENT_SUBSTITUICAO:
        mirror = original.build_mirror()
        db.session.add(mirror)
        db.session.flush()
        original.related_request_id = mirror.id

    db.session.commit()
    return original


def build_request_query(form, submitted_by_id: int | None = None):
    """Traduz os filtros da query string em cláusulas do SQLAlchemy."""
    query = SwapRequest.query
    if submitted_by_id is not None:
        query = query.filter(SwapRequest.submitted_by_id == submitted_by_id)

    if form.status.data:
        query = query.filter(SwapRequest.status.in_(form.status.data))
    if form.employeeIdOut.data:
        query = query.filter(SwapRequest.employee_id_out == form.employeeIdOut.data)
    if form.employeeIdIn.data:
        query = query.filter(SwapRequest.employee_id_in == form.employeeIdIn.data)
    if form.employeeFunction.data:
        query = query.filter(SwapRequest.employee_function == form.employeeFunction.data)
    if form.groupOut.data:
        query = query.filter(SwapRequest.group_out == form.groupOut.data)
    if form.groupIn.data:
        query = query.filter(SwapRequest.group_in == form.groupIn.data)
    if form.eventType.data:
        query = query.filter(SwapRequest.event_type == form.eventType.data)

    query = filter_date_range(query, SwapRequest.swap_date, form.swapDateStart.data, form.swapDateEnd.data)
    query = filter_date_range(query, SwapRequest.payback_date, form.paybackDateStart.data, form.paybackDateEnd.data)

    column = SORT_COLUMNS[form.sortBy.data or "createdAt"]
    ordering = column.asc() if form.sortOrder.data == "asc" else column.desc()
    return query.order_by(ordering, SwapRequest.id.desc())


def filter_date_range(query, column, start: date | None, end: date | None):
    if start:
        query = query.filter(column >= start)
    if end:
        query = query.filter(column <= end)
    return query


def list_vigencias(submitted_by_id: int | None = None) -> list[str]:
    """Meses (``YYYY-MM``) que têm trocas, do mais recente para o mais antigo."""
    query = db.session.query(SwapRequest.swap_date).distinct()
    if submitted_by_id is not None:
        query = query.filter(SwapRequest.submitted_by_id == submitted_by_id)
    return sorted({month_key(swap_date) for (swap_date,) in query}, reverse=True)


def summarize(query, today: date | None = None) -> dict:
    today = today or date.today()

    by_status = {status: 0 for status in STATUS_CHOICES}
    rows = query.with_entities(SwapRequest.status, func.count(SwapRequest.id)).group_by(SwapRequest.status)
    for status, total in rows:
        by_status[status] = total

    by_type = {event_type: 0 for event_type in EVENT_CHOICES}
    rows = query.with_entities(SwapRequest.event_type, func.count(SwapRequest.id)).group_by(SwapRequest.event_type)
    for event_type, total in rows:
        by_type[event_type] = total

    past_due = query.filter(
        SwapRequest.status == STATUS_AGENDADO,
        SwapRequest.swap_date < today,
    ).count()

    return {
        "byStatus": by_status,
        "byType": by_type,
        "attention": {"scheduledPastDue": past_due},
    }


def delete_swap_request(swap: SwapRequest, user) -> list[int]:
    """Apaga a solicitação e o registro ligado a ela; devolve os ids removidos."""
    if swap.submitted_by_id != user.id:
        raise BusinessRuleError("Você só pode deletar solicitações enviadas por você.", 403)

    records = [swap]
    if swap.related_request_id:
        related = db.session.get(SwapRequest, swap.related_request_id)
        if related is not None:
            records.append(related)

    # o par só sai junto se nenhuma das metades já foi agendada/realizada
    if not all(record.is_deletable() for record in records):
        raise BusinessRuleError(
            "Só é possível deletar solicitações com status SOLICITADO ou NAO_REALIZADA."
        )

    # desfaz as referências cruzadas antes de apagar o par
    for record in records:
        record.related_request_id = None
    db.session.flush()

    removed = [record.id for record in records]
    for record in records:
        db.session.delete(record)
    db.session.commit()
    return removed
