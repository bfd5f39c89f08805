from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from ...extensions import db
from ...models.swap import SwapRequest, STATUS_NAO_REALIZADA
from ...models.user import ROLE_ADMIN, ROLE_ENCARREGADO
from ...utils.audit import record_audit
from ...utils.forms import validate_json, validate_args
from ...utils.security import require_roles
from .forms import SwapRequestForm, RequestListForm, SummaryQueryForm, StatusUpdateForm, RequestUpdateForm
from .services import (
    create_swap_request, build_request_query, filter_date_range,
    list_vigencias, summarize, delete_swap_request,
)

swaps_bp = Blueprint("requests", __name__, url_prefix="/api/requests")

NOT_FOUND = "Solicitação não encontrada."

@swaps_bp.get("")
@login_required
def index():
    form = validate_args(RequestListForm)
    # encarregado só enxerga o que ele mesmo enviou
    owner_id = None if current_user.is_admin() else current_user.id
    requests = build_request_query(form, owner_id).all()
    return jsonify({"requests": [r.to_dict() for r in requests]})

@swaps_bp.post("")
@login_required
@require_roles(ROLE_ENCARREGADO, message="Acesso negado. Apenas encarregados podem criar solicitações.")
def create():
    form = validate_json(SwapRequestForm)
    swap = create_swap_request(form, current_user)
    record_audit(
        current_user,
        "CREATE_SWAP_REQUEST",
        f"User created swap request {swap.id} ({swap.event_type}) from {swap.employee_id_out} to {swap.employee_id_in}.",
        swap.id,
        "SwapRequest",
    )
    return jsonify({"request": swap.to_dict()}), 201

@swaps_bp.get("/vigencias")
@login_required
def vigencias():
    return jsonify(list_vigencias(current_user.id))

@swaps_bp.get("/vigencias/all")
@login_required
@require_roles(ROLE_ADMIN)
def vigencias_all():
    return jsonify(list_vigencias())

@swaps_bp.get("/summary")
@login_required
@require_roles(ROLE_ADMIN)
def summary():
    form = validate_args(SummaryQueryForm)
    query = filter_date_range(SwapRequest.query, SwapRequest.swap_date, form.swapDateStart.data, form.swapDateEnd.data)
    return jsonify(summarize(query))

@swaps_bp.get("/summary/user")
@login_required
def summary_user():
    form = validate_args(SummaryQueryForm)
    query = SwapRequest.query.filter(SwapRequest.submitted_by_id == current_user.id)
    query = filter_date_range(query, SwapRequest.swap_date, form.swapDateStart.data, form.swapDateEnd.data)
    return jsonify(summarize(query))

@swaps_bp.patch("/<int:request_id>/status")
@login_required
@require_roles(ROLE_ADMIN, message="Acesso negado. Apenas administradores podem alterar o status.")
def update_status(request_id: int):
    swap = db.get_or_404(SwapRequest, request_id, description=NOT_FOUND)
    form = validate_json(StatusUpdateForm)

    swap.status = form.status.data or STATUS_NAO_REALIZADA
    db.session.commit()

    record_audit(
        current_user,
        "UPDATE_REQUEST_STATUS",
        f"Status for request {swap.id} set to {swap.status}",
        swap.id,
        "SwapRequest",
    )
    return jsonify({"request": swap.to_dict()})

@swaps_bp.patch("/<int:request_id>")
@login_required
@require_roles(ROLE_ADMIN, message="Acesso negado. Apenas administradores podem atualizar solicitações.")
def update(request_id: int):
    swap = db.get_or_404(SwapRequest, request_id, description=NOT_FOUND)
    form = validate_json(RequestUpdateForm)

    # campo enviado com null/"" limpa a observação
    observation_sent = bool(form.observation.raw_data)
    if observation_sent:
        swap.observation = form.observation.data or None
    if form.status.data:
        swap.status = form.status.data
    db.session.commit()

    if observation_sent:
        shown = f'"{swap.observation}"' if swap.observation else "null"
        record_audit(
            current_user,
            "UPDATE_REQUEST_OBSERVATION",
            f"Observation for request {swap.id} set to: {shown}",
            swap.id,
            "SwapRequest",
        )
    if form.status.data:
        record_audit(
            current_user,
            "UPDATE_REQUEST_STATUS",
            f"Status for request {swap.id} set to {swap.status}",
            swap.id,
            "SwapRequest",
        )
    return jsonify({"request": swap.to_dict()})

@swaps_bp.delete("/<int:request_id>")
@login_required
def delete(request_id: int):
    swap = db.get_or_404(SwapRequest, request_id, description=NOT_FOUND)
    removed = delete_swap_request(swap, current_user)
    record_audit(
        current_user,
        "DELETE_SWAP_REQUEST",
        f"User deleted swap request {request_id} (removed ids: {', '.join(map(str, removed))}).",
        request_id,
        "SwapRequest",
    )
    return "", 204
