from __future__ import annotations
from datetime import date
from wtforms import StringField, SelectMultipleField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Optional, Regexp, AnyOf, Length, ValidationError
from ...models.swap import FUNCTION_CHOICES, GROUP_CHOICES, EVENT_CHOICES, STATUS_CHOICES
from ...utils.forms import JsonForm, IsoDateField, strip
from .rules import swap_field_issues

SORTABLE_COLUMNS = (
    "createdAt", "swapDate", "paybackDate", "id", "employeeIdOut", "employeeIdIn",
    "employeeFunction", "groupOut", "groupIn", "eventType", "status", "updatedAt",
    "isMirror", "relatedRequestId",
)

def _badge(label: str) -> StringField:
    return StringField(label, filters=[strip], validators=[
        DataRequired(message=f"Crachá de {label} obrigatório."),
        Regexp(r"^[0-9]+$", message=f"Crachá de {label} deve conter apenas números."),
        Length(max=20, message=f"Crachá de {label} muito longo."),
    ])

class SwapRequestForm(JsonForm):
    employeeIdOut = _badge("Saída")
    employeeIdIn = _badge("Entrada")
    swapDate = IsoDateField("Data da Troca", invalid_message="Data da Troca inválida.",
                            validators=[InputRequired(message="Data da Troca é obrigatória.")])
    paybackDate = IsoDateField("Data do Pagamento", invalid_message="Data do Pagamento inválida.",
                               validators=[InputRequired(message="Data do Pagamento da Folga é obrigatória.")])
    employeeFunction = StringField("Função", validators=[
        DataRequired(message="Função é obrigatória."),
        AnyOf(FUNCTION_CHOICES, message="Função inválida."),
    ])
    groupOut = StringField("Grupo de Saída", validators=[
        DataRequired(message="Grupo de Saída é obrigatório."),
        AnyOf(GROUP_CHOICES, message="Grupo de Saída inválido."),
    ])
    groupIn = StringField("Grupo de Entrada", validators=[
        DataRequired(message="Grupo de Entrada é obrigatório."),
        AnyOf(GROUP_CHOICES, message="Grupo de Entrada inválido."),
    ])

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        issues = swap_field_issues(
            self.employeeIdOut.data, self.employeeIdIn.data,
            self.swapDate.data, self.paybackDate.data, date.today(),
        )
        for field_name, message in issues:
            self[field_name].errors.append(message)
        return not issues

class RequestListForm(JsonForm):
    status = SelectMultipleField("Status", choices=[(s, s) for s in STATUS_CHOICES], validate_choice=False)
    employeeIdOut = StringField(validators=[Optional(), Regexp(r"^[0-9]+$", message="Crachá inválido.")])
    employeeIdIn = StringField(validators=[Optional(), Regexp(r"^[0-9]+$", message="Crachá inválido.")])
    employeeFunction = StringField(validators=[Optional(), AnyOf(FUNCTION_CHOICES, message="Função inválida.")])
    groupOut = StringField(validators=[Optional(), AnyOf(GROUP_CHOICES, message="Grupo inválido.")])
    groupIn = StringField(validators=[Optional(), AnyOf(GROUP_CHOICES, message="Grupo inválido.")])
    eventType = StringField(validators=[Optional(), AnyOf(EVENT_CHOICES, message="Tipo de evento inválido.")])
    swapDateStart = IsoDateField(validators=[Optional()])
    swapDateEnd = IsoDateField(validators=[Optional()])
    paybackDateStart = IsoDateField(validators=[Optional()])
    paybackDateEnd = IsoDateField(validators=[Optional()])
    sortBy = StringField(default="createdAt", validators=[
        Optional(), AnyOf(SORTABLE_COLUMNS, message="Coluna de ordenação inválida."),
    ])
    sortOrder = StringField(default="desc", validators=[
        Optional(), AnyOf(("asc", "desc"), message="Ordem inválida."),
    ])

    def validate_status(self, field):
        invalid = [s for s in field.data or [] if s not in STATUS_CHOICES]
        if invalid:
            raise ValidationError(f"Status inválido: {', '.join(invalid)}.")

    def validate_swapDateEnd(self, field):
        if field.data and self.swapDateStart.data and field.data < self.swapDateStart.data:
            raise ValidationError("Data final (Troca) não pode ser anterior à inicial.")

    def validate_paybackDateEnd(self, field):
        if field.data and self.paybackDateStart.data and field.data < self.paybackDateStart.data:
            raise ValidationError("Data final (Pagamento) não pode ser anterior à inicial.")

class SummaryQueryForm(JsonForm):
    swapDateStart = IsoDateField(validators=[Optional()])
    swapDateEnd = IsoDateField(validators=[Optional()])

    def validate_swapDateEnd(self, field):
        if field.data and self.swapDateStart.data and field.data < self.swapDateStart.data:
            raise ValidationError("Data final (Troca) não pode ser anterior à inicial.")

class StatusUpdateForm(JsonForm):
    status = StringField("Status", validators=[
        Optional(), AnyOf(STATUS_CHOICES, message="Status inválido."),
    ])

class RequestUpdateForm(JsonForm):
    status = StringField("Status", validators=[
        Optional(), AnyOf(STATUS_CHOICES, message="Status inválido."),
    ])
    observation = TextAreaField("Observação", filters=[strip], validators=[
        Optional(), Length(max=1000, message="Observação muito longa."),
    ])

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        # status vazio não conta; observação vazia limpa o campo
        if not self.status.data and not self.observation.raw_data:
            self.form_errors.append("É necessário fornecer 'status' ou 'observation' para atualizar.")
            return False
        return True
