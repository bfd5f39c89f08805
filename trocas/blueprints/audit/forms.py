from wtforms import StringField, IntegerField
from wtforms.validators import Optional, NumberRange, AnyOf, ValidationError
from ...utils.forms import JsonForm, IsoDateField

class AuditLogListForm(JsonForm):
    action = StringField(validators=[Optional()])
    userId = IntegerField(validators=[Optional(), NumberRange(min=1, message="Usuário inválido.")])
    userLoginIdentifier = StringField(validators=[Optional()])
    targetResourceType = StringField(validators=[Optional()])
    timestampStart = IsoDateField(validators=[Optional()])
    timestampEnd = IsoDateField(validators=[Optional()])
    limit = IntegerField(default=10, validators=[
        Optional(), NumberRange(min=1, max=100, message="Limite deve estar entre 1 e 100."),
    ])
    offset = IntegerField(default=0, validators=[
        Optional(), NumberRange(min=0, message="Offset não pode ser negativo."),
    ])
    sortBy = StringField(default="timestamp", validators=[
        Optional(), AnyOf(("timestamp", "action", "userLoginIdentifier"), message="Coluna de ordenação inválida."),
    ])
    sortOrder = StringField(default="desc", validators=[
        Optional(), AnyOf(("asc", "desc"), message="Ordem inválida."),
    ])

    def validate_timestampEnd(self, field):
        if field.data and self.timestampStart.data and field.data < self.timestampStart.data:
            raise ValidationError("Data final não pode ser anterior à inicial.")
