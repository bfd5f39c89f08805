from wtforms import StringField
from wtforms.validators import DataRequired, AnyOf
from ...models.settings import DAYS_OF_WEEK
from ...utils.forms import JsonForm

class SettingsForm(JsonForm):
    submissionStartDay = StringField("Dia de início", validators=[
        DataRequired(message="Dia de início é obrigatório."),
        AnyOf(DAYS_OF_WEEK, message="Dia de início inválido."),
    ])
    submissionEndDay = StringField("Dia final", validators=[
        DataRequired(message="Dia final é obrigatório."),
        AnyOf(DAYS_OF_WEEK, message="Dia final inválido."),
    ])
