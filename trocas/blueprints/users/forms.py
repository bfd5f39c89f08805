from wtforms import StringField
from wtforms.validators import InputRequired, Optional, Length, AnyOf
from ...models.user import ROLE_CHOICES
from ...utils.forms import JsonForm, strip

class UserUpdateForm(JsonForm):
    name = StringField("Nome", filters=[strip], validators=[
        Optional(), Length(min=3, max=120, message="Nome precisa ter no mínimo 3 caracteres."),
    ])
    role = StringField("Cargo", validators=[
        Optional(), AnyOf(ROLE_CHOICES, message="Cargo inválido."),
    ])

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        if not self.name.data and not self.role.data:
            self.form_errors.append("É necessário fornecer 'name' ou 'role' para atualizar.")
            return False
        return True

class UserStatusForm(JsonForm):
    isActive = StringField("Ativo", validators=[
        InputRequired(message='O estado "isActive" é obrigatório.'),
        AnyOf(("true", "false"), message='O estado "isActive" deve ser um booleano (true ou false).'),
    ])
