from wtforms import StringField, PasswordField
from wtforms.validators import DataRequired, InputRequired, Length, Regexp, AnyOf
from ...models.user import ROLE_CHOICES
from ...utils.forms import JsonForm, strip

class LoginForm(JsonForm):
    loginIdentifier = StringField("Crachá", filters=[strip], validators=[
        DataRequired(message="Crachá é obrigatório."),
        Regexp(r"^[0-9]+$", message="Crachá inválido."),
    ])
    password = PasswordField("Senha", validators=[
        InputRequired(message="Senha é obrigatória."),
        Length(min=6, message="Senha inválida"),
    ])

class RegisterForm(JsonForm):
    name = StringField("Nome", filters=[strip], validators=[
        DataRequired(message="Nome é obrigatório."),
        Length(min=3, max=120, message="Nome precisa ter no mínimo 3 caracteres."),
    ])
    loginIdentifier = StringField("Crachá", filters=[strip], validators=[
        DataRequired(message="Crachá é obrigatório."),
        Regexp(r"^[0-9]+$", message="Crachá deve conter apenas números."),
        Length(min=5, max=6, message="Crachá deve ter entre 5 e 6 dígitos."),
    ])
    password = PasswordField("Senha", validators=[
        InputRequired(message="Senha é obrigatória."),
        Length(min=6, max=128, message="Senha precisa ter no mínimo 6 caracteres"),
    ])
    role = StringField("Cargo", validators=[
        DataRequired(message="Cargo é obrigatório."),
        AnyOf(ROLE_CHOICES, message="Cargo inválido."),
    ])
