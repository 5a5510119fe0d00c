# nckuboard/blueprints/auth/forms.py
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length

from ...extensions import _l


class LoginForm(FlaskForm):
    # Domain check happens in SessionContext.login, not here, so the
    # rejection surfaces as InvalidCredentialsError like any other caller's
    email = StringField(_l("School email"), validators=[DataRequired(), Length(max=255)])
    submit = SubmitField(_l("Verify and enter"))
