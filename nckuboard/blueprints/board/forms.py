# nckuboard/blueprints/board/forms.py
from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SubmitField
from wtforms.validators import Length

from ...extensions import _l


# Emptiness is enforced by TaskStore; the forms only bound lengths so the
# store stays the one place that decides what a valid task is.

class TaskForm(FlaskForm):
    title = StringField(_l("Title"), validators=[Length(max=200)])
    reward = StringField(_l("Reward"), validators=[Length(max=200)])
    content = TextAreaField(_l("Details"), validators=[Length(max=5000)])
    submit = SubmitField(_l("Publish"))


class AcceptForm(FlaskForm):
    helper_email = StringField(_l("Your contact email"), validators=[Length(max=255)])
    submit = SubmitField(_l("Accept this task"))
