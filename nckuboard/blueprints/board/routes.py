# nckuboard/blueprints/board/routes.py
from datetime import date

from flask import render_template, redirect, url_for, flash, abort, current_app
from flask_login import login_required

from . import board_bp
from .forms import TaskForm, AcceptForm
from ...errors import InvalidInputError, AlreadyAcceptedError
from ...extensions import _
from ...services.notification_service import notify_task_accepted
from ...services.session_context import SessionContext
from ...services.task_store import TaskStore


# -----------------
# Helpers
# -----------------

def _store() -> TaskStore:
    return current_app.extensions["task_store"]


def _clean(field) -> str:
    return (field.data or '').strip()


def _render_dashboard(form: TaskForm, identity, open_form=False):
    return render_template('board/dashboard.html', tasks=_store().list_all(), form=form,
                           identity=identity, open_form=open_form)


def _render_detail(task, identity, form: AcceptForm | None = None):
    if form is None:
        form = AcceptForm(helper_email=identity.email)
    return render_template('board/task_detail.html', task=task, form=form, identity=identity)


# -----------------
# Dashboard + Publish
# -----------------

@board_bp.route('', methods=['GET'])
@login_required
def dashboard():
    identity = SessionContext.from_request().require_identity()
    return _render_dashboard(TaskForm(), identity)


@board_bp.route('', methods=['POST'])
@login_required
def task_create():
    identity = SessionContext.from_request().require_identity()
    form = TaskForm()
    if not form.validate_on_submit():
        flash(_('Please check the task form.'), 'warning')
        return _render_dashboard(form, identity, open_form=True)

    try:
        t = _store().create(
            title=_clean(form.title),
            reward=_clean(form.reward),
            content=_clean(form.content),
            publisher_email=identity.email,
            created_date=date.today(),
        )
    except InvalidInputError:
        flash(_('Title, reward and details are all required.'), 'warning')
        return _render_dashboard(form, identity, open_form=True)

    current_app.logger.info("Task #%s published by %s", t.id, identity.email)
    flash(_('Task published.'), 'success')
    return redirect(url_for('board.dashboard'))


# -----------------
# Detail + Accept
# -----------------

@board_bp.route('/<int:task_id>')
@login_required
def task_detail(task_id):
    identity = SessionContext.from_request().require_identity()
    t = _store().find_by_id(task_id)
    if t is None:
        abort(404)
    return _render_detail(t, identity)


@board_bp.post('/<int:task_id>/accept')
@login_required
def task_accept(task_id):
    identity = SessionContext.from_request().require_identity()
    form = AcceptForm()
    if not form.validate_on_submit():
        t = _store().find_by_id(task_id)
        if t is None:
            abort(404)
        flash(_('Please check the email you entered.'), 'warning')
        return _render_detail(t, identity, form)

    # NotFoundError falls through to the errors blueprint (404 page)
    try:
        t = _store().accept(task_id, _clean(form.helper_email))
    except InvalidInputError:
        t = _store().find_by_id(task_id)
        if t is None:
            abort(404)
        flash(_('Please use an NCKU email (@gs.ncku.edu.tw or @ncku.edu.tw).'), 'warning')
        return _render_detail(t, identity, form)
    except AlreadyAcceptedError:
        flash(_('Someone already took this task.'), 'info')
        return redirect(url_for('board.task_detail', task_id=task_id))

    flash(notify_task_accepted(t), 'success')
    return _render_detail(t, identity)
