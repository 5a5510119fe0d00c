# nckuboard/blueprints/auth/routes.py
from urllib.parse import urlparse

from flask import render_template, redirect, url_for, request, session, flash, current_app
from flask_login import current_user

from ...errors import InvalidCredentialsError
from ...extensions import _
from ...services.session_context import SessionContext
from . import auth_bp
from .forms import LoginForm


def _safe_redirect(default):
    ref = request.referrer
    if ref:
        u = urlparse(ref)
        # same-origin http(s) only; rejects javascript: and friends
        if u.scheme in ("", "http", "https") and (not u.netloc or u.netloc == request.host):
            return ref
    return url_for(default)


# -----------------
# Login
# -----------------

@auth_bp.route('/')
def index():
    if current_user.is_authenticated:
        return redirect(url_for('board.dashboard'))
    return render_template('auth/login.html', form=LoginForm())


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('board.dashboard'))

    form = LoginForm()
    if form.validate_on_submit():
        ctx = SessionContext()
        try:
            ctx.login(form.email.data.strip())
        except InvalidCredentialsError as e:
            return render_template('auth/login.html', form=form, error=str(e))

        ctx.persist()
        return redirect(url_for('board.dashboard'))

    return render_template('auth/login.html', form=form)


# -----------------
# Language
# -----------------

@auth_bp.route("/i18n/set", methods=["POST"], endpoint="set_language")
def set_language():
    lang = (request.form.get("lang") or "").strip()
    if lang not in current_app.config.get("LANGUAGES", []):
        flash(_("Unsupported language."), "warning")
        return redirect(_safe_redirect("auth.index"))

    session["lang"] = lang
    current_app.logger.info(f"[i18n] lang set -> {lang}")
    return redirect(_safe_redirect("auth.index"))
