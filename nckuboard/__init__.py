import os
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler
from flask import Flask, request, session
from .extensions import login_manager, csrf, babel
from .config import Config
from .services.session_context import load_identity
from .services.task_store import TaskStore
from flask_babel import get_locale

# Blueprints
from .blueprints.errors import errors_bp
from .blueprints.auth import auth_bp
from .blueprints.board import board_bp


# Optional: Sentry
def _init_sentry(app):
    dsn = app.config.get("SENTRY_DSN")
    if not dsn:
        return
    try:
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=dsn,
            integrations=[FlaskIntegration()],
            traces_sample_rate=app.config.get("SENTRY_TRACES_SAMPLE_RATE", 0.0),
            environment=os.getenv("ENV", "development"),
            release=os.getenv("GIT_COMMIT", None),
            send_default_pii=False,
        )
        app.logger.info("Sentry initialized.")
    except Exception as e:
        app.logger.warning(f"Sentry init failed: {e}")

def _init_logging(app):
    # Base level
    level_name = app.config.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    app.logger.setLevel(level)

    # app.logger is shared by every app built in this process; drop handlers
    # left over from a previous create_app() call
    for h in list(app.logger.handlers):
        app.logger.removeHandler(h)
        h.close()

    # Ensure log dir exists
    log_dir = Path(app.config.get("LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / app.config.get("LOG_FILENAME", "nckuboard.log")

    # Formatter: text or JSON
    if app.config.get("LOG_JSON", False):
        import json_log_formatter
        formatter = json_log_formatter.JSONFormatter()
    else:
        formatter = logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s")

    # Rotating file handler (5MB x 5)
    file_handler = RotatingFileHandler(
        log_path, maxBytes=5_000_000, backupCount=5, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    app.logger.addHandler(file_handler)

    # Stream to stdout as well (useful on dev/heroku/docker)
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    app.logger.addHandler(stream_handler)

    app.logger.info("Logging initialized.")

def create_app(config_object=None, task_store=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object or Config)
    app.config.from_pyfile("config.py", silent=True)

    app.config.setdefault("SECRET_KEY", "change-me")
    app.config.setdefault("BABEL_DEFAULT_LOCALE", "zh_TW")
    app.config.setdefault("LANGUAGES", ["zh_TW", "en"])

    # Logging must come before blueprints so errors during register are captured
    _init_logging(app)
    _init_sentry(app)

    # Extensions
    login_manager.init_app(app)
    csrf.init_app(app)

    # ---- Babel init (locale from session/Accept-Language) ----
    def _select_locale():
        return (
            session.get("lang")
            or request.accept_languages.best_match(app.config.get("LANGUAGES", ["zh_TW"]))
            or app.config["BABEL_DEFAULT_LOCALE"]
        )
    babel.init_app(app, locale_selector=_select_locale)

    @app.context_processor
    def inject_i18n_helpers():
        def _safe_get_locale():
            # get_locale() can return None early in the request
            loc = get_locale()
            return str(loc) if loc else app.config["BABEL_DEFAULT_LOCALE"]
        return {"get_locale": _safe_get_locale}

    login_manager.user_loader(load_identity)
    login_manager.login_view = "auth.login"
    login_manager.login_message_category = "warning"

    # The board's only state: one store per app, owned here and handed to
    # handlers through app.extensions
    if task_store is None:
        task_store = TaskStore()
        if app.config.get("SEED_DEMO_TASK", True):
            task_store.seed_demo_task()
    app.extensions["task_store"] = task_store
    app.logger.info("Task store ready with %d task(s).", len(task_store))

    # Blueprints
    app.register_blueprint(errors_bp)  # error handlers
    app.register_blueprint(auth_bp)
    app.register_blueprint(board_bp)

    return app
