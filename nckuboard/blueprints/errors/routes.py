from flask import render_template, request, current_app
from werkzeug.exceptions import HTTPException
from flask_wtf.csrf import CSRFError
from ...errors import NotFoundError, AlreadyAcceptedError
from . import errors_bp

# 403 – Forbidden
@errors_bp.app_errorhandler(403)
def err_403(e):
    return render_template("errors/403.html", error=e), 403

# 404 – Not Found
@errors_bp.app_errorhandler(404)
def err_404(e):
    return render_template("errors/404.html", path=request.path), 404

# Unknown task id raised from the store
@errors_bp.app_errorhandler(NotFoundError)
def err_task_not_found(e):
    return render_template("errors/404.html", path=request.path), 404

# Accept raced with someone else (or a stale form was resubmitted)
@errors_bp.app_errorhandler(AlreadyAcceptedError)
def err_already_accepted(e):
    return render_template("errors/409.html", error=e), 409

# 405 – Method Not Allowed
@errors_bp.app_errorhandler(405)
def err_405(e):
    return render_template("errors/405.html", error=e), 405

# CSRF – typically treated as 400 Bad Request
@errors_bp.app_errorhandler(CSRFError)
def err_csrf(e):
    # e.description is human-readable
    return render_template("errors/400_csrf.html", error=e), 400

# 500 – Internal Server Error
@errors_bp.app_errorhandler(500)
def err_500(e):
    return render_template("errors/500.html"), 500

# Fallback for uncaught HTTPException (shows friendly page with code/desc)
@errors_bp.app_errorhandler(HTTPException)
def err_http(e: HTTPException):
    # If not specifically handled above, render a generic HTTP error page.
    return render_template("errors/http_generic.html", code=e.code, name=e.name, description=e.description), e.code

# Last-resort: any other Exception
@errors_bp.app_errorhandler(Exception)
def err_unexpected(e):
    current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
    # Don’t leak internals—just show generic 500
    return render_template("errors/500.html"), 500
