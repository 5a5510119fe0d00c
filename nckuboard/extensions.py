from flask_login import LoginManager
from flask_wtf import CSRFProtect
from flask_babel import Babel, gettext as _, lazy_gettext as _l


login_manager = LoginManager()
csrf = CSRFProtect()
babel = Babel()
