from functools import wraps
from flask import abort, current_app
from flask_login import current_user

def require_roles(*roles: str, message: str = "Acesso negado."):
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if not current_user.is_authenticated:
                return current_app.login_manager.unauthorized()
            if getattr(current_user, "role", None) not in roles:
                abort(403, description=message)
            return f(*args, **kwargs)
        return wrapper
    return decorator
