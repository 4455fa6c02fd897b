from __future__ import annotations

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_wtf import CSRFProtect
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_caching import Cache

db: SQLAlchemy = SQLAlchemy()
migrate: Migrate = Migrate()
csrf: CSRFProtect = CSRFProtect()

# Tag listings are memoized here; post streams are never cached
cache: Cache = Cache()

login_manager: LoginManager = LoginManager()
login_manager.session_protection = "basic"

# Rate limiter (IP-based); default limit comes from RATELIMIT_DEFAULT
limiter: Limiter = Limiter(key_func=get_remote_address)
