"""
Flask Extensions

Identity comes from a signed cookie resolved per request; there is no
server-side session for signed-in users.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager, fed by a request loader rather than the session
login_manager = LoginManager()
