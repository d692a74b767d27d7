# app/extensions.py
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

# --- Extensions ---
db = SQLAlchemy()
migrate = Migrate()
