from flask_sqlalchemy import SQLAlchemy

# Process-wide extension; the engine is created lazily on first use per app.
db = SQLAlchemy()
