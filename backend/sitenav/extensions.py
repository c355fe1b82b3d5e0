from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from .cache import MenuCache

db = SQLAlchemy()
migrate = Migrate()
menu_cache = MenuCache()
