# extensions.py
# Файл для хранения экземпляров расширений Flask

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from blinker import Namespace

db = SQLAlchemy()
migrate = Migrate()

# Сигналы приложения (изменение представлений после мутаций)
signals = Namespace()
