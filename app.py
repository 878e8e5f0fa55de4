# app.py
# Основной файл Flask-приложения с использованием паттерна Application Factory

import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from config import Config
from extensions import db, migrate
from errors import ReviewError, handle_review_error
from logging_config import setup_logging

# Важно импортировать модели здесь, чтобы Alembic (Migrate) мог их видеть
from models import User, Hackathon, Track, Team, TeamMember, Submission, Judge, Review

def create_app(config_class=Config):
    # Создаем экземпляр приложения
    app = Flask(__name__)
    app.config.from_object(config_class)
    setup_logging(app.config.get('LOG_LEVEL', 'INFO'))
    os.makedirs(app.instance_path, exist_ok=True)

    # --- Инициализируем расширения С ПРИЛОЖЕНИЕМ ---
    db.init_app(app)
    migrate.init_app(app, db)

    # --- Регистрируем наши Blueprints (маршруты) ---
    from routes.auth import auth_bp
    from routes.main import main_bp
    from routes.reviews import reviews_bp
    from routes.admin import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)
    app.register_blueprint(reviews_bp)
    app.register_blueprint(admin_bp)

    # Unauthorized / NotFound / PersistenceFailure -> JSON
    app.register_error_handler(ReviewError, handle_review_error)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code

    from seed_data import seed_demo_command
    app.cli.add_command(seed_demo_command)

    return app
