# config.py
# Конфигурация приложения Flask

import os

class Config:
    # Абсолютный путь к базе данных
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        f'sqlite:///{os.path.join(BASE_DIR, "instance", "hackathon.db")}'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-change-me')  # Замени на случайный ключ в продакшене
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Допустимый диапазон оценки судьи
    RATING_MIN = 1
    RATING_MAX = 100


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'test'
    LOG_LEVEL = 'DEBUG'
