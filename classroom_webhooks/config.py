import os


class DefaultConfig:
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "secrettoeveryone")
    WEBHOOK_SECRET = os.environ.get("WEBHOOK_SECRET")
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///classroom_webhooks.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    def __init__(self):
        if not self.WEBHOOK_SECRET:
            raise Exception("Required setting 'WEBHOOK_SECRET' is missing")
        # Heroku still hands out postgres:// urls, which SQLAlchemy 1.4+
        # refuses to load.
        if self.SQLALCHEMY_DATABASE_URI.startswith("postgres://"):
            self.SQLALCHEMY_DATABASE_URI = "postgresql://" + self.SQLALCHEMY_DATABASE_URI[len("postgres://"):]


class DevelopmentConfig(DefaultConfig):
    DEBUG = True


class TestingConfig(DefaultConfig):
    TESTING = True
    WEBHOOK_SECRET = "testing webhook secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
