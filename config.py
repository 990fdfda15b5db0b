import os
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))

# Load .env file
load_dotenv(os.environ.get("BACK_MARK_ENV_FILE", os.path.join(basedir, ".env")))


def construct_sqlite_db_uri(db_file):
    return f"sqlite:///{db_file}"


def construct_postgres_db_uri(user, password, host, port, db_name):
    if not all([user, password, host, port, db_name]):
        return None
    return f"postgresql+psycopg://{user}:{password}@{host}:{port}/{db_name}"


def parse_actions(value, default):
    if not value:
        return default
    return tuple(a.strip() for a in value.split(",") if a.strip())


def parse_bool(value, default=False):
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        construct_sqlite_db_uri(os.path.join(basedir, 'back_mark.db'))
    )

    # Back mark
    BACK_MARK_IGNORE_ACTIONS = parse_actions(
        os.environ.get('BACK_MARK_IGNORE_ACTIONS'),
        ("new", "edit", "create", "update", "destroy")
    )
    BACK_MARK_LEGACY_MARK_NOW = parse_bool(os.environ.get('BACK_MARK_LEGACY_MARK_NOW'))
    BACK_MARK_SESSION_PREFIX = os.environ.get('BACK_MARK_SESSION_PREFIX', '')
    BACK_MARK_LINK_ID = os.environ.get('BACK_MARK_LINK_ID', 'back_link')
    BACK_MARK_SAFE_REDIRECTS = parse_bool(os.environ.get('BACK_MARK_SAFE_REDIRECTS'), default=True)


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class ProductionConfig(BaseConfig):
    SQLALCHEMY_DATABASE_URI = construct_postgres_db_uri(
        user=os.environ.get('POSTGRES_DB_USER'),
        password=os.environ.get('POSTGRES_DB_PSWD'),
        host=os.environ.get('POSTGRES_DB_HOST'),
        port=os.environ.get('POSTGRES_DB_PORT'),
        db_name=os.environ.get('POSTGRES_DB_NAME')
    ) or BaseConfig.SQLALCHEMY_DATABASE_URI
    DEBUG = False


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = 'testing-secret'
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
