import os
from urllib.parse import urlparse
import pymysql
pymysql.install_as_MySQLdb()

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'change_this_secret_key')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    JWT_EXPIRATION_HOURS = int(os.getenv("JWT_EXPIRATION_HOURS", "24"))
    JWT_COOKIE_NAME = "access_token"
    JWT_COOKIE_SECURE = os.getenv("JWT_COOKIE_SECURE", "True") == "True"
    JWT_COOKIE_SAMESITE = os.getenv("JWT_COOKIE_SAMESITE", "None")

    CORS_ORIGINS = os.getenv(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@planetario.edu.br")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

    MAX_WEIGHT_KG = 1000
    MAX_DROP_HEIGHT_M = 10000

class DevConfig(Config):
    """Development Configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = "DEBUG"
    JWT_COOKIE_SECURE = False
    JWT_COOKIE_SAMESITE = "Lax"
    SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI', 'mysql+pymysql://root:@localhost/planetarium')

class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "testing-secret-key"
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_COOKIE_SECURE = False
    JWT_COOKIE_SAMESITE = "Lax"
    LOG_LEVEL = "WARNING"

class ProdConfig(Config):
    """Production Configuration (Heroku deployment)"""
    DEBUG = False

    raw_db_url = os.getenv('DATABASE_URL')

    if raw_db_url:
        if raw_db_url.startswith("mysql://"):
            raw_db_url = raw_db_url.replace("mysql://", "mysql+pymysql://", 1)

        parsed_url = urlparse(raw_db_url)
        SQLALCHEMY_DATABASE_URI = f"{parsed_url.scheme}://{parsed_url.netloc}{parsed_url.path}"
        SQLALCHEMY_ENGINE_OPTIONS = {
            "pool_pre_ping": True,
            "pool_size": 5,
            "max_overflow": 2,
            "pool_timeout": 10
        }
    else:
        SQLALCHEMY_DATABASE_URI = os.getenv('JAWSDB_URL', 'sqlite:///planetarium.db')

config_dict = {
    "development": DevConfig,
    "testing": TestConfig,
    "production": ProdConfig
}

def get_config(name=None):
    env = (name or os.getenv('FLASK_ENV', 'production')).lower()
    return config_dict.get(env, ProdConfig)
