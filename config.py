import os
from dotenv import load_dotenv

load_dotenv()


def _default_db_uri() -> str:
    # Prefer PyMySQL driver for Windows compatibility
    user = os.environ.get('MYSQL_USER', 'root')
    password = os.environ.get('MYSQL_PASSWORD', 'root')
    host = os.environ.get('MYSQL_HOST', '127.0.0.1')
    port = os.environ.get('MYSQL_PORT', '3306')
    db = os.environ.get('MYSQL_DB', 'school_directory')
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{db}"


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your-secret-key'
    # Use DATABASE_URL if present; else build a sensible default using PyMySQL
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or _default_db_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Pacing for the add-school form (seconds)
    SCHOOL_SUBMIT_DELAY = float(os.environ.get('SCHOOL_SUBMIT_DELAY', 1.0))
    SCHOOL_REDIRECT_DELAY = float(os.environ.get('SCHOOL_REDIRECT_DELAY', 1.5))

    # Stand-in for a real image host; every uploaded file maps to this URL
    SCHOOL_PLACEHOLDER_IMAGE_URL = os.environ.get(
        'SCHOOL_PLACEHOLDER_IMAGE_URL',
        'https://images.pexels.com/photos/289740/pexels-photo-289740.jpeg'
        '?auto=compress&cs=tinysrgb&w=800',
    )


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SCHOOL_SUBMIT_DELAY = 0.0
