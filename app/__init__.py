from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from config import Config

# ✅ Fix for Windows: Use PyMySQL instead of MySQLdb
import pymysql
pymysql.install_as_MySQLdb()

db = SQLAlchemy()

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)

    with app.app_context():
        # Import models and routes here to register with the app
        from app.models import School
        from app.routes import main, school
        from app.services.school_storage import SchoolStorage

        # Record store behind the add-school form; tests may swap in another one
        app.extensions.setdefault('school_storage', SchoolStorage())

        # Register blueprints
        app.register_blueprint(main.bp)
        app.register_blueprint(school.bp)

        # Create all database tables (if not already created)
        db.create_all()

        # Register error handlers
        register_error_handlers(app)

    return app

def register_error_handlers(app):
    """Register global error handlers"""
    from flask import render_template
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return render_template('errors/500.html'), 500

    @app.errorhandler(Exception)
    def handle_exception(e):
        # Log the error
        app.logger.error(f'Unhandled exception: {str(e)}')

        # If it's an HTTP exception, return the appropriate error page
        if isinstance(e, HTTPException):
            if e.code == 404:
                return render_template('errors/404.html'), 404
            return e

        # For any other exception, return 500
        db.session.rollback()
        return render_template('errors/500.html'), 500
