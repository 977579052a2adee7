# File: qr_attendance/__init__.py
"""QR Attendance - Application Factory."""
import logging
import os
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
limiter = Limiter(key_func=get_remote_address)


def create_app(config_name: str = None) -> Flask:
    """Application factory pattern."""
    app = Flask(__name__)

    # Load configuration
    from qr_attendance.config import get_config
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    # Configure CORS
    CORS(app, origins=app.config.get('CORS_ORIGINS', "*"))

    # Setup logging
    setup_logging(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Setup database
    setup_database(app)

    # Add CLI commands
    register_commands(app)

    @app.route('/health')
    def health_check():
        from qr_attendance.utils.helpers import success_response
        return success_response(
            data={'service': 'QR Attendance', 'version': '1.0.0'},
            message='healthy'
        )

    return app


def register_blueprints(app: Flask) -> None:
    """Register all application blueprints."""
    from qr_attendance.api.users import users_bp
    from qr_attendance.api.sessions import sessions_bp, session_pages_bp
    from qr_attendance.api.attendance import attendance_bp
    from qr_attendance.api.reports import reports_bp
    from qr_attendance.api.views import views_bp

    # Directory management
    app.register_blueprint(users_bp, url_prefix='/api')

    # Core Features
    app.register_blueprint(sessions_bp, url_prefix='/api')
    app.register_blueprint(attendance_bp, url_prefix='/api')
    app.register_blueprint(session_pages_bp, url_prefix='/session')
    app.register_blueprint(reports_bp, url_prefix='/report')

    # Static pages
    app.register_blueprint(views_bp)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers."""
    from sqlalchemy.exc import SQLAlchemyError
    from werkzeug.exceptions import HTTPException
    from qr_attendance.utils.errors import AttendanceError
    from qr_attendance.utils.helpers import handle_error

    @app.errorhandler(AttendanceError)
    def attendance_error(error):
        return handle_error(error, error.status_code)

    @app.errorhandler(SQLAlchemyError)
    def database_error(error):
        db.session.rollback()
        app.logger.error('Database error: %s', error)
        return handle_error(error, 500)

    @app.errorhandler(HTTPException)
    def handle_exception(e):
        return handle_error(e.description, e.code)


def setup_logging(app: Flask) -> None:
    """Setup application logging."""
    # app.logger is the "qr_attendance" logger; service module loggers propagate to it
    level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'), logging.INFO)
    app.logger.setLevel(level)

    if not app.debug and not app.testing:
        log_file = app.config['LOG_FILE']
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(level)
        app.logger.addHandler(file_handler)

        app.logger.info('QR Attendance startup')


def setup_database(app: Flask) -> None:
    """Create the schema and demo rows when configured to."""
    # Import all models so their tables are registered
    from qr_attendance.models import User, Section, CheckinSession, AttendanceRecord  # noqa: F401

    if not app.config.get('AUTO_INIT_DB'):
        return

    from qr_attendance.services.seed_service import SeedService

    with app.app_context():
        SeedService(db.session).init_database(seed=app.config.get('SEED_DEMO_DATA', True))


def register_commands(app: Flask) -> None:
    """Register CLI commands."""
    import click
    from qr_attendance.services.seed_service import SeedService

    @app.cli.command('init-db')
    @click.option('--drop', is_flag=True, help='Drop existing tables')
    def init_db(drop):
        """Initialize the database."""
        if drop:
            db.drop_all()
            click.echo('Dropped all tables.')

        seeded = SeedService(db.session).init_database(seed=app.config.get('SEED_DEMO_DATA', True))
        click.echo('Created all tables.')
        if seeded:
            click.echo('Seeded demo users and sections.')

    @app.cli.command('seed-db')
    def seed_db():
        """Seed database with demo data if it is empty."""
        if SeedService(db.session).seed_demo_data():
            click.echo('Database seeded successfully!')
        else:
            click.echo('Users already present, nothing seeded.')
