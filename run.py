# File: run.py
"""Application entry point."""
import os
import click
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@click.command()
@click.option('--initdb', is_flag=True, help='Create the schema, seed demo data if empty, and exit.')
@click.option('--host', default=lambda: os.environ.get('HOST', '127.0.0.1'), show_default='127.0.0.1')
@click.option('--port', default=lambda: int(os.environ.get('PORT', 3001)), type=int, show_default='3001')
def main(initdb, host, port):
    """Run the QR Attendance server."""
    from qr_attendance import create_app, db
    from qr_attendance.services.seed_service import SeedService

    app = create_app(os.getenv('FLASK_ENV', 'development'))

    if initdb:
        with app.app_context():
            SeedService(db.session).init_database(seed=app.config.get('SEED_DEMO_DATA', True))
        click.echo('DB init complete')
        return

    app.logger.info('Server running at http://%s:%s', host, port)
    app.run(host=host, port=port, debug=app.config.get('DEBUG', False))


if __name__ == '__main__':
    main()
