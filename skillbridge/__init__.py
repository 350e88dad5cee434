import os
from flask import Flask, send_from_directory
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt

# Initialize extensions
db = SQLAlchemy()
bcrypt = Bcrypt()


def create_app(config_object='skillbridge.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize extensions
    db.init_app(app)
    bcrypt.init_app(app)

    from skillbridge.errors import NotFoundError, register_error_handlers
    register_error_handlers(app, db)

    @app.route('/uploads/<path:filename>', methods=['GET'])
    def serve_upload(filename):
        """Serve stored documents from the upload folder."""
        uploads_folder = app.config['UPLOAD_FOLDER']
        full_path = os.path.join(uploads_folder, filename)
        print(f"[DEBUG] Serving file from uploads folder: {full_path}")
        if not os.path.isfile(full_path):
            print(f"[ERROR] File not found: {full_path}")
            raise NotFoundError('File not found')
        return send_from_directory(uploads_folder, filename)

    # Create tables if they don't exist
    with app.app_context():
        create_tables()

    # Import and register Blueprints
    from skillbridge.auth_routes import auth_bp
    from skillbridge.registration_routes import registration_bp
    from skillbridge.entrepreneur_routes import entrepreneur_bp
    from skillbridge.freelance_routes import freelance_bp
    from skillbridge.listing_routes import listing_bp
    from skillbridge.collaboration_routes import collaboration_bp
    from skillbridge.match_routes import match_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(registration_bp, url_prefix='/registrations')
    app.register_blueprint(entrepreneur_bp, url_prefix='/entrepreneurs')
    app.register_blueprint(freelance_bp, url_prefix='/freelances')
    app.register_blueprint(listing_bp, url_prefix='/listings')
    app.register_blueprint(collaboration_bp, url_prefix='/collaborations')
    app.register_blueprint(match_bp, url_prefix='/matches')

    return app


def create_tables():
    # Registers the tables on db.metadata
    from skillbridge import models  # noqa: F401

    db.create_all()
