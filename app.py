import logging
from dotenv import load_dotenv
load_dotenv()
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
from config import get_config
from models import db
from manage import register_commands
from routes.authentication import auth_bp
from routes.admin import admin_bp
from routes.planets import planets_bp
from routes.quizzes import quizzes_bp

logger = logging.getLogger(__name__)
migrate = Migrate()


def configure_logging(app):
    logging.basicConfig(
        level=getattr(logging, app.config["LOG_LEVEL"].upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception("Unhandled exception: %s", error)
        return jsonify({"error": "Internal server error"}), 500

def create_app(config_name=None):
    app = Flask(__name__)
    config = get_config(config_name)
    app.config.from_object(config)

    configure_logging(app)
    logger.info("Starting with %s (database: %s)", config.__name__, app.config.get("SQLALCHEMY_DATABASE_URI", "").split("@")[-1])

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}}, supports_credentials=True)

    db.init_app(app)
    migrate.init_app(app, db)

    @app.route('/')
    def home():
        return jsonify({
            "message": "Welcome to the Planetarium API!",
            "planets": "/api/planets",
            "quizzes": "/api/quizzes"
        })

    @app.route('/health')
    def health():
        return jsonify({"status": "healthy"})

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(quizzes_bp, url_prefix='/api/quizzes')
    app.register_blueprint(planets_bp, url_prefix='/api')

    register_error_handlers(app)
    register_commands(app)

    return app

if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config.get('DEBUG', False))
