import logging

from flask import Flask
from flask_cors import CORS

from app.config import Config
from app.database import init_db
from app.error_handlers import register_error_handlers
from app.utils import sanitize
from app.utils.rate_limit import limiter


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )

    # Preserva a ordem das colunas e os acentos no JSON
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    CORS(app,
         resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}},
         supports_credentials=False,  # Bearer token, sem cookies
         allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
         methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    # Inicializar banco de dados
    init_db(app)

    limiter.init_app(app)
    sanitize.set_allowed_tags(app.config.get('SANITIZE_ALLOWED_TAGS', []))

    from app.routes import authentication
    app.register_blueprint(authentication.auth_bp)

    from app.routes import entities
    app.register_blueprint(entities.entities_bp)

    from app.routes import uploads
    app.register_blueprint(uploads.uploads_bp)

    # Health check endpoint
    from app.routes import health
    app.register_blueprint(health.bp)

    register_error_handlers(app)

    return app
