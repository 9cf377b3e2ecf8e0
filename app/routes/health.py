"""
Endpoint de health check geral da API
"""
from datetime import datetime, timezone
import logging

from flask import Blueprint
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.database import db
from app.utils.responses import build_response

logger = logging.getLogger(__name__)

bp = Blueprint('health', __name__, url_prefix='/api')


@bp.route('/health', methods=['GET'])
def health_check():
    """Healthcheck endpoint para verificar se a API está online e o banco de dados está acessível"""
    timestamp = datetime.now(timezone.utc).isoformat()

    try:
        with db.engine.connect() as conn:
            conn.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        logger.error(f"Health check falhou: {e}")
        return build_response(
            'service_unavailable',
            503,
            'API online, mas o banco de dados está inacessível',
            {'timestamp': timestamp},
            errors={'message': str(e)},
        )

    return build_response('success', 200, 'API online', {'timestamp': timestamp})
