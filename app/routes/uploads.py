from flask import Blueprint

from app.controllers.api.v1.uploads import upload_file
from app.utils.auth import require_jwt_auth

uploads_bp = Blueprint('uploads', __name__, url_prefix='/api')


@uploads_bp.route('/upload', methods=['POST'])
@require_jwt_auth
def upload():
    """Upload de arquivo (multipart, campo `file`)"""
    return upload_file()
