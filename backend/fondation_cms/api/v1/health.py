from flask import jsonify
from fondation_cms.services import get_services
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    services = get_services()
    return jsonify({
        "status": "ok",
        "service": "fondation-cms",
        "storage": "available" if services.storage.available else "unavailable",
        "initialized": services.repository.is_initialized(),
    })
