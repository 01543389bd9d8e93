from flask import jsonify
from nexacms.sections.registry import active_count
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "nexacms",
        "section_templates": active_count(),
    })
