from flask import request, jsonify
from flask_jwt_extended import jwt_required
from nexacms.utils.decorators import roles_required, current_role
from nexacms.application.site.site_config import get_site_config, update_site_config
from nexacms.normalizers.site_config import normalize_site_config
from . import v1_bp


@v1_bp.route("/site-config", methods=["GET"])
@jwt_required()
def read_site_config():
    return jsonify(normalize_site_config(get_site_config()))


@v1_bp.route("/site-config", methods=["PUT"])
@jwt_required()
@roles_required("ADMIN")
def write_site_config():
    data = request.get_json(silent=True) or {}
    config = update_site_config(role=current_role(), data=data)
    return jsonify(normalize_site_config(config)), 200
