from flask import jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity
from nexacms.domain.access import CAPABILITIES, can
from nexacms.utils.decorators import current_role
from . import v1_bp


@v1_bp.route("/me", methods=["GET"])
@jwt_required()
def whoami():
    role = current_role()

    return jsonify({
        "identity": get_jwt_identity(),
        "role": role or None,
        "capabilities": sorted(action for action in CAPABILITIES if can(role, action)),
    }), 200
