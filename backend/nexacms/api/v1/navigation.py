# nexacms/api/v1/navigation.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from nexacms.utils.decorators import roles_required, current_role
from nexacms.application.validation import parse_input
from nexacms.application.navigation.schemas import MenuCreate
from nexacms.application.navigation.queries import get_menu, list_menus as query_menus
from nexacms.application.navigation.menus import create_menu as create_menu_service
from nexacms.application.navigation.menus import update_menu as update_menu_service
from nexacms.application.navigation.menus import delete_menu as delete_menu_service
from nexacms.application.navigation.add_item import add_item as add_item_service
from nexacms.application.navigation.update_item import update_item as update_item_service
from nexacms.application.navigation.move_item import move_item as move_item_service
from nexacms.application.navigation.reorder_items import reorder_items as reorder_items_service
from nexacms.application.navigation.delete_item import delete_item as delete_item_service
from nexacms.application.navigation.queries import get_item
from nexacms.application.navigation.resolve_tree import resolve_tree
from nexacms.normalizers.navigation import normalize_menu, normalize_item, normalize_tree_node
from . import v1_bp


def _flag(name, default=False):
    value = request.args.get(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes")


# ------------------------
# Menus
# ------------------------

@v1_bp.route("/navigation/menus", methods=["GET"])
@jwt_required()
def list_menus():
    menus = query_menus(location=request.args.get("location"))
    return jsonify([normalize_menu(m, include_items=True) for m in menus])


@v1_bp.route("/navigation/menus", methods=["POST"])
@jwt_required()
@roles_required("ADMIN")
def create_menu():
    payload = parse_input(MenuCreate, request.get_json(silent=True))

    menu = create_menu_service(
        role=current_role(),
        name=payload.name,
        location=payload.location,
        is_active=payload.is_active,
    )

    return jsonify(normalize_menu(menu)), 201


@v1_bp.route("/navigation/menus/<menu_id>", methods=["GET"])
@jwt_required()
def get_menu_with_tree(menu_id):
    menu = get_menu(menu_id)
    data = normalize_menu(menu)
    data["items"] = [
        normalize_tree_node(n)
        for n in resolve_tree(menu.id, visible_only=_flag("visible_only"))
    ]
    return jsonify(data)


@v1_bp.route("/navigation/menus/<menu_id>", methods=["PATCH"])
@jwt_required()
@roles_required("ADMIN")
def update_menu(menu_id):
    data = request.get_json(silent=True) or {}
    menu = update_menu_service(role=current_role(), menu_id=menu_id, data=data)
    return jsonify(normalize_menu(menu)), 200


@v1_bp.route("/navigation/menus/<menu_id>", methods=["DELETE"])
@jwt_required()
@roles_required("ADMIN")
def delete_menu(menu_id):
    deleted_items = delete_menu_service(role=current_role(), menu_id=menu_id)
    return jsonify({"message": "Menu deleted", "deleted_items_count": deleted_items}), 200


# ------------------------
# Items
# ------------------------

@v1_bp.route("/navigation/menus/<menu_id>/items", methods=["POST"])
@jwt_required()
@roles_required("ADMIN")
def create_item(menu_id):
    data = request.get_json(silent=True) or {}
    item = add_item_service(role=current_role(), menu_id=menu_id, data=data)
    return jsonify(normalize_item(item)), 201


@v1_bp.route("/navigation/menus/<menu_id>/items/<item_id>", methods=["PATCH"])
@jwt_required()
@roles_required("ADMIN")
def update_item(menu_id, item_id):
    data = request.get_json(silent=True) or {}
    item = update_item_service(role=current_role(), menu_id=menu_id, item_id=item_id, data=data)
    return jsonify(normalize_item(item)), 200


@v1_bp.route("/navigation/menus/<menu_id>/items/<item_id>/move", methods=["POST"])
@jwt_required()
@roles_required("ADMIN")
def move_item(menu_id, item_id):
    get_item(item_id, menu_id)
    data = request.get_json(silent=True) or {}

    item = move_item_service(
        role=current_role(),
        item_id=item_id,
        new_parent_id=data.get("parent_id"),
    )

    return jsonify(normalize_item(item)), 200


@v1_bp.route("/navigation/menus/<menu_id>/items/order", methods=["PUT"])
@jwt_required()
@roles_required("ADMIN")
def reorder_items(menu_id):
    data = request.get_json(silent=True) or {}

    items = reorder_items_service(
        role=current_role(),
        menu_id=menu_id,
        entries=data.get("items") or [],
    )

    return jsonify([normalize_item(i) for i in items]), 200


@v1_bp.route("/navigation/menus/<menu_id>/items/<item_id>", methods=["DELETE"])
@jwt_required()
@roles_required("ADMIN")
def delete_item(menu_id, item_id):
    get_item(item_id, menu_id)
    deleted_children = delete_item_service(role=current_role(), item_id=item_id)

    return jsonify({
        "message": "Navigation item deleted",
        "deleted_children_count": deleted_children,
    }), 200
