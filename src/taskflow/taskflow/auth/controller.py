from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.enums import MODULE_LABELS, Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "username" not in session:
                return jsonify({"error": "Please sign in to continue"}), 401
            return view(*args, **kwargs)

        return wrapper

    def _current_role() -> Role:
        return Role(session["role"])

    def _me() -> dict:
        role = _current_role()
        modules = container.permission_service.matrix.modules_for(role)
        return {
            "username": session["username"],
            "role": role.value,
            "modules": [m.value for m in modules],
            "moduleLabels": {m.value: MODULE_LABELS[m] for m in modules},
        }

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401

        session.clear()
        session.permanent = bool(data.get("remember"))
        session["username"] = s_user.username
        session["role"] = s_user.role.value

        app.logger.info("User %s signed in as %s", s_user.username, s_user.role.value)
        return jsonify(_me()), 200

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"ok": True}), 200

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(_me()), 200

    @app.route("/api/permissions", methods=["GET"], endpoint="permissions")
    @login_required
    def permissions():
        return jsonify(container.permission_service.matrix.to_dict()), 200

    @app.route("/api/permissions", methods=["PUT"], endpoint="permissions_update")
    @login_required
    def permissions_update():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a {role: {module: bool}} object"}), 400
        try:
            matrix = container.permission_service.replace_matrix(current_role=_current_role(), data=data)
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403
        return jsonify(matrix.to_dict()), 200
