from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.enums import EntryStatus, ModuleKey, Role
from ..core.exceptions import ResourceError, ValidationError
from ..container import Container
from .model import FilterState


def register(app: Flask, container: Container) -> None:
    def time_tracking_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "username" not in session:
                return jsonify({"error": "Please sign in to continue"}), 401

            role = Role(session.get("role"))
            if not container.permission_service.can_access(role, ModuleKey.TIME_TRACKING):
                return jsonify({"error": "You do not have access to Time Tracking"}), 403

            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except ResourceError as e:
                app.logger.warning("Time entries API error: %s", e)
                return jsonify({"error": str(e)}), 502

        return wrapper

    def _filters() -> FilterState:
        return FilterState.from_params(
            query=request.args.get("q"),
            status=request.args.get("status"),
            from_date=request.args.get("from"),
            to_date=request.args.get("to"),
        )

    @app.route("/api/time-entries", methods=["GET"], endpoint="time_entries")
    @time_tracking_required
    def time_entries():
        data = container.time_entry_service.get_dashboard(_filters())
        return jsonify({"items": data.rows, "summary": data.summary}), 200

    @app.route("/api/time-entries/report", methods=["GET"], endpoint="time_entries_report")
    @time_tracking_required
    def time_entries_report():
        data = container.time_entry_service.get_dashboard(_filters())
        return jsonify(data.summary), 200

    @app.route("/api/time-entries", methods=["POST"], endpoint="time_entries_create")
    @time_tracking_required
    def time_entries_create():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object")
        try:
            status = EntryStatus(data.get("status") or EntryStatus.CLOCKED_IN.value)
        except ValueError:
            raise ValidationError("Unknown status") from None

        entry = container.time_entry_service.add_entry(
            employee=data.get("employee", ""),
            location=data.get("location", ""),
            date=data.get("date", ""),
            clock_in=data.get("clockIn", ""),
            clock_out=data.get("clockOut"),
            status=status,
        )
        return jsonify({"item": entry.to_dict()}), 201

    @app.route("/api/time-entries/<entry_id>", methods=["DELETE"], endpoint="time_entries_delete")
    @time_tracking_required
    def time_entries_delete(entry_id: str):
        container.time_entry_service.remove_entry(entry_id)
        return jsonify({"ok": True}), 200

    @app.route("/api/time-entries/<entry_id>/clock-out", methods=["POST"], endpoint="time_entries_clock_out")
    @time_tracking_required
    def time_entries_clock_out(entry_id: str):
        entry = container.time_entry_service.clock_out_now(entry_id)
        return jsonify({"item": entry.to_dict()}), 200
