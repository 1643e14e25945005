from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.logging import get_logger
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    def _member_id_from_request() -> str:
        if request.is_json:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                data = {}
        else:
            data = request.form
        return str(data.get("member_id", "") or "").strip()

    def _transition(action, *, success_message: str, failure_message: str):
        member_id = _member_id_from_request()
        try:
            record = action(member_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            body = {"success": False, "message": str(e)}
            # Still show who was scanned (e.g. expired membership).
            if member_id:
                try:
                    body["member"] = container.attendance_service.member_info(member_id)
                except (NotFoundError, ValidationError):
                    pass
            return jsonify(body), 400
        except Exception:
            logger.exception("Unexpected error during %s for member %r", action.__name__, member_id)
            return jsonify({"success": False, "message": failure_message}), 500

        return jsonify({
            "success": True,
            "message": success_message,
            "record": {
                "id": record.id,
                "member_id": record.member_id,
                "type": record.type.value,
                "timestamp": record.timestamp.isoformat(),
                "date": record.date,
            },
            "member": container.attendance_service.member_info(record.member_id),
        }), 200

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    def checkin():
        return _transition(
            container.attendance_service.check_in,
            success_message="Check-in successful!",
            failure_message="System error during check-in",
        )

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="checkout")
    def checkout():
        return _transition(
            container.attendance_service.check_out,
            success_message="Check-out successful!",
            failure_message="System error during check-out",
        )

    @app.route("/api/members/<member_id>/attendance", methods=["GET"], endpoint="member_attendance")
    def member_attendance(member_id: str):
        limit = request.args.get("limit", type=int)
        try:
            rows = container.attendance_service.history_for_member(member_id, limit=limit)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "records": rows}), 200
