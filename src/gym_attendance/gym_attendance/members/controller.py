from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.clock import parse_iso_datetime
from ..common.logging import get_logger
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .model import UNSET, MemberUpdate
from .photo import read_upload

logger = get_logger(__name__)

_UPDATABLE_TEXT = ("name", "email", "phone", "membership_type", "photo")
_UPDATABLE_DATES = ("membership_start_date", "membership_end_date")


def register(app: Flask, container: Container) -> None:
    def _fail(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _payload() -> dict:
        if not request.is_json:
            return request.form.to_dict()
        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _text_changes(data: dict) -> dict:
        changes = {}
        for k in _UPDATABLE_TEXT:
            if k not in data:
                continue
            value = data[k]
            if not isinstance(value, str) and not (k == "photo" and value is None):
                raise ValidationError(f"{k} must be text")
            changes[k] = value
        return changes

    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    def list_members():
        term = request.args.get("q", "")
        svc = container.member_service
        members = svc.search(term)
        if not members:
            message = "No members found matching your search." if term.strip() else "No members registered yet."
            return jsonify({"success": True, "members": [], "message": message}), 200
        return jsonify({"success": True, "members": svc.member_cards(members)}), 200

    @app.route("/api/members", methods=["POST"], endpoint="register_member")
    def register_member():
        try:
            data = _payload()
            if request.is_json:
                photo = data.get("photo") or None
            else:
                photo = read_upload(request.files.get("photo"))

            member = container.member_service.register(
                name=data.get("name", ""),
                email=data.get("email", ""),
                phone=data.get("phone", ""),
                membership_type=data.get("membership_type", ""),
                photo=photo,
            )
            card = container.member_service.member_cards([member])[0]
            return jsonify({
                "success": True,
                "message": f"Member registered successfully! ID: {member.id}",
                "member": card,
            }), 201
        except ValidationError as e:
            return _fail(str(e), 400)
        except Exception:
            logger.exception("Unexpected error while registering member")
            return _fail("System error while registering member", 500)

    @app.route("/api/members/<member_id>", methods=["GET"], endpoint="get_member")
    def get_member(member_id: str):
        try:
            member = container.member_service.get(member_id)
            return jsonify({"success": True, "member": container.member_service.member_cards([member])[0]}), 200
        except NotFoundError as e:
            return _fail(str(e), 404)

    @app.route("/api/members/<member_id>", methods=["PATCH"], endpoint="update_member")
    def update_member(member_id: str):
        try:
            data = _payload()
            changes = _text_changes(data)
            for k in _UPDATABLE_DATES:
                if k in data:
                    try:
                        changes[k] = parse_iso_datetime(data[k])
                    except ValueError:
                        raise ValidationError(f"Invalid date for {k}")
            if "photo" not in changes and "photo" in request.files:
                changes["photo"] = read_upload(request.files["photo"])

            update = MemberUpdate(**{k: changes.get(k, UNSET) for k in _UPDATABLE_TEXT + _UPDATABLE_DATES})
            if update.is_empty():
                return _fail("Nothing to update", 400)

            member = container.member_service.update(member_id, update)
            return jsonify({
                "success": True,
                "message": "Member updated",
                "member": container.member_service.member_cards([member])[0],
            }), 200
        except ValidationError as e:
            return _fail(str(e), 400)
        except NotFoundError as e:
            return _fail(str(e), 404)
        except Exception:
            logger.exception("Unexpected error while updating member %s", member_id)
            return _fail("System error while updating member", 500)

    @app.route("/api/members/<member_id>", methods=["DELETE"], endpoint="delete_member")
    def delete_member(member_id: str):
        if not container.member_service.delete(member_id):
            return _fail("Member not found. Please check the ID and try again.", 404)
        return jsonify({"success": True, "message": "Member deleted"}), 200
