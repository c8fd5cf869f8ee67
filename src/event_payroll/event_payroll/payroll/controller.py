from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from ..container import Container
from ..hours.service import compute_breakdown
from .parsing import parse_assignment, parse_event, parse_now

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def json_endpoint(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"ok": False, "error": str(e)}), 400
            except Exception:
                logger.exception("Unhandled error in %s", request.path)
                return jsonify({"ok": False, "error": "Internal error"}), 500

        return wrapper

    def _payload() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object body")
        return data

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        return jsonify({"ok": True})

    @app.route("/api/events/hours", methods=["POST"], endpoint="api_event_hours")
    @json_endpoint
    def api_event_hours():
        event = parse_event(_payload())
        breakdown = compute_breakdown(event, container.hours_factory)
        return jsonify({"ok": True, "hours": breakdown.to_dict()})

    @app.route("/api/payroll/calculate", methods=["POST"], endpoint="api_payroll_calculate")
    @json_endpoint
    def api_payroll_calculate():
        data = _payload()
        event = parse_event(data.get("event"))
        assignments = data.get("assignments")
        if not isinstance(assignments, list):
            raise ValidationError("assignments must be a list")

        now = parse_now(data.get("now")) or now_local()
        entries = [(event, parse_assignment(a, event_id=event.event_id)) for a in assignments]
        report = container.payroll_report_service.build_report(entries, now=now)
        return jsonify({"ok": True, "calculations": report.rows, "summary": report.summary.to_dict()})

    @app.route("/api/payroll/report", methods=["POST"], endpoint="api_payroll_report")
    @json_endpoint
    def api_payroll_report():
        data = _payload()
        raw_entries = data.get("entries")
        if not isinstance(raw_entries, list):
            raise ValidationError("entries must be a list")

        entries = []
        for item in raw_entries:
            if not isinstance(item, dict):
                raise ValidationError("each entry must be an object")
            event = parse_event(item.get("event"))
            entries.append((event, parse_assignment(item.get("assignment"), event_id=event.event_id)))

        now = parse_now(data.get("now")) or now_local()
        report = container.payroll_report_service.build_report(entries, now=now)
        return jsonify({"ok": True, "rows": report.rows, "summary": report.summary.to_dict()})
