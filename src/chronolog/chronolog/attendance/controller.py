from __future__ import annotations

import csv
import io
import logging
from datetime import date
from typing import Optional

import mysql.connector
from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import (
    AttendanceStateError,
    DomainError,
    DuplicateClockInError,
    DuplicateClockOutError,
    NoClockInRecordError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    ValidationError: (400, "invalid_argument"),
    NoClockInRecordError: (404, "no_clock_in_record"),
    DuplicateClockInError: (409, "duplicate_clock_in"),
    DuplicateClockOutError: (409, "duplicate_clock_out"),
}


def _error_response(e: DomainError):
    status, kind = _ERROR_STATUS.get(type(e), (400, "domain_error"))
    body = {"success": False, "error": kind, "message": str(e)}
    if isinstance(e, AttendanceStateError):
        body["employee_id"] = e.employee_id
        body["work_date"] = e.work_date.isoformat()
    return jsonify(body), status


def _parse_date_arg(name: str) -> Optional[date]:
    value = request.args.get(name)
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError as e:
        raise ValidationError(f"{name} must be a YYYY-MM-DD date") from e


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _write_history_csv(*, rows, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=[
                "work_date",
                "employee_id",
                "clock_in_time",
                "clock_out_time",
                "state",
                "working_seconds",
            ],
            extrasaction="ignore",
        )
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return send_file(
            io.BytesIO(csv_bytes),
            mimetype="text/csv",
            as_attachment=True,
            download_name=filename,
        )

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return _error_response(e)

    def handle_storage_error(e: Exception):
        logger.error("Attendance store failure: %s", e, exc_info=e)
        return jsonify({"success": False, "error": "storage_error", "message": "Attendance store failure"}), 500

    app.register_error_handler(StorageError, handle_storage_error)
    app.register_error_handler(mysql.connector.Error, handle_storage_error)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    @app.route("/api/attendance/<employee_id>/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in(employee_id: str):
        record = service.clock_in(employee_id)
        return jsonify({"success": True, "record": record.to_dict()}), 201

    @app.route("/api/attendance/<employee_id>/clock-out", methods=["POST"], endpoint="clock_out")
    def clock_out(employee_id: str):
        record = service.clock_out(employee_id)
        return jsonify(
            {
                "success": True,
                "record": record.to_dict(),
                "working_seconds": service.working_seconds(record),
            }
        ), 200

    @app.route("/api/attendance/<employee_id>/history", methods=["GET"], endpoint="attendance_history")
    def attendance_history(employee_id: str):
        rows = service.get_history_summary(employee_id, start=_parse_date_arg("start"), end=_parse_date_arg("end"))
        return jsonify({"success": True, "employee_id": employee_id, "records": rows}), 200

    @app.route("/api/attendance/<employee_id>/history.csv", methods=["GET"], endpoint="attendance_history_csv")
    def attendance_history_csv(employee_id: str):
        rows = service.get_history_summary(employee_id, start=_parse_date_arg("start"), end=_parse_date_arg("end"))
        return _write_history_csv(rows=rows, filename=f"attendance_{employee_id}.csv")

    @app.route("/api/attendance/<employee_id>/status", methods=["GET"], endpoint="attendance_status")
    def attendance_status(employee_id: str):
        state = service.get_status(employee_id)
        record = service.get_today_record(employee_id)
        return jsonify(
            {
                "success": True,
                "employee_id": employee_id,
                "state": state.value,
                "record": record.to_dict() if record else None,
            }
        ), 200
