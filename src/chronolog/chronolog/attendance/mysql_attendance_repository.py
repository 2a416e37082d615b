from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.constants import MYSQL_DUPLICATE_KEY_ERRNO
from ..core.exceptions import RecordConflictError, RecordNotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, employee_id, work_date, clock_in_time, clock_out_time"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        clock_in_time=r["clock_in_time"],
        clock_out_time=r.get("clock_out_time"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def exists_for_employee_and_date(self, employee_id: str, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT 1 AS found
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                LIMIT 1
                """,
                (employee_id, work_date),
            )
            return fetchone(cur) is not None

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s
                ORDER BY work_date DESC
                """,
                (employee_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        if record.attendance_id is None:
            return self._insert(record)
        return self._update(record)

    def _insert(self, record: AttendanceRecord) -> AttendanceRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(employee_id, work_date, clock_in_time, clock_out_time)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (record.employee_id, record.work_date, record.clock_in_time, record.clock_out_time),
                )
                new_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if e.errno == MYSQL_DUPLICATE_KEY_ERRNO:
                raise RecordConflictError(
                    f"attendance record already exists for {record.employee_id} on {record.work_date.isoformat()}"
                ) from e
            raise
        return replace(record, attendance_id=new_id)

    def _update(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET clock_out_time=%s
                WHERE attendance_id=%s AND clock_out_time IS NULL
                """,
                (record.clock_out_time, int(record.attendance_id)),
            )
            if cur.rowcount == 0:
                cur.execute(
                    "SELECT 1 AS found FROM attendance_records WHERE attendance_id=%s",
                    (int(record.attendance_id),),
                )
                if fetchone(cur) is None:
                    raise RecordNotFoundError(f"attendance record {record.attendance_id} not found")
                raise RecordConflictError(f"attendance record {record.attendance_id} is already clocked out")
        return record
