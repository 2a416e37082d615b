from __future__ import annotations

from datetime import date, datetime

import mysql.connector
import pytest

from chronolog.attendance.model import AttendanceRecord
from chronolog.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from chronolog.core.exceptions import RecordConflictError, RecordNotFoundError


class FakeCursor:
    def __init__(self, *, rows=None, error=None, rowcount=1, lastrowid=7):
        self.rows = list(rows or [])
        self.error = error
        self.rowcount = rowcount
        self.lastrowid = lastrowid
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        if self.error is not None:
            raise self.error

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor):
        self.conn = FakeConnection(cursor)

    def connect(self):
        return self.conn


ROW = {
    "attendance_id": 3,
    "employee_id": "E001",
    "work_date": date(2026, 2, 2),
    "clock_in_time": datetime(2026, 2, 2, 8, 0, 0),
    "clock_out_time": None,
}


def _new_record() -> AttendanceRecord:
    return AttendanceRecord(employee_id="E001", work_date=date(2026, 2, 2), clock_in_time=datetime(2026, 2, 2, 8, 0, 0))


def test_find_maps_row_to_record():
    cur = FakeCursor(rows=[ROW])
    repo = MySQLAttendanceRepository(FakeConnFactory(cur))

    rec = repo.find_for_employee_and_date("E001", date(2026, 2, 2))

    assert rec == AttendanceRecord(
        attendance_id=3,
        employee_id="E001",
        work_date=date(2026, 2, 2),
        clock_in_time=datetime(2026, 2, 2, 8, 0, 0),
    )
    assert cur.executed[0][1] == ("E001", date(2026, 2, 2))


def test_find_returns_none_without_row():
    repo = MySQLAttendanceRepository(FakeConnFactory(FakeCursor()))

    assert repo.find_for_employee_and_date("E001", date(2026, 2, 2)) is None
    assert repo.exists_for_employee_and_date("E001", date(2026, 2, 2)) is False


def test_history_query_orders_by_work_date_desc():
    cur = FakeCursor(rows=[ROW])
    repo = MySQLAttendanceRepository(FakeConnFactory(cur))

    assert len(repo.list_for_employee("E001")) == 1
    assert "ORDER BY work_date DESC" in cur.executed[0][0]


def test_insert_returns_record_with_new_id():
    factory = FakeConnFactory(FakeCursor(lastrowid=11))
    repo = MySQLAttendanceRepository(factory)

    saved = repo.save(_new_record())

    assert saved.attendance_id == 11
    assert factory.conn.committed


def test_duplicate_key_on_insert_becomes_conflict():
    err = mysql.connector.IntegrityError(msg="Duplicate entry", errno=1062)
    factory = FakeConnFactory(FakeCursor(error=err))
    repo = MySQLAttendanceRepository(factory)

    with pytest.raises(RecordConflictError):
        repo.save(_new_record())
    assert factory.conn.rolled_back


def test_other_integrity_errors_propagate_unchanged():
    err = mysql.connector.IntegrityError(msg="Column cannot be null", errno=1048)
    repo = MySQLAttendanceRepository(FakeConnFactory(FakeCursor(error=err)))

    with pytest.raises(mysql.connector.IntegrityError):
        repo.save(_new_record())


def test_update_of_missing_row_fails():
    repo = MySQLAttendanceRepository(FakeConnFactory(FakeCursor(rowcount=0)))
    record = AttendanceRecord(
        attendance_id=5,
        employee_id="E001",
        work_date=date(2026, 2, 2),
        clock_in_time=datetime(2026, 2, 2, 8, 0, 0),
        clock_out_time=datetime(2026, 2, 2, 17, 0, 0),
    )

    with pytest.raises(RecordNotFoundError):
        repo.save(record)


def test_update_of_already_clocked_out_row_conflicts():
    cur = FakeCursor(rows=[{"found": 1}], rowcount=0)
    factory = FakeConnFactory(cur)
    repo = MySQLAttendanceRepository(factory)
    record = AttendanceRecord(
        attendance_id=5,
        employee_id="E001",
        work_date=date(2026, 2, 2),
        clock_in_time=datetime(2026, 2, 2, 8, 0, 0),
        clock_out_time=datetime(2026, 2, 2, 17, 0, 0),
    )

    with pytest.raises(RecordConflictError):
        repo.save(record)

    assert "clock_out_time IS NULL" in cur.executed[0][0]
    assert factory.conn.rolled_back
