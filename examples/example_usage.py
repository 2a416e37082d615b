"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the clock-in/clock-out rules live in AttendanceService.
"""

from datetime import datetime, timedelta

from chronolog.common.datetime_utils import format_duration
from chronolog.container import build_container
from chronolog.core.exceptions import DuplicateClockInError


def main():
    container = build_container(db_config={}, storage_backend="memory")
    service = container.attendance_service

    start = datetime.now().replace(microsecond=0)
    service.clock_in("E001", now=start)
    try:
        service.clock_in("E001", now=start + timedelta(minutes=1))
    except DuplicateClockInError as e:
        print(f"rejected: {e}")

    record = service.clock_out("E001", now=start + timedelta(hours=8, minutes=30))
    print(record.to_dict())
    print("worked", format_duration(service.calculate_working_hours(record)))


if __name__ == "__main__":
    main()
