"""
Shared fixtures: a small roster, nine days of attendance and four requisitions.
"""

import json
from datetime import date, datetime

import pytest

from hrmetrics.config import load_report_config
from hrmetrics.domains.attendance.models import AttendanceDay
from hrmetrics.domains.recruitment.models import RecruitmentEntry
from hrmetrics.domains.workforce.models import StaffRecord
from hrmetrics.metrics.engine import compute_metrics
from hrmetrics.utils.types import PipelineStage, Priority, StaffStatus


def make_staff(
    id: str,
    department: str = "Engineering",
    salary: int = 60_000,
    rating: float = 4.0,
    attendance: float = 95.0,
    join_date: date = date(2020, 1, 1),
    status: StaffStatus = StaffStatus.ACTIVE,
    name: str | None = None,
    role: str = "Engineer",
) -> StaffRecord:
    return StaffRecord(
        id=id,
        name=name or f"Employee {id}",
        department=department,
        role=role,
        status=status,
        salary=salary,
        performance_rating=rating,
        attendance_rate=attendance,
        join_date=join_date,
    )


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 30, 9, 0)


@pytest.fixture
def staff() -> list[StaffRecord]:
    return [
        make_staff("1", "Engineering", 95_000, 4.8, 98.0, date(2019, 3, 15), name="Alice Park", role="Senior Engineer"),
        make_staff("2", "Marketing", 68_000, 4.2, 92.0, date(2021, 7, 1), name="Bob Stone", role="Marketing Lead"),
        make_staff("3", "Engineering", 72_000, 4.6, 88.0, date(2024, 6, 10), name="Carla Diaz", role="Engineer"),
        make_staff(
            "4", "Sales", 50_000, 3.6, 85.0, date(2022, 1, 20),
            status=StaffStatus.INACTIVE, name="Dev Patel", role="Account Executive",
        ),
        make_staff("5", "Sales", 90_000, 4.8, 96.0, date(2018, 11, 5), name="Erin Cole", role="Sales Manager"),
        make_staff("6", "Marketing", 48_000, 3.8, 94.0, date(2024, 6, 20), name="Femi Ade", role="Designer"),
    ]


@pytest.fixture
def attendance_days() -> list[AttendanceDay]:
    counts = {
        date(2024, 6, 25): (18, 2, 0),
        date(2024, 6, 17): (20, 0, 0),
        date(2024, 6, 19): (18, 2, 1),
        date(2024, 6, 18): (19, 1, 0),
        date(2024, 6, 21): (20, 0, 1),
        date(2024, 6, 20): (17, 3, 2),
        date(2024, 6, 23): (16, 4, 0),
        date(2024, 6, 22): (15, 5, 0),
        date(2024, 6, 24): (19, 1, 3),
    }
    return [AttendanceDay(day, *values) for day, values in counts.items()]


@pytest.fixture
def recruitment_entries() -> list[RecruitmentEntry]:
    return [
        RecruitmentEntry("Backend Engineer", "Engineering", 45, PipelineStage.INTERVIEW, Priority.HIGH),
        RecruitmentEntry("Product Designer", "Marketing", 30, PipelineStage.SCREENING, Priority.MEDIUM),
        RecruitmentEntry("Account Executive", "Sales", 22, PipelineStage.HIRED, Priority.LOW),
        RecruitmentEntry("Data Analyst", "Engineering", 18, PipelineStage.OFFER, Priority.HIGH),
    ]


@pytest.fixture
def metrics(staff, attendance_days, recruitment_entries, now):
    return compute_metrics(staff, attendance_days, recruitment_entries, now)


@pytest.fixture
def report_config():
    return load_report_config("development")


STAFF_CSV = """\
employeeId,name,department,role,status,salary,performanceRating,attendanceRate,joinDate
1,Alice Park,Engineering,Senior Engineer,Active,95000,4.8,98,2019-03-15
2,Bob Stone,Marketing,Marketing Lead,active,68000,4.2,92,2021-07-01
3,Carla Diaz,Engineering,Engineer,active,72000,4.6,88,2024-06-10
"""

ATTENDANCE_JSON = {
    "records": [
        {"date": "2024-06-20", "present": 17, "absent": 3, "late": 2},
        {"date": "2024-06-19", "present": 18, "absent": 2, "late": 1},
    ]
}

RECRUITMENT_JSON = [
    {"position": "Backend Engineer", "department": "Engineering", "applicants": 45,
     "stage": "Interview", "priority": "High"},
    {"position": "Account Executive", "department": "Sales", "applicants": 22,
     "stage": "Hired", "priority": "Low"},
]


@pytest.fixture
def data_dir(tmp_path):
    """A data directory holding one export per record source."""
    (tmp_path / "staff.csv").write_text(STAFF_CSV)
    (tmp_path / "attendance.json").write_text(json.dumps(ATTENDANCE_JSON))
    (tmp_path / "recruitment.json").write_text(json.dumps(RECRUITMENT_JSON))
    return tmp_path
