# ruff: noqa

from datetime import date

from vendor_console.repositories import (
    DashboardRepository,
    DepartmentRepository,
    EmployeeProjectRepository,
    EmployeeRepository,
    ProjectRepository,
    UserRepository,
)
from vendor_console.schemas.department import DepartmentCreate, DepartmentUpdate
from vendor_console.schemas.employee import EmployeeCreate, EmployeeUpdate
from vendor_console.schemas.project import ProjectCreate, ProjectUpdate
from vendor_console.schemas.user import UserCreate, UserUpdate


def test_department_create_applies_default_counts(db):
    repo = DepartmentRepository(db)
    dept_id = repo.create(DepartmentCreate(department_name="R&D", respective_manager="Amy"))

    dept = repo.get_by_id(dept_id)

    assert dept == {
        "id": dept_id,
        "department_name": "R&D",
        "respective_manager": "Amy",
        "no_of_ongoing_projects": 0,
        "no_of_finished_projects": 0,
        "no_of_people_in_department": 0,
    }


def test_department_update_is_full_replacement(db):
    repo = DepartmentRepository(db)
    dept_id = repo.create(
        DepartmentCreate(
            department_name="Sales",
            respective_manager="Ann",
            no_of_ongoing_projects=4,
            no_of_people_in_department=12,
        )
    )

    affected = repo.update(dept_id, DepartmentUpdate(department_name="Sales EU"))

    assert affected == 1
    dept = repo.get_by_id(dept_id)
    assert dept["department_name"] == "Sales EU"
    assert dept["respective_manager"] is None
    assert dept["no_of_ongoing_projects"] == 0
    assert dept["no_of_people_in_department"] == 0


def test_department_delete_then_get_is_none(db):
    repo = DepartmentRepository(db)
    dept_id = repo.create(DepartmentCreate(department_name="Temp"))

    assert repo.delete(dept_id) == 1
    assert repo.get_by_id(dept_id) is None
    assert repo.delete(dept_id) == 0


def test_department_list_sorted_by_name(db):
    repo = DepartmentRepository(db)
    for name in ("Zeta", "Alpha", "Mid"):
        repo.create(DepartmentCreate(department_name=name))

    assert [d["department_name"] for d in repo.list_all()] == ["Alpha", "Mid", "Zeta"]


def test_employee_reads_attach_department_and_manager_names(db):
    dept_id = DepartmentRepository(db).create(DepartmentCreate(department_name="QA"))
    manager_id = UserRepository(db).create(
        UserCreate(name="Mona", email="mona@example.com", joining_date=date(2020, 1, 1), password="x"),
        "hash",
    )
    repo = EmployeeRepository(db)
    emp_id = repo.create(
        EmployeeCreate(
            name="Eve",
            email="eve@example.com",
            joining_date=date(2021, 6, 1),
            department=dept_id,
            manager_id=manager_id,
            rating_overall=4.5,
        )
    )

    emp = repo.get_by_id(emp_id)

    assert emp["department_name"] == "QA"
    assert emp["manager_name"] == "Mona"
    assert emp["rating_overall"] == 4.5
    assert emp["joining_date"] == date(2021, 6, 1)


def test_employee_update_resets_omitted_fields(db):
    repo = EmployeeRepository(db)
    emp_id = repo.create(
        EmployeeCreate(
            name="Eve", email="eve@example.com", phone="555", joining_date=date(2021, 6, 1),
            rating_overall=3,
        )
    )

    repo.update(emp_id, EmployeeUpdate(name="Eve B", email="eveb@example.com", joining_date=date(2021, 6, 2)))

    emp = repo.get_by_id(emp_id)
    assert emp["name"] == "Eve B"
    assert emp["phone"] is None
    assert emp["rating_overall"] == 0
    assert emp["department_name"] is None


def test_employee_list_sorted_by_name(db):
    repo = EmployeeRepository(db)
    for name in ("Walt", "Ada", "Hal"):
        repo.create(EmployeeCreate(name=name, email=f"{name}@x.io", joining_date=date(2020, 1, 1)))

    assert [e["name"] for e in repo.list_all()] == ["Ada", "Hal", "Walt"]


def test_user_list_sorted_by_name(db):
    repo = UserRepository(db)
    for name in ("Wren", "Abe", "Moss"):
        repo.create(
            UserCreate(name=name, email=f"{name}@x.io", joining_date=date(2020, 1, 1), password="p"),
            "h",
        )

    assert [u["name"] for u in repo.list_all()] == ["Abe", "Moss", "Root Admin", "Wren"]


def test_project_defaults_and_joined_names(db):
    dept_id = DepartmentRepository(db).create(DepartmentCreate(department_name="Infra"))
    users = UserRepository(db)
    lead = users.create(UserCreate(name="Lead", email="l@x.io", joining_date=date(2020, 1, 1), password="p"), "h")
    deputy = users.create(UserCreate(name="Deputy", email="d@x.io", joining_date=date(2020, 1, 1), password="p"), "h")
    repo = ProjectRepository(db)

    project_id = repo.create(
        ProjectCreate(
            project_name="Migration",
            department_id=dept_id,
            starting_date=date(2024, 1, 15),
            project_manager=lead,
            co_manager=deputy,
        )
    )

    project = repo.get_by_id(project_id)
    assert project["status"] == "Not Started"
    assert project["no_of_people_working"] == 0
    assert project["remarks"] == ""
    assert project["deadline"] is None
    assert project["department_name"] == "Infra"
    assert project["manager_name"] == "Lead"
    assert project["co_manager_name"] == "Deputy"


def test_project_update_without_status_resets_it(db):
    repo = ProjectRepository(db)
    project_id = repo.create(
        ProjectCreate(project_name="X", starting_date=date(2024, 1, 1), status="Completed", remarks="done")
    )

    repo.update(project_id, ProjectUpdate(project_name="X2", starting_date=date(2024, 2, 1)))

    project = repo.get_by_id(project_id)
    assert project["project_name"] == "X2"
    assert project["status"] == "Not Started"
    assert project["remarks"] == ""


def test_project_list_newest_first(db):
    repo = ProjectRepository(db)
    repo.create(ProjectCreate(project_name="Old", starting_date=date(2022, 1, 1)))
    repo.create(ProjectCreate(project_name="New", starting_date=date(2024, 1, 1)))
    repo.create(ProjectCreate(project_name="Middle", starting_date=date(2023, 1, 1)))

    assert [p["project_name"] for p in repo.list_all()] == ["New", "Middle", "Old"]


def test_user_reads_never_include_password(db):
    repo = UserRepository(db)
    user_id = repo.create(
        UserCreate(name="Zed", email="zed@x.io", joining_date=date(2020, 1, 1), password="pw"),
        "stored-hash",
    )

    assert "password" not in repo.get_by_id(user_id)
    assert all("password" not in row for row in repo.list_all())


def test_user_update_keeps_password_when_omitted(db):
    repo = UserRepository(db)
    user_id = repo.create(
        UserCreate(name="Zed", email="zed@x.io", joining_date=date(2020, 1, 1), password="pw"),
        "original-hash",
    )

    repo.update(user_id, UserUpdate(name="Zed 2", email="zed@x.io", joining_date=date(2020, 1, 1)))

    assert repo.get_by_id(user_id)["name"] == "Zed 2"
    assert repo.get_credentials_by_email("zed@x.io") == [
        {"user_id": user_id, "password": "original-hash"}
    ]


def test_user_update_replaces_password_when_given(db):
    repo = UserRepository(db)
    user_id = repo.create(
        UserCreate(name="Zed", email="zed@x.io", joining_date=date(2020, 1, 1), password="pw"),
        "original-hash",
    )

    repo.update(
        user_id,
        UserUpdate(name="Zed", email="zed@x.io", joining_date=date(2020, 1, 1), password="new"),
        "new-hash",
    )

    assert repo.get_credentials_by_email("zed@x.io")[0]["password"] == "new-hash"


def test_user_count_includes_seeded_admin(db):
    assert UserRepository(db).count() == 1


def test_assignments_list_assign_unassign(db):
    emp_id = EmployeeRepository(db).create(
        EmployeeCreate(name="Ivy", email="ivy@x.io", joining_date=date(2020, 1, 1))
    )
    projects = ProjectRepository(db)
    first = projects.create(ProjectCreate(project_name="One", starting_date=date(2023, 1, 1)))
    second = projects.create(ProjectCreate(project_name="Two", starting_date=date(2024, 1, 1)))
    repo = EmployeeProjectRepository(db)

    repo.assign(emp_id, first)
    repo.assign(emp_id, second)
    assert [p["project_name"] for p in repo.list_for_employee(emp_id)] == ["Two", "One"]

    assert repo.unassign(emp_id, first) == 1
    assert [p["project_id"] for p in repo.list_for_employee(emp_id)] == [second]


def test_dashboard_stats(db):
    DepartmentRepository(db).create(DepartmentCreate(department_name="D"))
    EmployeeRepository(db).create(EmployeeCreate(name="E", email="e@x.io", joining_date=date(2020, 1, 1)))
    projects = ProjectRepository(db)
    for i, status in enumerate(["In Progress", "In Progress", "Completed", "Not Started", "In Progress", "Completed"]):
        projects.create(
            ProjectCreate(project_name=f"P{i}", starting_date=date(2024, 1, i + 1), status=status)
        )

    stats = DashboardRepository(db).stats()

    assert stats["counts"] == {
        "departments": 1,
        "employees": 1,
        "projects": 6,
        "active_projects": 3,
    }
    assert stats["projectsByStatus"] == [
        {"status": "In Progress", "count": 3},
        {"status": "Completed", "count": 2},
        {"status": "Not Started", "count": 1},
    ]
    assert [p["project_name"] for p in stats["recentProjects"]] == ["P5", "P4", "P3", "P2", "P1"]
