# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Main menu loop.
Thin console layer that draws screens, collects input, delegates ALL logic
to RosterService and maps its errors to one-line messages.

Screens: MainMenu → AddRole → AddFields | ViewAll | ViewByRole |
EditSelect → EditFields | DeleteSelect → DeleteConfirm | Exit.
"""

from typing import Callable, Optional

from roster.controllers.editors import collect_edits
from roster.controllers.prompts import Prompter
from roster.core.exceptions import RosterError
from roster.core.logging import get_logger
from roster.core.terminal import Console
from roster.models.domain import ADMIN, STUDENT, TEACHER, Person
from roster.schemas.records import AdminCreate, RecordCreate, StudentCreate, TeacherCreate
from roster.services.formatting import render_record
from roster.services.roster_service import RosterService

logger = get_logger(__name__)

BANNER = "======================================="
TITLE = "   EDUCATION CENTRE INFORMATION SYSTEM "
MAIN_MENU = (
    ("1", "Add new record"),
    ("2", "View all records"),
    ("3", "View records by role"),
    ("4", "Edit existing record"),
    ("5", "Delete existing record"),
    ("0", "Exit"),
)
ROLE_MENU = {"1": TEACHER, "2": ADMIN, "3": STUDENT}
GOODBYE = "Exiting application. Goodbye!"


class MenuController:
    """Interactive roster menu bound to one service and one console."""

    def __init__(self, service: RosterService, prompter: Prompter, console: Console) -> None:
        self._service = service
        self._prompter = prompter
        self._console = console
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_record,
            "2": self.view_all,
            "3": self.view_by_role,
            "4": self.edit_record,
            "5": self.delete_record,
        }
        self._field_collectors: dict[str, Callable[[str, str, str], RecordCreate]] = {
            TEACHER: self._collect_teacher,
            ADMIN: self._collect_admin,
            STUDENT: self._collect_student,
        }

    # ── Loop ──

    def run(self) -> None:
        """Redraw the main menu until the user chooses Exit."""
        while self.handle_choice(self.show_menu()):
            pass

    def show_menu(self) -> str:
        self._console.clear()
        self._console.write(BANNER)
        self._console.write(TITLE)
        self._console.write(BANNER)
        for key, label in MAIN_MENU:
            self._console.write(f"{key}. {label}")
        self._console.write(BANNER)
        return self._console.read_line("Enter option: ")

    def handle_choice(self, choice: str) -> bool:
        """Run one menu action. Returns False once the user exits."""
        choice = (choice or "").strip()
        if choice == "0":
            self._console.write(GOODBYE)
            logger.info("Session ended: records=%d", self._service.count())
            return False
        action = self._actions.get(choice)
        if action is None:
            self._console.write("Invalid option. Please try again.")
            self._console.write("Press Enter to continue...")
            self._console.read_line()
            return True
        action()
        return True

    # ── Add ──

    def add_record(self) -> None:
        self._console.clear()
        self._console.write("Select role to add:")
        for key, role in ROLE_MENU.items():
            self._console.write(f"{key}. {role}")
        role = ROLE_MENU.get(self._console.read_line("Your choice: ").strip())
        if role is None:
            self._console.write("Invalid role selection.")
            self._console.pause()
            return

        self._console.clear()
        name = self._prompter.read_non_empty("Name: ")
        telephone = self._prompter.read_telephone("Telephone: ")
        email = self._prompter.read_gmail("Email: ")
        try:
            payload = self._field_collectors[role](name, telephone, email)
            self._service.create_record(payload)
        except ValueError as e:
            self._console.write(f"Could not save record: {e}")
        else:
            self._console.write(f"{role} added successfully.")
        self._console.pause()

    def _collect_teacher(self, name: str, telephone: str, email: str) -> TeacherCreate:
        salary = self._prompter.read_int("Salary: ")
        subject1 = self._prompter.read_raw("Subject 1: ")
        subject2 = self._prompter.read_raw("Subject 2: ")
        return TeacherCreate(
            name=name, telephone=telephone, email=email,
            salary=salary, subject1=subject1, subject2=subject2,
        )

    def _collect_admin(self, name: str, telephone: str, email: str) -> AdminCreate:
        salary = self._prompter.read_int("Salary: ")
        employment_type = self._prompter.read_employment_type(
            "Employment type (Full-time/Part-time): "
        )
        hours = self._prompter.read_float("Working hours per week: ")
        return AdminCreate(
            name=name, telephone=telephone, email=email,
            salary=salary, employment_type=employment_type, working_hours=hours,
        )

    def _collect_student(self, name: str, telephone: str, email: str) -> StudentCreate:
        subject1 = self._prompter.read_raw("Subject 1: ")
        subject2 = self._prompter.read_raw("Subject 2: ")
        subject3 = self._prompter.read_raw("Subject 3: ")
        return StudentCreate(
            name=name, telephone=telephone, email=email,
            subject1=subject1, subject2=subject2, subject3=subject3,
        )

    # ── View ──

    def view_all(self) -> None:
        self._console.clear()
        self._write_listing()
        self._console.pause()

    def view_by_role(self) -> None:
        self._console.clear()
        role = self._console.read_line("Enter role to filter (Teacher/Admin/Student): ")
        try:
            for record in self._service.filter_by_role(role):
                self._console.write(render_record(record))
        except RosterError as e:
            self._console.write(e.message)
        self._console.pause()

    def _write_listing(self) -> None:
        try:
            records = self._service.list_records()
        except RosterError as e:
            self._console.write(e.message)
            return
        self._console.write("All records:")
        for record in records:
            self._console.write(render_record(record))

    # ── Edit / Delete ──

    def _select_record(self, verb: str) -> Optional[Person]:
        """List the roster and ask for an id. None means the screen is done."""
        self._console.clear()
        if self._service.is_empty():
            self._console.write(f"No records to {verb}.")
            self._console.pause()
            return None
        self._write_listing()
        record_id = self._prompter.read_int(f"Enter ID of record to {verb}: ")
        try:
            return self._service.get_record(record_id)
        except RosterError as e:
            self._console.write(e.message)
            self._console.pause()
            return None

    def edit_record(self) -> None:
        record = self._select_record("edit")
        if record is None:
            return
        changes = collect_edits(record, self._prompter, self._console)
        try:
            self._service.update_record(record.id, changes)
        except RosterError as e:
            self._console.write(e.message)
        except ValueError as e:
            self._console.write(f"Could not save record: {e}")
        self._console.pause()

    def delete_record(self) -> None:
        record = self._select_record("delete")
        if record is None:
            return
        self._console.write("Selected record:")
        self._console.write(render_record(record))
        if self._prompter.confirm("Are you sure you want to delete this record? (y/n): "):
            self._service.delete_record(record.id)
            self._console.write("Record deleted.")
        else:
            self._console.write("Delete cancelled.")
        self._console.pause()
