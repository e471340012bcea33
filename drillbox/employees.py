"""A small in-memory registry of employees."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Employee:
    """A single employee record."""

    id: int
    name: str
    age: int
    salary: float


@dataclass
class Manager:
    """Keeps an ordered list of employees."""

    employees: list[Employee] = field(default_factory=list)

    def add_employee(self, employee: Employee) -> None:
        """Append an employee; duplicate ids are allowed."""
        self.employees.append(employee)

    def remove_employee(self, employee_id: int) -> None:
        """Remove the first employee with the given id, if there is one."""
        for index, employee in enumerate(self.employees):
            if employee.id == employee_id:
                del self.employees[index]
                return

    def average_salary(self) -> float:
        """Return the mean salary, or 0.0 when there are no employees."""
        if not self.employees:
            return 0.0
        return sum(e.salary for e in self.employees) / len(self.employees)

    def find_employee(self, employee_id: int) -> Employee | None:
        """Return the first employee with the given id, or None."""
        return next((e for e in self.employees if e.id == employee_id), None)