"""Students, teachers, subjects and their grades."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field

UNGRADED = -1.0


def grade_for(attendance: float, total: float) -> float:
    """Grade on a 0-4 scale from the attendance mark and the total score."""
    if attendance < 6 or total < 50:
        return 0.0
    for limit, grade in ((55, 1.0), (60, 1.5), (65, 2.0), (70, 2.5), (75, 3.0), (80, 3.5)):
        if total < limit:
            return grade
    return 4.0


@dataclass
class Subject:
    """A subject with its instructor, credit and, once graded, its scores."""

    name: str = ""
    subject_id: str = ""
    instructor_id: str = ""
    instructor_name: str = ""
    credit: int = 0
    attendance: float = 0.0
    point: float = 0.0
    mid_term: float = 0.0
    final_term: float = 0.0
    grade: float = UNGRADED

    @property
    def total_score(self) -> float:
        return self.attendance + self.point + self.mid_term + self.final_term

    @property
    def graded(self) -> bool:
        return self.grade != UNGRADED

    def set_score(
        self,
        attendance: float = 0.0,
        point: float = 0.0,
        mid_term: float = 0.0,
        final_term: float = 0.0,
    ) -> None:
        """Record the four score parts and recompute the grade."""
        self.attendance = attendance
        self.point = point
        self.mid_term = mid_term
        self.final_term = final_term
        self.grade = grade_for(attendance, self.total_score)

    def describe(self) -> str:
        return (
            f"ID : {self.subject_id}\nName : {self.name}\n"
            f"Instructor : {self.instructor_name}\n"
        )


def _without(subjects: list[Subject], subject_id: str) -> list[Subject]:
    return [s for s in subjects if s.subject_id != subject_id]


@dataclass
class Student:
    """A student and their own copy of each subject they take."""

    name: str = ""
    student_id: str = ""
    class_name: str = ""
    subjects: list[Subject] = field(default_factory=list)

    def add_subject(self, subject: Subject) -> None:
        self.subjects.append(copy.copy(subject))

    def remove_subject(self, subject_id: str) -> None:
        self.subjects = _without(self.subjects, subject_id)

    def total_grade(self) -> float:
        """Credit-weighted mean of the subject grades (NaN with no credits)."""
        total_credit = sum(s.credit for s in self.subjects)
        raw = sum(s.grade * s.credit for s in self.subjects)
        if total_credit == 0:
            return math.nan
        return raw / total_credit

    def ungraded(self) -> list[Subject]:
        return [s for s in self.subjects if not s.graded]

    def set_score(
        self,
        subject_id: str,
        attendance: float = 0.0,
        point: float = 0.0,
        mid_term: float = 0.0,
        final_term: float = 0.0,
    ) -> None:
        """Grade the student's subject with the given ID."""
        for subject in self.subjects:
            if subject.subject_id == subject_id:
                subject.set_score(attendance, point, mid_term, final_term)
                return
        raise KeyError(subject_id)

    def describe(self) -> str:
        lines = [
            f"Name : {self.name}",
            f"ID : {self.student_id}",
            f"Class : {self.class_name}",
            f"Total Grade : {self.total_grade():.2f}",
            "",
            "Subjects : ",
        ]
        lines.extend(
            f" - ({s.credit:g}){s.grade:.2f} {s.name}" for s in self.subjects
        )
        return "\n".join(lines) + "\n"


@dataclass
class Teacher:
    """A teacher, the class they consult for, and the subjects they teach."""

    name: str = ""
    teacher_id: str = ""
    class_consult: str = ""
    subjects: list[Subject] = field(default_factory=list)

    def add_subject(self, subject: Subject) -> None:
        self.subjects.append(copy.copy(subject))

    def remove_subject(self, subject_id: str) -> None:
        self.subjects = _without(self.subjects, subject_id)

    def describe(self) -> str:
        lines = [
            f"Name : {self.name}",
            f"ID : {self.teacher_id}",
            f"Class Consultant : {self.class_consult}",
            "",
            "Subjects taught : ",
        ]
        lines.extend(f" - {s.name}" for s in self.subjects)
        return "\n".join(lines) + "\n"


@dataclass
class School:
    """The registry of students, teachers and subjects."""

    students: list[Student] = field(default_factory=list)
    teachers: list[Teacher] = field(default_factory=list)
    subjects: list[Subject] = field(default_factory=list)

    def add_student(self, student: Student) -> None:
        self.students.append(student)

    def add_teacher(self, teacher: Teacher) -> None:
        self.teachers.append(teacher)

    def add_subject(
        self, name: str, subject_id: str, year: str, instructor_id: str, credit: int
    ) -> Subject:
        """Create a subject and enrol every student whose class starts with year."""
        instructor_name = ""
        for teacher in self.teachers:
            if teacher.teacher_id == instructor_id:
                instructor_name = teacher.name
        subject = Subject(name, subject_id, instructor_id, instructor_name, credit)
        self.subjects.append(subject)
        for student in self.students:
            if student.class_name[:1] == year:
                student.add_subject(subject)
        for teacher in self.teachers:
            if teacher.teacher_id == instructor_id:
                teacher.add_subject(subject)
        return subject

    def remove_student(self, student_id: str) -> Student:
        student = self.find_student(student_id)
        self.students.remove(student)
        return student

    def remove_teacher(self, teacher_id: str) -> Teacher:
        teacher = self.find_teacher(teacher_id)
        self.teachers.remove(teacher)
        return teacher

    def remove_subject(self, subject_id: str) -> Subject:
        """Drop the subject from the school and from everyone's list."""
        subject = self.find_subject(subject_id)
        self.subjects.remove(subject)
        for student in self.students:
            student.remove_subject(subject_id)
        for teacher in self.teachers:
            teacher.remove_subject(subject_id)
        return subject

    def find_student(self, student_id: str) -> Student:
        for student in self.students:
            if student.student_id == student_id:
                return student
        raise KeyError(student_id)

    def find_teacher(self, teacher_id: str) -> Teacher:
        for teacher in self.teachers:
            if teacher.teacher_id == teacher_id:
                return teacher
        raise KeyError(teacher_id)

    def find_subject(self, subject_id: str) -> Subject:
        for subject in self.subjects:
            if subject.subject_id == subject_id:
                return subject
        raise KeyError(subject_id)