"""Interactive console front end for the school registry."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from consolebox.school import School, Student, Teacher

_MENU = (
    "----------\nManagement Option \n1.New Student \n2.New Teacher \n3.New Subject"
    "\n4.Delete Student \n5.Delete Teacher \n6.Delete Subject"
    "\n7.Info Student \n8.Info Teacher \n9.Info Subject"
    "\n10.Grading"
    "\n0.END PROGRAM\n"
)


class _EndOfInput(Exception):
    """Raised when the input stream has no more tokens."""


class _Console:
    """Whitespace-separated token reader paired with an output stream."""

    def __init__(self, stream_in: TextIO, stream_out: TextIO) -> None:
        self._tokens: Iterator[str] = (
            token for line in stream_in for token in line.split()
        )
        self.write = stream_out.write

    def word(self, prompt: str = "") -> str:
        if prompt:
            self.write(prompt)
        token = next(self._tokens, None)
        if token is None:
            raise _EndOfInput
        return token

    def integer(self, prompt: str = "") -> int:
        while True:
            token = self.word(prompt)
            try:
                return int(token)
            except ValueError:
                self.write(f"{token} is not a whole number\n")

    def number(self, prompt: str = "") -> float:
        while True:
            token = self.word(prompt)
            try:
                return float(token)
            except ValueError:
                self.write(f"{token} is not a number\n")


def _read_students(console: _Console, school: School, prompt: str) -> None:
    for _ in range(console.integer(prompt)):
        name = console.word("Name : ")
        student_id = console.word("ID : ")
        class_name = console.word("Class : ")
        school.add_student(Student(name, student_id, class_name))
        console.write("Student information has been created.\n")


def _read_teachers(console: _Console, school: School, prompt: str) -> None:
    for _ in range(console.integer(prompt)):
        name = console.word("Name : ")
        teacher_id = console.word("ID : ")
        class_consult = console.word("ClassConsult : ")
        school.add_teacher(Teacher(name, teacher_id, class_consult))
        console.write("Teacher information has been created.\n")


def _read_subjects(console: _Console, school: School, prompt: str) -> None:
    for _ in range(console.integer(prompt)):
        name = console.word("Name : ")
        subject_id = console.word("ID : ")
        year = console.word("YearStudy : ")[:1]
        instructor_id = console.word("Instructor ID: ")
        credit = console.integer("Credit : ")
        school.add_subject(name, subject_id, year, instructor_id, credit)
        console.write("Subject information has been created.\n")


def _delete_student(console: _Console, school: School) -> None:
    target = console.word("----------\nDelete Student ID : ")
    try:
        school.remove_student(target)
    except KeyError:
        pass


def _delete_teacher(console: _Console, school: School) -> None:
    target = console.word("----------\nDelete Teacher ID : ")
    try:
        school.remove_teacher(target)
    except KeyError:
        pass


def _delete_subject(console: _Console, school: School) -> None:
    target = console.word("----------\nDelete Subject ID : ")
    try:
        school.remove_subject(target)
    except KeyError:
        for student in school.students:
            student.remove_subject(target)
        for teacher in school.teachers:
            teacher.remove_subject(target)


def _info_students(console: _Console, school: School) -> None:
    choose = console.integer(
        "----------\nInfo Students\n1.Students List \n2.Student Insights\n"
    )
    if choose == 1:
        console.write(f"The total number of students is {len(school.students)}\n")
        for student in school.students:
            console.write(f"{student.student_id} {student.name}\n")
        return
    target = console.word("Student ID : ")
    try:
        console.write(school.find_student(target).describe())
    except KeyError:
        pass


def _info_teachers(console: _Console, school: School) -> None:
    choose = console.integer(
        "----------\nInfo Teahcers\n1.Teachers List \n2.Teacher Insight\n"
    )
    if choose == 1:
        console.write(f"The total number of teachers is {len(school.teachers)}\n")
        for teacher in school.teachers:
            console.write(f"{teacher.teacher_id} {teacher.name}\n")
        return
    target = console.word("TeacherID : ")
    for teacher in school.teachers:
        if teacher.teacher_id == target:
            console.write(teacher.describe())


def _info_subjects(console: _Console, school: School) -> None:
    choose = console.integer(
        "----------\nInfo Subjects\n1.Subjects List \n2.Subject Insight\n"
    )
    if choose == 1:
        console.write(f"The total number of subjects is {len(school.subjects)}\n")
        for subject in school.subjects:
            console.write(f"{subject.subject_id} {subject.name}\n")
        return
    target = console.word("SubjectID : ")
    try:
        console.write(school.find_subject(target).describe())
    except KeyError:
        pass


def _grade(console: _Console, school: School) -> None:
    target = console.word("----------\nGrading Students\nStudent ID : ")
    try:
        student = school.find_student(target)
    except KeyError:
        return
    console.write("Not graded yet : ")
    for subject in student.ungraded():
        console.write(f"({subject.subject_id}) {subject.name}, ")
    while True:
        answer = console.word("\nCONTINUE GRADING YES(y) / NO(n) : ")
        if answer.startswith("n"):
            return
        subject_id = console.word("\nSubject ID : ")
        console.write("attendant, point, midTerm, finalTerm")
        scores = [console.number() for _ in range(4)]
        try:
            student.set_score(subject_id, *scores)
        except KeyError:
            pass


def run(stream_in: TextIO, stream_out: TextIO) -> School:
    """Build a school from the input, then manage it until 0 or end of input."""
    console = _Console(stream_in, stream_out)
    school = School()
    actions = {
        1: lambda: _read_students(console, school, "----------\nNumber of student : "),
        2: lambda: _read_teachers(console, school, "----------\nNumber of teacher : "),
        3: lambda: _read_subjects(console, school, "----------\nNumber of Subject : "),
        4: lambda: _delete_student(console, school),
        5: lambda: _delete_teacher(console, school),
        6: lambda: _delete_subject(console, school),
        7: lambda: _info_students(console, school),
        8: lambda: _info_teachers(console, school),
        9: lambda: _info_subjects(console, school),
        10: lambda: _grade(console, school),
    }
    try:
        _read_students(console, school, "Number of student : ")
        _read_teachers(console, school, "Number of teacher : ")
        _read_subjects(console, school, "Number of Subject : ")
        while True:
            console.write(_MENU)
            option = console.integer()
            if option == 0:
                console.write("\nEXIT PROGRAM")
                return school
            action = actions.get(option)
            if action is not None:
                action()
    except _EndOfInput:
        return school


def main(argv: list[str] | None = None) -> int:
    """Start the school manager on the console."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())