import math

import pytest

from consolebox.school import (
    UNGRADED,
    School,
    Student,
    Subject,
    Teacher,
    grade_for,
)


@pytest.mark.parametrize(
    "attendance, total, grade",
    [
        (5, 90, 0),
        (10, 49, 0),
        (10, 50, 1),
        (10, 55, 1.5),
        (10, 60, 2),
        (10, 65, 2.5),
        (10, 70, 3),
        (10, 75, 3.5),
        (10, 80, 4),
        (10, 100, 4),
    ],
)
def test_grade_for_thresholds(attendance, total, grade):
    assert grade_for(attendance, total) == grade


def test_grade_is_monotonic_in_total():
    grades = [grade_for(10, total) for total in range(0, 101)]
    assert grades == sorted(grades)


def test_subject_starts_ungraded_and_set_score_grades_it():
    subject = Subject("Math", "M1", credit=3)
    assert subject.grade == UNGRADED
    assert not subject.graded
    subject.set_score(10, 20, 20, 30)
    assert subject.grade == grade_for(10, subject.total_score)
    assert subject.graded


def test_subject_describe():
    subject = Subject("Math", "M1", "T1", "Alice", 3)
    text = subject.describe()
    assert "ID : M1" in text
    assert "Name : Math" in text
    assert "Instructor : Alice" in text


def _school():
    school = School()
    school.add_teacher(Teacher("Alice", "T1", "1A"))
    school.add_student(Student("Bob", "S1", "1A"))
    school.add_student(Student("Carol", "S2", "1B"))
    school.add_student(Student("Dan", "S3", "2A"))
    return school


def test_add_subject_enrols_by_year_and_links_teacher():
    school = _school()
    subject = school.add_subject("Math", "M1", "1", "T1", 3)
    assert subject.instructor_name == "Alice"
    assert [s.subject_id for s in school.find_student("S1").subjects] == ["M1"]
    assert [s.subject_id for s in school.find_student("S2").subjects] == ["M1"]
    assert school.find_student("S3").subjects == []
    assert [s.name for s in school.find_teacher("T1").subjects] == ["Math"]


def test_unknown_instructor_leaves_name_empty():
    school = _school()
    subject = school.add_subject("Art", "A1", "2", "T9", 2)
    assert subject.instructor_name == ""


def test_students_hold_independent_copies():
    school = _school()
    school.add_subject("Math", "M1", "1", "T1", 3)
    school.find_student("S1").set_score("M1", 10, 30, 30, 30)
    assert school.find_student("S1").subjects[0].graded
    assert not school.find_student("S2").subjects[0].graded
    assert not school.find_subject("M1").graded


def test_total_grade_weighted_by_credit():
    student = Student("Bob", "S1", "1A")
    student.add_subject(Subject("Math", "M1", credit=3))
    student.add_subject(Subject("Art", "A1", credit=1))
    student.set_score("M1", 10, 30, 30, 30)
    student.set_score("A1", 0, 0, 0, 0)
    assert student.total_grade() == pytest.approx(3.0)


def test_total_grade_without_credits_is_nan():
    result = Student("Bob", "S1", "1A").total_grade()
    assert f"{result:.2f}" == "nan"
    assert math.isnan(result)


def test_ungraded_lists_pending_subjects():
    student = Student("Bob", "S1", "1A")
    student.add_subject(Subject("Math", "M1", credit=3))
    student.add_subject(Subject("Art", "A1", credit=1))
    student.set_score("M1", 10, 30, 30, 30)
    assert [s.subject_id for s in student.ungraded()] == ["A1"]


def test_set_score_unknown_subject_raises():
    student = Student("Bob", "S1", "1A")
    with pytest.raises(KeyError):
        student.set_score("X9", 10, 10, 10, 10)


def test_student_describe():
    student = Student("Bob", "S1", "1A")
    student.add_subject(Subject("Math", "M1", credit=3))
    student.set_score("M1", 10, 30, 30, 30)
    text = student.describe()
    assert "Name : Bob\nID : S1\nClass : 1A" in text
    assert "Total Grade : 4.00" in text
    assert " - (3)4.00 Math" in text


def test_teacher_describe_and_remove_subject():
    teacher = Teacher("Alice", "T1", "1A")
    teacher.add_subject(Subject("Math", "M1"))
    teacher.add_subject(Subject("Art", "A1"))
    teacher.remove_subject("M1")
    text = teacher.describe()
    assert "Class Consultant : 1A" in text
    assert " - Art" in text
    assert " - Math" not in text


def test_remove_subject_everywhere():
    school = _school()
    school.add_subject("Math", "M1", "1", "T1", 3)
    school.add_subject("Art", "A1", "1", "T1", 1)
    removed = school.remove_subject("M1")
    assert removed.subject_id == "M1"
    assert [s.subject_id for s in school.subjects] == ["A1"]
    assert [s.subject_id for s in school.find_student("S1").subjects] == ["A1"]
    assert [s.subject_id for s in school.find_teacher("T1").subjects] == ["A1"]
    with pytest.raises(KeyError):
        school.find_subject("M1")


def test_remove_student_and_teacher():
    school = _school()
    assert school.remove_student("S2").name == "Carol"
    assert [s.student_id for s in school.students] == ["S1", "S3"]
    assert school.remove_teacher("T1").name == "Alice"
    assert school.teachers == []
    with pytest.raises(KeyError):
        school.remove_student("S2")
    with pytest.raises(KeyError):
        school.remove_teacher("T1")