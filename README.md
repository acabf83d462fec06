# consolebox

Three small interactive console programs in one package:

- **Guess the number** (`consolebox.guessing`): find a secret number
  between 1 and 100. Easy allows 10 guesses, medium 7 and difficult 5.
- **Scientific calculator** (`consolebox.calculator`): addition,
  subtraction, multiplication, division, exponent, root, logarithm and
  sine, cosine, tangent, cosecant, secant and cotangent of an angle in
  degrees.
- **School management** (`consolebox.school` and `consolebox.school_cli`):
  records of students, teachers and subjects. Students can be graded, and
  the package computes each student's credit-weighted grade.

## Installation

```
pip install .
```

## Running the programs

```
consolebox-guess
consolebox-calc
consolebox-school
```

Each program reads whitespace-separated answers from standard input and
writes to standard output, so it can also be driven by a script or a pipe.
Each one stops when its exit option is chosen (0 in the game and in the
school manager, 14 in the calculator) or when the input runs out. An entry
that should be a number but is not one is reported, and the program asks
again.

## Using it as a library

```python
from consolebox.guessing import Difficulty, GuessingGame, Verdict, judge
from consolebox.calculator import Operation, binary_operation, trig_operation
from consolebox.school import School, Student, Teacher, grade_for

game = GuessingGame(Difficulty.MEDIUM, secret=42)
game.guess(50)                    # Verdict.TOO_HIGH, 6 guesses left
game.guess(42)                    # Verdict.CORRECT, game.won is True
judge(10, 42)                     # Verdict.TOO_LOW

binary_operation(1, 2.0, 3.0)     # option 1 is addition: 5.0
trig_operation(8, 90.0)           # option 8 is the sine of 90 degrees

grade_for(attendance=8, total=72) # 3.0
```

### Guessing game

- `Difficulty` holds the levels `EASY`, `MEDIUM` and `HARD` (menu values 1,
  2 and 3). Its `attempts` property gives 10, 7 or 5.
- `GuessingGame(difficulty, secret)` tracks `attempts_left`, `won` and
  `over`. A wrong guess costs one attempt and a right one wins. A guess
  after the game is over raises `RuntimeError`.
- `play(stream_in, stream_out, rng=None)` runs the whole interactive game.
  `rng` is any object with a `randint(a, b)` method. By default it is a new
  `random.Random`.

### Calculator

- `Operation` numbers the menu options from `ADD` (1) to `EXIT` (14).
- `binary_operation(option, first, second)` handles options 1 to 7.
  Option 7 is the logarithm of `first` divided by the logarithm of
  `second`.
- `trig_operation(option, degrees)` handles options 8 to 13.
- Division by zero and similar cases give `inf` or `nan` instead of
  raising an error. An option outside a function's range raises
  `ValueError`.
- `run(stream_in, stream_out)` runs the interactive calculator. It prints
  results in `%g` style.

### School records

- `grade_for(attendance, total)` maps scores to the 0 to 4 scale. An
  attendance mark below 6 or a total below 50 gives 0. From there the grade
  rises in steps of 0.5 for every 5 points, up to 4 at 80 and above.
- `Subject.set_score(attendance, point, mid_term, final_term)` records the
  four parts and sets `grade`. A subject that has not been graded has a
  grade of -1 and `graded` is false.
- `Student` and `Teacher` each keep their own copy of every subject added
  to them:
  - `add_subject` and `remove_subject` change that list.
  - `Student.total_grade()` gives the credit-weighted mean of the grades.
    It returns NaN when there are no credits.
  - `Student.ungraded()` lists the subjects that have no grade yet.
  - `Student.set_score(subject_id, ...)` grades one subject. It raises
    `KeyError` for an unknown ID.
  - Each has a `describe()` method that returns a text summary.
- `School` keeps the students, teachers and subjects together:
  - `add_subject(name, subject_id, year, instructor_id, credit)` creates a
    subject. It gives a copy to every student whose class name starts with
    `year`, and to the teacher whose ID matches `instructor_id`.
  - `find_*` and `remove_*` look records up by ID and raise `KeyError` when
    there is no match.
  - `remove_subject` also removes the subject from every student and
    teacher.
- `consolebox.school_cli.run(stream_in, stream_out)` first reads the
  initial students, teachers and subjects. It then runs the management
  menu and returns the resulting `School`.

## What it does not do

The school manager keeps its records in memory only. Nothing is saved to
disk, and every run starts from an empty school.

## Running the tests

```
pip install .[test]
pytest
```