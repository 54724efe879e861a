"""Map a final status to user-facing text and a success / failure / incomplete signal."""

from __future__ import annotations

from dataclasses import dataclass

from .status import IllDefined, Solved, Status

SUCCESS = "success"
FAILURE = "failure"
INCOMPLETE = "incomplete"

EXIT_CODES = {SUCCESS: 0, FAILURE: 1, INCOMPLETE: 2}


@dataclass
class Outcome:
    signal: str
    message: str


def report_outcome(st: Status, exhausted: bool = False) -> Outcome:
    """`exhausted` marks a stalled grid whose guess tree was searched without finding a solution."""
    if isinstance(st, Solved):
        return Outcome(SUCCESS, "Solved!")
    if isinstance(st, IllDefined):
        return Outcome(
            FAILURE,
            f"Ill-defined puzzle: {st.reason.describe()} "
            "You probably took a bad guess while solving; try a different candidate for that cell.",
        )
    if exhausted:
        return Outcome(FAILURE, "No solution: every guess from the stalled grid led to a contradiction.")
    return Outcome(INCOMPLETE, "Couldn't reduce any further. Need more smarts.")


def exit_code_for(outcome: Outcome) -> int:
    return EXIT_CODES[outcome.signal]
