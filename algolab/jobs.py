"""Greedy job sequencing with deadlines to maximise profit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Job:
    """A unit-time job with a profit and a deadline (latest slot, 1-based)."""

    id: str
    profit: int
    deadline: int


@dataclass(frozen=True)
class Schedule:
    """Jobs placed in time slots; slots[0] is time slot 1."""

    slots: tuple[Optional[Job], ...]

    @property
    def scheduled(self) -> list[Job]:
        """Scheduled jobs in slot order."""
        return [job for job in self.slots if job is not None]

    @property
    def job_ids(self) -> list[str]:
        return [job.id for job in self.scheduled]

    @property
    def total_profit(self) -> int:
        return sum(job.profit for job in self.scheduled)


SAMPLE_JOBS = (
    Job("j1", 15, 2),
    Job("j2", 27, 3),
    Job("j3", 10, 3),
    Job("j4", 100, 3),
    Job("j5", 150, 4),
)


def schedule_jobs(jobs: Iterable[Job]) -> Schedule:
    """Place jobs by descending profit into the latest free slot before their deadline."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: list[Optional[Job]] = [None] * len(ordered)
    for job in ordered:
        latest = min(job.deadline, len(slots))
        for slot in range(latest - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                break
    return Schedule(tuple(slots))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Schedule the sample jobs and print the result."""
    schedule = schedule_jobs(SAMPLE_JOBS)
    print("Jobs scheduled: " + "".join(f"{job_id} " for job_id in schedule.job_ids))
    print(f"Total Profit: {schedule.total_profit}")
    return 0