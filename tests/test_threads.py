import pytest

from rustdrill.drills.threads import JobStatus, run_jobs


def test_all_jobs_are_completed():
    status = run_jobs(3, 0.001, 0.001)
    assert status.jobs_completed == 3


def test_waits_while_jobs_are_pending(capsys):
    status = run_jobs(2, 0.05, 0.01)
    lines = capsys.readouterr().out.splitlines()
    assert status.jobs_completed == 2
    assert len(lines) >= 1
    assert all(line == "waiting... " for line in lines)


def test_no_jobs_means_no_waiting(capsys):
    status = run_jobs(0, 0.01, 0.01)
    assert status.jobs_completed == 0
    assert capsys.readouterr().out == ""


def test_negative_jobs_rejected():
    with pytest.raises(ValueError):
        run_jobs(-1, 0.0, 0.0)


def test_status_starts_at_zero_and_compares_by_count():
    assert JobStatus() == JobStatus(jobs_completed=0)
    assert run_jobs(1, 0.0, 0.001) == JobStatus(jobs_completed=1)