import pytest

from oslab.proc import Process


def test_tick_advances_counters(capsys):
    proc = Process(1, 4, 3)
    proc.run_one_tick()
    assert proc.vruntime == 5
    assert proc.residual_duration == 2
    assert not proc.is_terminated()
    out = capsys.readouterr().out
    assert out.startswith("process 1 is running\tcurrent vruntime: 4")
    assert "terminated" not in out


def test_runs_until_terminated(capsys):
    proc = Process(3, 0, 2)
    proc.run_one_tick()
    proc.run_one_tick()
    assert proc.is_terminated()
    assert proc.vruntime == 2
    assert capsys.readouterr().out.rstrip().endswith("process 3 terminated.")


def test_terminated_process_cannot_run():
    proc = Process(7, 10, 0)
    with pytest.raises(RuntimeError, match="process: 7 is already terminated"):
        proc.run_one_tick()
    assert proc.vruntime == 10


def test_terminate_message(capsys):
    Process(9, 0, 1).terminate()
    assert capsys.readouterr().out == "process 9 terminated.\n"


def test_vruntime_plus_residual_is_conserved(capsys):
    proc = Process(2, 5, 4)
    total = proc.vruntime + proc.residual_duration
    while not proc.is_terminated():
        proc.run_one_tick()
        assert proc.vruntime + proc.residual_duration == total