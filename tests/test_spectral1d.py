import numpy as np
import pytest

from tdglsim.datafiles import Result1D, read_result, write_result
from tdglsim.spectral1d import (
    History1D,
    crank_nicolson_step,
    evolve,
    initial_drive,
    read_drive_file,
    sine_drive,
)
from tdglsim import spectral1d


def test_sine_drive_constant_when_half_period_not_positive():
    drive = sine_drive(3.0, 0.1, 5, 2.0, -1.0, 0.7)
    assert drive.shape == (5,)
    assert np.all(drive == 0.7)


def test_sine_drive_restart_starts_from_zero_phase():
    drive = sine_drive(2.0, 0.5, 3, 1.0, 1.0, 0.0, restart=True)
    assert drive[0] == pytest.approx(1.0)


def test_sine_drive_smooth_matches_restart_from_zero():
    smooth = sine_drive(0.0, 0.01, 20, 1.5, 0.3, 0.2, restart=False)
    restarted = sine_drive(0.0, 0.01, 20, 1.5, 0.3, 0.2, restart=True)
    assert np.allclose(smooth, restarted)


def test_initial_drive_without_restart_is_offset():
    assert initial_drive(4.3, 2.0, 1.7, 0.25, restart=False) == pytest.approx(0.25)
    assert initial_drive(4.3, 2.0, -1.0, 0.25, restart=True) == pytest.approx(0.25)


def test_read_drive_file_repeats_periodically(tmp_path):
    path = tmp_path / "drive.dat"
    path.write_text("0.1 1.5\n0.2 -2.0\n0.3 3.25\n")
    drive = read_drive_file(path, 7)
    assert list(drive) == [1.5, -2.0, 3.25, 1.5, -2.0, 3.25, 1.5]


def test_read_drive_file_truncates(tmp_path):
    path = tmp_path / "drive.dat"
    path.write_text("0.1 1.5\n0.2 -2.0\n0.3 3.25\n")
    assert list(read_drive_file(path, 2)) == [1.5, -2.0]


def test_read_drive_file_empty_raises(tmp_path):
    path = tmp_path / "drive.dat"
    path.write_text("")
    with pytest.raises(ValueError):
        read_drive_file(path, 3)


def test_step_keeps_uniform_equilibrium():
    u = np.ones(16)
    out = crank_nicolson_step(u, 1.0, 1.0, 0.1, 0.01)
    assert np.allclose(out, 1.0)


def test_step_keeps_zero_field():
    out = crank_nicolson_step(np.zeros(8), 0.5, 0.7, 0.2, 0.05)
    assert np.allclose(out, 0.0)


def test_step_commutes_with_translation():
    rng = np.random.default_rng(3)
    u = rng.uniform(-0.5, 0.5, 32)
    a = crank_nicolson_step(np.roll(u, 5), 0.4, 0.6, 0.1, 0.01)
    b = np.roll(crank_nicolson_step(u, 0.4, 0.6, 0.1, 0.01), 5)
    assert np.allclose(a, b)


def test_evolve_history_matches_final_state():
    rng = np.random.default_rng(7)
    u0 = rng.uniform(-0.2, 0.2, 20)
    drive = sine_drive(0.0, 0.01, 12, 1.0, 0.5, 0.0)
    u, history = evolve(u0, drive, 0.0, 0.1, 0.01)
    assert isinstance(history, History1D)
    assert len(history.average) == 12
    assert history.average[-1] == pytest.approx(u.mean())
    assert history.umax[-1] == pytest.approx(np.max(np.abs(u)))
    assert np.all(history.q2_average >= 0)


def test_evolve_uniform_field_has_no_q2_weight():
    _, history = evolve(np.full(10, 0.3), np.zeros(4), 0.0, 0.1, 0.01)
    assert np.allclose(history.q2_average, 0.0)


def _write_start(directory, n=10):
    result = Result1D(
        time=1.0,
        dx=0.1,
        dt=0.01,
        seed=42,
        amplitude=1.0,
        half_period=-1.0,
        offset=0.0,
        x=np.arange(n) * 0.1,
        u=np.linspace(-0.3, 0.3, n),
    )
    write_result(directory / "tdgl_result.dat", result)
    return result


def test_main_continues_run(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    start = _write_start(tmp_path)
    assert spectral1d.main(["0.05"]) == 0
    result = read_result(tmp_path / "tdgl_result.dat")
    assert result.time == pytest.approx(1.05)
    assert result.seed == 42
    assert result.n == start.n
    rows = (tmp_path / "fileCout.dat").read_text().splitlines()
    assert len(rows) == 5
    assert rows[0].split()[0] == "1.01000"
    assert len((tmp_path / "fileumax.dat").read_text().splitlines()) == 5


def test_main_reads_drive_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_start(tmp_path)
    (tmp_path / "drive.dat").write_text("0 0.5\n0.01 0.25\n")
    assert spectral1d.main(["0.03", "drive.dat"]) == 0
    rows = (tmp_path / "fileCout.dat").read_text().splitlines()
    assert [float(r.split()[1]) for r in rows] == [0.5, 0.25, 0.5]