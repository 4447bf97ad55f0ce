import numpy as np
import pytest

from tdglsim.datafiles import read_result, write_init
from tdglsim.fd1d import drive_schedule, evolve, explicit_step, main


def test_drive_schedule_constant_when_no_period():
    c = drive_schedule(0.0, 0.1, 5, 1.0, -1.0, 0.3)
    assert np.allclose(c, 0.3)
    assert len(c) == 5


def test_drive_schedule_sine_starts_after_one_step():
    c = drive_schedule(0.0, 0.25, 2, 2.0, 0.5, 1.0)
    assert c[0] == pytest.approx(3.0)
    assert c[1] == pytest.approx(1.0)


def test_explicit_step_fixed_points():
    assert np.allclose(explicit_step(np.ones(8), 1.0, 0.1, 0.01), 1.0)
    assert np.allclose(explicit_step(np.zeros(8), 1.0, 0.1, 0.01), 0.0)


def test_explicit_step_laplacian_conserves_sum():
    rng = np.random.default_rng(0)
    u = rng.normal(size=20) * 0.01
    new = explicit_step(u, 0.0, 1.0, 0.01)
    assert new.sum() == pytest.approx(u.sum() - 0.01 * np.sum(u**3))


def test_explicit_step_is_translation_equivariant():
    rng = np.random.default_rng(1)
    u = rng.normal(size=12)
    assert np.allclose(
        explicit_step(np.roll(u, 3), 0.5, 1.0, 0.01), np.roll(explicit_step(u, 0.5, 1.0, 0.01), 3)
    )


def test_evolve_relaxes_towards_plateau():
    u, averages = evolve(np.full(10, 0.5), np.ones(2000), 1.0, 0.01)
    assert len(averages) == 2000
    assert np.allclose(u, 1.0, atol=1e-3)
    assert np.all(np.diff(averages) >= 0)


def test_main_writes_outputs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "parameters.dat").write_text("dx 1\ndt 0.25\nA 1\nT -1\nCave 0.5")
    write_init(tmp_path / "fileinit.dat", 42, np.zeros(6))
    assert main(["1.0"]) == 0
    result = read_result("tdgl_result.dat")
    assert result.n == 6
    assert result.seed == 42
    assert result.time == pytest.approx(1.0)
    rows = (tmp_path / "fileCout.dat").read_text().splitlines()
    assert len(rows) == 4
    assert all(float(row.split()[1]) == pytest.approx(0.5) for row in rows)
    assert len((tmp_path / "fileAveout.dat").read_text().splitlines()) == 4