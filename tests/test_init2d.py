import numpy as np
import pytest

from tdglsim.datafiles import read_state, write_params_txt
from tdglsim.init2d import (
    circle_profile,
    flat_profile,
    grid_size,
    main_circle,
    main_flat,
    main_random,
    main_random_fft,
    main_stripe,
    random_profile,
    stripe_profile,
)


def test_grid_size_recomputes_spacing():
    n, dx = grid_size(1.0, 0.3)
    assert n == 3
    assert n * dx == pytest.approx(1.0)


def test_grid_size_empty():
    with pytest.raises(ValueError):
        grid_size(0.1, 0.5)


def test_circle_profile_sign_and_symmetry():
    state = circle_profile(20.0, 0.5, 1.0, 4.0)
    h = state.h
    assert state.n == 40
    np.testing.assert_allclose(h, h.T)
    assert h[20, 20] > 0.9
    assert h[0, 0] < -0.9
    assert np.all(np.abs(h) <= 1.0)


def test_random_profile_range_and_mean():
    h = random_profile(50, 0.2, 1.0, np.random.default_rng(0))
    assert h.shape == (50, 50)
    assert h.min() >= 0.6 and h.max() <= 1.4
    assert abs(h.mean() - 1.0) < 0.05


def test_flat_profile():
    h = flat_profile(3, 0.7)
    assert h.shape == (3, 3)
    assert np.all(h == 0.7)


def test_stripe_profile_depends_only_on_x():
    state = stripe_profile(30.0, 1.0, 1.0)
    h = state.h
    np.testing.assert_allclose(h, np.repeat(h[:, :1], state.n, axis=1))
    assert h[15, 0] > 0.9
    assert h[0, 0] < -0.9


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_params_txt(tmp_path / "params.txt", 0.5, 0.01)
    return tmp_path


def test_main_circle(workdir, capsys):
    assert main_circle(["4", "1", "1"]) == 0
    state = read_state(workdir / "state.dat")
    assert state.n == 8
    assert (workdir / "fileRadiout.dat").read_text() == ""
    assert "WARNING" not in capsys.readouterr().out


def test_main_circle_warns_on_large_radius(workdir, capsys):
    assert main_circle(["4", "1", "3"]) == 0
    assert "WARNING" in capsys.readouterr().out


def test_main_circle_missing_args(workdir):
    assert main_circle(["4", "1"]) == 1
    assert not (workdir / "state.dat").exists()


def test_main_random_resets_files(workdir):
    assert main_random(["2", "0.1", "0.5"]) == 0
    state = read_state(workdir / "state.dat")
    assert state.n == 4
    assert state.h.min() >= 0.3 and state.h.max() <= 0.7
    assert (workdir / "stateFFT.dat").read_text() == ""


def test_main_random_fft_writes_state_only(workdir):
    assert main_random_fft(["2", "0.1"]) == 0
    assert np.all(np.abs(read_state(workdir / "state.dat").h) <= 0.2)
    assert not (workdir / "fileQ2.dat").exists()


def test_main_flat(workdir):
    assert main_flat(["2", "0.3"]) == 0
    np.testing.assert_allclose(read_state(workdir / "state.dat").h, 0.3)
    assert (workdir / "fileCout.dat").read_text() == ""


def test_main_stripe(workdir):
    assert main_stripe(["6", "1"]) == 0
    state = read_state(workdir / "state.dat")
    assert state.n == 12
    np.testing.assert_allclose(state.h, stripe_profile(6.0, 0.5, 1.0).h, atol=1e-12)


def test_main_stripe_missing_args(workdir):
    assert main_stripe(["6"]) == 1