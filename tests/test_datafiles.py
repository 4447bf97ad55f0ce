import numpy as np
import pytest

from tdglsim.datafiles import (
    Parameters,
    Result1D,
    State2D,
    append_series,
    main_random_1d,
    main_random_2d,
    read_init,
    read_parameters,
    read_params_txt,
    read_result,
    read_state,
    reset_files,
    uniform_noise,
    write_init,
    write_params_txt,
    write_result,
    write_state,
)

PARAMETERS_TEXT = "dx 0.5\ndt 0.01\nA 1.5\nT 20\nCave -0.25"


def test_read_parameters(tmp_path):
    path = tmp_path / "parameters.dat"
    path.write_text(PARAMETERS_TEXT)
    assert read_parameters(path) == Parameters(0.5, 0.01, 1.5, 20.0, -0.25)


def test_read_parameters_missing_key(tmp_path):
    path = tmp_path / "parameters.dat"
    path.write_text("dx 0.5\ndt 0.01\n")
    with pytest.raises(ValueError):
        read_parameters(path)


def test_params_txt_round_trip(tmp_path):
    path = tmp_path / "params.txt"
    write_params_txt(path, 0.4, 0.02)
    assert path.read_text() == "dx = 0.400000\ndt = 0.020000"
    assert read_params_txt(path) == (0.4, 0.02)


def test_params_txt_dx_only(tmp_path):
    path = tmp_path / "params.txt"
    path.write_text("dx = 0.3")
    assert read_params_txt(path) == (0.3, None)


def test_params_txt_without_dx(tmp_path):
    path = tmp_path / "params.txt"
    path.write_text("dt = 0.3")
    with pytest.raises(ValueError):
        read_params_txt(path)


def test_result_round_trip(tmp_path):
    u = np.linspace(-1, 1, 5)
    result = Result1D(2.5, 0.1, 0.01, 42, 1.0, -1.0, 0.5, np.arange(5) * 0.1, u)
    path = tmp_path / "tdgl_result.dat"
    write_result(path, result)
    back = read_result(path)
    assert back.n == 5
    assert back.seed == 42
    assert back.time == pytest.approx(2.5)
    assert back.offset == pytest.approx(0.5)
    np.testing.assert_allclose(back.u, u)
    np.testing.assert_allclose(back.x, result.x)


def test_result_truncated(tmp_path):
    path = tmp_path / "tdgl_result.dat"
    path.write_text("3 0 0.1 0.01 1 1 1 0\n0.0 1.0\n")
    with pytest.raises(ValueError):
        read_result(path)


def test_init_round_trip(tmp_path):
    path = tmp_path / "fileinit.dat"
    values = np.array([0.25, -0.5, 1.0])
    write_init(path, 7, values)
    assert path.read_text().splitlines()[0] == "7 3"
    seed, back = read_init(path)
    assert seed == 7
    np.testing.assert_allclose(back, values)


def test_state_round_trip(tmp_path):
    h = np.arange(9, dtype=float).reshape(3, 3) / 10
    path = tmp_path / "state.dat"
    write_state(path, State2D(time=0.0, dx=0.5, h=h))
    lines = path.read_text().splitlines()
    assert lines[0] == "3 0.000000 0.500000"
    assert lines[2].split()[:2] == ["0.00000", "0.50000"]
    back = read_state(path)
    assert back.n == 3
    np.testing.assert_allclose(back.h, h)


def test_state_truncated(tmp_path):
    path = tmp_path / "state.dat"
    path.write_text("2 0 1\n0 0 1\n")
    with pytest.raises(ValueError):
        read_state(path)


def test_reset_and_append(tmp_path):
    path = tmp_path / "series.dat"
    path.write_text("old\n")
    reset_files(tmp_path, ["series.dat", "other.dat"])
    assert path.read_text() == ""
    assert (tmp_path / "other.dat").read_text() == ""
    append_series(path, [1.0], [2.5])
    append_series(path, [2.0], [3.0])
    lines = path.read_text().splitlines()
    assert lines[0] == "1.00000 2.50000000000000000000"
    assert len(lines) == 2


def test_uniform_noise_bounds_and_reproducible():
    a = uniform_noise(np.random.default_rng(1), -0.5, 0.5, 1000)
    b = uniform_noise(np.random.default_rng(1), -0.5, 0.5, 1000)
    np.testing.assert_array_equal(a, b)
    assert a.min() >= -1.0 and a.max() <= 1.0


def test_main_random_1d(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "parameters.dat").write_text(PARAMETERS_TEXT)
    assert main_random_1d(["10", "0.5", "1"]) == 0
    result = read_result(tmp_path / "tdgl_result.dat")
    assert result.n == 10
    assert result.time == 0.0
    assert np.all(result.u >= 0.0) and np.all(result.u <= 2.0)
    np.testing.assert_allclose(result.x, np.arange(10) * 0.5)
    seed, values = read_init(tmp_path / "fileinit.dat")
    assert seed == result.seed
    np.testing.assert_allclose(values, result.u)
    assert (tmp_path / "fileumax.dat").read_text() == ""


def test_main_random_2d(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_params_txt(tmp_path / "params.txt", 0.5, 0.01)
    assert main_random_2d(["2", "0.1", "sim"]) == 0
    save = tmp_path / ".saves" / "sim"
    state = read_state(save / "state.dat")
    init = read_state(save / "init.dat")
    assert state.n == 4
    assert np.all(np.abs(state.h) <= 0.2)
    assert np.all(np.abs(init.h) <= 0.2)
    assert read_params_txt(save / "params.txt") == (0.5, 0.01)
    assert (save / "fileGrad2.dat").read_text() == ""


def test_main_random_2d_missing_args(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main_random_2d(["2", "0.1"]) == 1
    assert not (tmp_path / ".saves").exists()