import importlib

import uangkas.config.paths as paths


def test_reload_with_unknown_stage_env(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_STAGE", "staging")
    monkeypatch.setenv("BASE_PATH", str(tmp_path))
    try:
        mod = importlib.reload(paths)
        assert mod.BASE_PATH == tmp_path.resolve()
        assert not hasattr(mod, "APP_STAGE")
    finally:
        monkeypatch.undo()
        importlib.reload(paths)


def test_int_envs_fall_back_on_garbage(monkeypatch):
    monkeypatch.setenv("KAS_API_TIMEOUT", "abc")
    monkeypatch.setenv("SERVER_PAGE_SIZE_OPTIONS", "x,0,")
    assert paths._int_env("KAS_API_TIMEOUT", 30) == 30
    assert paths._int_tuple_env("SERVER_PAGE_SIZE_OPTIONS", (10, 20)) == (10, 20)
