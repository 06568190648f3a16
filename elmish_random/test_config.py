"""
Configuration tests: env parsing, .env loading, default source override.

Run:  py -3 -m elmish_random.test_config
"""

from __future__ import annotations

import os
import random
import sys
import tempfile
from contextlib import contextmanager

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError

from elmish_random import (
    ConfigError,
    DeterministicSource,
    RandomConfig,
    SimpleSeededSource,
    build_source,
    default_source,
    int_,
    load_config,
    reset_default_source,
    sequence_source,
    set_default_source,
)
from elmish_random.config import SEED_ENV, SOURCE_ENV


_pass = 0
_fail = 0


def _test(name, fn):
    global _pass, _fail
    try:
        fn()
        print(f"  [PASS] {name}")
        _pass += 1
    except Exception as exc:
        print(f"  [FAIL] {name}: {exc}")
        _fail += 1


@contextmanager
def _env(values: dict):
    """Run with only `values` set for the config variables, then restore."""
    saved = {k: os.environ.get(k) for k in (SOURCE_ENV, SEED_ENV)}
    for k in saved:
        os.environ.pop(k, None)
    os.environ.update(values)
    try:
        yield
    finally:
        for k, v in saved.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v
        reset_default_source()


# ---------------------------------------------------------------------------
# RandomConfig
# ---------------------------------------------------------------------------

def test_config_defaults_to_ambient():
    config = RandomConfig()
    assert config.source == "ambient"
    assert config.seed is None
    assert build_source(config) is random.random


def test_config_seeded_source_requires_seed():
    try:
        RandomConfig(source="deterministic")
        raise AssertionError("Expected ValidationError without seed")
    except ValidationError:
        pass  # expected


def test_config_is_frozen():
    config = RandomConfig(source="deterministic", seed=1)
    try:
        config.seed = 2
        raise AssertionError("Expected ValidationError on assignment")
    except ValidationError:
        pass  # expected


def test_build_source_kinds():
    det = build_source(RandomConfig(source="deterministic", seed=3))
    assert isinstance(det, DeterministicSource)
    assert det() == DeterministicSource(3)()

    simple = build_source(RandomConfig(source="simple_seeded", seed=3))
    assert isinstance(simple, SimpleSeededSource)


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------

def test_load_config_empty_env():
    with _env({}):
        assert load_config() == RandomConfig()


def test_load_config_from_env():
    with _env({SOURCE_ENV: "deterministic", SEED_ENV: "42"}):
        config = load_config()
        assert config.source == "deterministic"
        assert config.seed == 42


def test_load_config_bad_seed():
    with _env({SOURCE_ENV: "deterministic", SEED_ENV: "forty-two"}):
        try:
            load_config()
            raise AssertionError("Expected ConfigError for non-integer seed")
        except ConfigError as exc:
            assert exc.variable == SEED_ENV


def test_load_config_unknown_source():
    with _env({SOURCE_ENV: "quantum"}):
        try:
            load_config()
            raise AssertionError("Expected ConfigError for unknown source")
        except ConfigError as exc:
            assert exc.variable == SOURCE_ENV


def test_load_config_missing_seed():
    with _env({SOURCE_ENV: "simple_seeded"}):
        try:
            load_config()
            raise AssertionError("Expected ConfigError for missing seed")
        except ConfigError:
            pass  # expected


def test_load_config_from_env_file():
    with tempfile.NamedTemporaryFile(suffix=".env", delete=False, mode="w") as f:
        f.write(f"{SOURCE_ENV}=simple_seeded\n{SEED_ENV}=7\n")
        path = f.name

    try:
        with _env({}):
            config = load_config(env_file=path)
            assert config.source == "simple_seeded"
            assert config.seed == 7
    finally:
        os.unlink(path)


def test_env_file_does_not_touch_process_env():
    with tempfile.NamedTemporaryFile(suffix=".env", delete=False, mode="w") as f:
        f.write(f"APP_DATABASE_PASSWORD=hunter2\n{SOURCE_ENV}=deterministic\n{SEED_ENV}=3\n")
        path = f.name

    try:
        with _env({}):
            os.environ.pop("APP_DATABASE_PASSWORD", None)
            config = load_config(env_file=path)
            assert config.source == "deterministic"
            assert os.environ.get("APP_DATABASE_PASSWORD") is None
            assert os.environ.get(SOURCE_ENV) is None
            assert os.environ.get(SEED_ENV) is None
    finally:
        os.unlink(path)


def test_process_env_wins_over_env_file():
    with tempfile.NamedTemporaryFile(suffix=".env", delete=False, mode="w") as f:
        f.write(f"{SOURCE_ENV}=simple_seeded\n{SEED_ENV}=7\n")
        path = f.name

    try:
        with _env({SEED_ENV: "11"}):
            config = load_config(env_file=path)
            assert config.source == "simple_seeded"
            assert config.seed == 11
    finally:
        os.unlink(path)


# ---------------------------------------------------------------------------
# Default source
# ---------------------------------------------------------------------------

def test_default_source_is_ambient_without_env():
    with _env({}):
        reset_default_source()
        assert default_source() is random.random


def test_default_source_follows_env():
    with _env({SOURCE_ENV: "deterministic", SEED_ENV: "5"}):
        reset_default_source()
        first = [int_(0, 1000).next() for _ in range(20)]
        reset_default_source()
        second = [int_(0, 1000).next() for _ in range(20)]
        assert first == second


def test_set_default_source_override():
    with _env({}):
        set_default_source(sequence_source([0.25]))
        # float_with_precision(0, 4, 0): 4 * 0.25 = 1
        assert int_(0, 3).next() == 1


def test_bad_dotenv_in_working_dir_falls_back():
    """A broken .env next to the caller neither leaks nor breaks factories."""
    cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmp:
        with open(os.path.join(tmp, ".env"), "w", encoding="utf-8") as f:
            f.write(f"APP_DATABASE_PASSWORD=hunter2\n{SOURCE_ENV}=quantum\n")
        try:
            with _env({}):
                os.environ.pop("APP_DATABASE_PASSWORD", None)
                os.chdir(tmp)
                reset_default_source()
                assert 0 <= int_(0, 10).next() <= 10
                assert default_source() is random.random
                assert os.environ.get("APP_DATABASE_PASSWORD") is None
        finally:
            os.chdir(cwd)


def main():
    tests = [
        ("RandomConfig: defaults", test_config_defaults_to_ambient),
        ("RandomConfig: seed required", test_config_seeded_source_requires_seed),
        ("RandomConfig: frozen", test_config_is_frozen),
        ("build_source: kinds", test_build_source_kinds),
        ("load_config: empty env", test_load_config_empty_env),
        ("load_config: env vars", test_load_config_from_env),
        ("load_config: bad seed", test_load_config_bad_seed),
        ("load_config: unknown source", test_load_config_unknown_source),
        ("load_config: missing seed", test_load_config_missing_seed),
        ("load_config: env file", test_load_config_from_env_file),
        ("load_config: env file isolated", test_env_file_does_not_touch_process_env),
        ("load_config: process env wins", test_process_env_wins_over_env_file),
        ("default_source: bad .env fallback", test_bad_dotenv_in_working_dir_falls_back),
        ("default_source: ambient", test_default_source_is_ambient_without_env),
        ("default_source: env", test_default_source_follows_env),
        ("default_source: override", test_set_default_source_override),
    ]

    print(f"\nRunning {len(tests)} tests...\n")
    for name, fn in tests:
        _test(name, fn)

    print(f"\n{'='*60}")
    print(f"  {_pass} passed, {_fail} failed out of {_pass + _fail}")
    print(f"{'='*60}")

    if _fail > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
