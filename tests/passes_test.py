from functools import reduce

import pytest

from textsafe.cleanup import full_clean_up
from textsafe.config import PipelineSpec
from textsafe.core import run_report, run_text
from textsafe.framework import Artifact, registry, run_step


def _run(steps, artifact):
    return reduce(lambda acc, name: run_step(name, acc), steps, artifact)


def test_registry_expected_keys():
    expected = {
        "trim",
        "fix_encoding",
        "normalize",
        "remove_garbage",
        "strip_symbols",
        "full_clean_up",
        "no_shouting",
        "slugify",
        "shorten",
        "classify",
    }
    assert expected <= registry().keys()


def test_step_by_step_matches_full_clean_up():
    raw = "  ℌello 🎉 "
    steps = ["trim", "normalize", "remove_garbage", "strip_symbols"]
    result = _run(steps, Artifact(payload=raw))
    assert result.payload == full_clean_up(raw) == "Hello "
    assert set(result.meta["metrics"]) == set(steps)


def test_remove_garbage_records_codepoints():
    result = run_step("remove_garbage", Artifact(payload="a\u200bb\u2605\u200b"))
    assert result.payload == "ab"
    assert result.meta["metrics"]["remove_garbage"] == {"codepoints": ["U+200B", "U+2605"]}


def test_classify_keeps_payload():
    result = run_step("classify", Artifact(payload="WIN CASH NOW"))
    assert result.payload == "WIN CASH NOW"
    assert result.meta["metrics"]["classify"] == {
        "shouting": True,
        "prize": True,
        "garbage": False,
        "links": False,
    }


def test_classify_honours_checks_option():
    meta = {"options": {"classify": {"checks": ["prize"]}}}
    result = run_step("classify", Artifact(payload="free bitcoin", meta=meta))
    assert result.meta["metrics"]["classify"] == {"prize": True}
    assert result.meta["options"] == meta["options"]


def test_shorten_options():
    meta = {"options": {"shorten": {"length": 3}}}
    result = run_step("shorten", Artifact(payload="abcdefgh", meta=meta))
    assert result.payload == "abc…"
    assert result.meta["metrics"]["shorten"] == {"truncated": True}


def test_text_pass_metrics():
    result = run_step("no_shouting", Artifact(payload="STOP IT NOW"))
    assert result.payload == "stop it now"
    assert result.meta["metrics"]["no_shouting"] == {"changed": True, "removed": 0}


def test_non_text_payload_passes_through():
    artifact = Artifact(payload={"type": "unknown"})
    assert _run(["full_clean_up", "slugify", "classify"], artifact) is artifact


def test_pipeline_is_idempotent():
    steps = ["full_clean_up", "no_shouting", "classify"]
    once = _run(steps, Artifact(payload="  ＨＥＬＬＯ ꧁WORLD꧂ "))
    twice = _run(steps, once)
    assert once.payload == "hello world"
    assert twice.payload == once.payload


def test_fix_encoding_toggle(monkeypatch):
    monkeypatch.setenv("TEXTSAFE_FIX_ENCODING", "off")
    assert run_step("fix_encoding", Artifact(payload="cafÃ©")).payload == "cafÃ©"
    monkeypatch.setenv("TEXTSAFE_FIX_ENCODING", "on")
    assert run_step("fix_encoding", Artifact(payload="cafÃ©")).payload == "café"


def test_unknown_step_raises():
    with pytest.raises(KeyError):
        run_step("no_such_pass", Artifact(payload="x"))


def test_run_text_with_spec():
    spec = PipelineSpec(pipeline=["full_clean_up", "slugify"], options={})
    artifact, timings = run_text("  Héllo Wörld ", spec)
    assert artifact.payload == "hello-world"
    assert list(timings) == ["full_clean_up", "slugify"]
    report = run_report(artifact)
    assert report["text"] == "hello-world"
    assert set(report["metrics"]) == {"full_clean_up", "slugify"}


def test_run_text_rejects_unknown_pass():
    with pytest.raises(KeyError):
        run_text("x", PipelineSpec(pipeline=["full_clean_up", "bogus"]))


def test_trim_pass_strips_control_characters():
    result = run_step("trim", Artifact(payload="\x00 hi \x1f"))
    assert result.payload == "hi"
    assert result.meta["metrics"]["trim"]["changed"] is True
