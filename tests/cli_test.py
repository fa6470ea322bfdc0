import json
import textwrap

from typer.testing import CliRunner

from textsafe.cli import app

runner = CliRunner()


def test_clean():
    result = runner.invoke(app, ["clean", "  ℌello ꧁world꧂  "])
    assert result.exit_code == 0
    assert result.stdout == "Hello world\n"


def test_slug():
    result = runner.invoke(app, ["slug", "Hello World!!"])
    assert result.exit_code == 0
    assert result.stdout == "hello-world\n"


def test_classify():
    result = runner.invoke(app, ["classify", "Win a PRIZE"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "garbage": False,
        "links": False,
        "prize": True,
        "shouting": True,
    }


def test_encode_file(tmp_path):
    src = tmp_path / "data.json"
    src.write_text('{"a": "</script>"}', encoding="utf-8")
    result = runner.invoke(app, ["encode", str(src)])
    assert result.exit_code == 0
    assert result.stdout == '{"a":"\\u003c/script\\u003e"}\n'


def test_encode_stdin():
    result = runner.invoke(app, ["encode"], input='[1, "<"]')
    assert result.exit_code == 0
    assert result.stdout == '[1,"\\u003c"]\n'


def test_encode_invalid_json_exits_non_zero():
    result = runner.invoke(app, ["encode"], input="{not json")
    assert result.exit_code == 1


def test_run_with_spec(tmp_path):
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text(
        textwrap.dedent(
            """
            pipeline: [full_clean_up, slugify]
            """
        )
    )
    result = runner.invoke(app, ["run", "  Héllo Wörld ", "--spec", str(cfg)])
    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["text"] == "hello-world"
    assert set(report["metrics"]) == {"full_clean_up", "slugify"}


def test_run_unknown_pass_exits_non_zero(tmp_path):
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text("pipeline: [bogus]\n")
    result = runner.invoke(app, ["run", "x", "--spec", str(cfg)])
    assert result.exit_code == 1


def test_passes_lists_registry():
    result = runner.invoke(app, ["passes"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert "full_clean_up: trim, normalize, remove_garbage, strip_symbols." in lines
    assert any(line.startswith("classify: Record shouting") for line in lines)
