import json

from typer.testing import CliRunner

from bashguide.cli.main import app

runner = CliRunner()


def test_check_passes_for_clean_site(site):
    site.page("index.md", title="Home")
    site.write_config(sidebar=["index"])

    result = runner.invoke(app, ["check", str(site.root)])

    assert result.exit_code == 0
    assert "Test Guide" in result.stdout
    assert "0 error(s)" in result.stdout


def test_check_fails_on_broken_link(site):
    site.page("index.md", title="Home")
    site.write_config(sidebar=["index", {"label": "Loops", "link": "/loops/"}])

    result = runner.invoke(app, ["check", str(site.root)])

    assert result.exit_code == 1
    assert "broken-link" in result.stdout
    assert "1 error(s)" in result.stdout


def test_check_strict_fails_on_orphans(site):
    site.page("index.md", title="Home")
    site.page("draft.md", title="Draft")
    site.write_config(sidebar=["index"])

    assert runner.invoke(app, ["check", str(site.root)]).exit_code == 0
    assert runner.invoke(app, ["check", str(site.root), "--strict"]).exit_code == 1


def test_check_strict_from_environment(site, monkeypatch):
    site.page("index.md", title="Home")
    site.page("draft.md", title="Draft")
    site.write_config(sidebar=["index"])
    monkeypatch.setenv("BASHGUIDE_STRICT", "1")

    result = runner.invoke(app, ["check", str(site.root)])

    assert result.exit_code == 1
    assert "treated" in result.stdout


def test_check_without_config(tmp_path, monkeypatch):
    monkeypatch.setenv("BASHGUIDE_CONFIG_NAME", "missing-site.yml")

    result = runner.invoke(app, ["check", str(tmp_path)])

    assert result.exit_code == 1
    assert "Config Not Found" in result.stdout


def test_tree_json_is_render_ready(site):
    site.page("index.md", title="Home")
    site.page("basics/quoting.md", title="Quoting")
    site.write_config(
        sidebar=[
            "index",
            {"label": "Basics", "items": ["basics/quoting"]},
            {"label": "GitHub", "link": "https://github.com/example/bash-guide"},
        ]
    )

    result = runner.invoke(app, ["tree", str(site.root), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["title"] == "Test Guide"
    assert [entry["label"] for entry in payload["sidebar"]] == ["Home", "Basics", "GitHub"]
    assert payload["sidebar"][1]["entries"][0]["href"] == "/basics/quoting/"
    assert payload["sidebar"][2]["external"] is True


def test_tree_prints_sidebar(site):
    site.page("index.md", title="Home")
    site.write_config(sidebar=[{"label": "Start", "items": ["index"]}])

    result = runner.invoke(app, ["tree", str(site.root)])

    assert result.exit_code == 0
    assert "Start" in result.stdout
    assert "Home" in result.stdout


def test_tree_fails_on_broken_link(site):
    site.page("index.md", title="Home")
    site.write_config(sidebar=["nowhere"])

    result = runner.invoke(app, ["tree", str(site.root)])

    assert result.exit_code == 1
    assert "Broken Navigation" in result.stdout


def test_init_then_check(tmp_path):
    target = tmp_path / "guide"

    init_result = runner.invoke(app, ["init", str(target), "--title", "Bash Notes"])
    check_result = runner.invoke(app, ["check", str(target), "--strict"])

    assert init_result.exit_code == 0
    assert "Initialization Complete" in init_result.stdout
    assert check_result.exit_code == 0
    assert (target / "site.yml").exists()


def test_invalid_environment_setting_is_a_config_error(site, monkeypatch):
    site.page("index.md", title="Home")
    site.write_config(sidebar=["index"])
    monkeypatch.setenv("BASHGUIDE_STRICT", "maybe")

    for command in ("check", "tree"):
        result = runner.invoke(app, [command, str(site.root)])

        assert result.exit_code == 1
        assert "Invalid Configuration" in result.stdout
        assert "Traceback" not in result.stdout
