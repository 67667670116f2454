"""Tests for the slug command line interface."""

import io
import json

import pytest
import yaml

from slugsmith import __version__, langs
from slugsmith.cli import build_parser, main
from slugsmith.langs import default_registry


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command from an empty directory so no slug.toml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def run_cli(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_make(capsys):
    """Each argument becomes one slug line."""
    assert run_cli(["make", "Hello World", "Grüße aus Köln"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["hello-world", "gruesse-aus-koeln"]


def test_make_from_stdin(capsys, monkeypatch):
    """Without arguments, stdin lines are slugified."""
    monkeypatch.setattr("sys.stdin", io.StringIO("Hello World\nTom & Jerry\n"))
    assert run_cli(["make"]) == 0
    assert capsys.readouterr().out.splitlines() == ["hello-world", "tom-jerry"]


def test_make_json(capsys):
    """JSON output pairs inputs with slugs."""
    assert run_cli(["--json", "make", "Hello World"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [{"input": "Hello World", "slug": "hello-world"}]


def test_make_with_options(capsys):
    """Global options override the defaults."""
    argv = ["--separator", "_", "--max-length", "11", "--no-lower", "make", "Hello Big World"]
    assert run_cli(argv) == 0
    assert capsys.readouterr().out.strip() == "Hello_Big"


def test_make_with_language(capsys):
    """--lang adds language replacements."""
    assert run_cli(["--lang", "de", "make", "Tom & Jerry"]) == 0
    assert capsys.readouterr().out.strip() == "tom-und-jerry"


def test_make_with_form_none(capsys):
    """--form none skips normalization."""
    assert run_cli(["--form", "none", "make", "ﬁle"]) == 0
    assert capsys.readouterr().out.strip() == "le"


def test_check_all_valid(capsys):
    """Valid slugs give exit code 0."""
    assert run_cli(["check", "hello-world", "foo_bar"]) == 0
    out = capsys.readouterr().out
    assert "✓ hello-world" in out
    assert "invalid" not in out


def test_check_reports_invalid(capsys):
    """Any invalid slug gives exit code 1 and a summary."""
    assert run_cli(["check", "hello-world", "Bad--slug"]) == 1
    out = capsys.readouterr().out
    assert "✓ hello-world" in out
    assert "✗ Bad--slug" in out
    assert "1 of 2 invalid" in out


def test_check_quiet(capsys):
    """Quiet mode only sets the exit code."""
    assert run_cli(["-q", "check", "--", "-bad"]) == 1
    assert capsys.readouterr().out == ""


def test_check_json(capsys):
    """JSON output lists every slug with its verdict."""
    assert run_cli(["--json", "check", "ok", "not ok"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert data == [{"slug": "ok", "valid": True}, {"slug": "not ok", "valid": False}]


def test_langs(capsys):
    """Built-in languages are listed."""
    assert run_cli(["langs"]) == 0
    out = capsys.readouterr().out
    assert "de: '@' -> 'at', '&' -> 'und'" in out
    assert "en: '@' -> 'at', '&' -> 'and'" in out


def test_langs_yaml(capsys):
    """--yaml prints loadable YAML."""
    assert run_cli(["langs", "--yaml"]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["de"] == {"@": "at", "&": "und"}


def test_config_file(capsys, isolated_cwd):
    """Settings and extra languages come from slug.toml in the cwd."""
    (isolated_cwd / "langs.yaml").write_text('fr:\n  "&": "et"\n', encoding="utf-8")
    (isolated_cwd / "slug.toml").write_text(
        '[slug]\nseparator = "+"\nlanguage_file = "langs.yaml"\nlanguages = ["fr"]\n',
        encoding="utf-8",
    )
    assert run_cli(["make", "Tom & Jerry"]) == 0
    assert capsys.readouterr().out.strip() == "tom+et+jerry"

    assert run_cli(["langs"]) == 0
    assert "fr: '&' -> 'et'" in capsys.readouterr().out


def test_explicit_config(capsys, tmp_path_factory):
    """--config points at a file outside the cwd."""
    path = tmp_path_factory.mktemp("conf") / "custom.toml"
    path.write_text("[slug]\nmax_length = 5\n", encoding="utf-8")
    assert run_cli(["--config", str(path), "make", "Hello World"]) == 0
    assert capsys.readouterr().out.strip() == "hello"


def test_missing_config(capsys, isolated_cwd):
    """A missing --config file is reported."""
    assert run_cli(["--config", str(isolated_cwd / "nope.toml"), "make", "x"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_bad_separator(capsys):
    """Invalid settings print an error and exit 1."""
    assert run_cli(["--separator", "::", "make", "Hello"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert "separator" in err


def test_version(capsys):
    """Test that --version flag works and shows version."""
    assert run_cli(["--version"]) == 0
    out = capsys.readouterr().out
    assert f"slugsmith {__version__}" in out
    assert "python" in out
    assert "platform" in out


def test_subcommand_required():
    """Running without a subcommand is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args([])
    assert exc_info.value.code == 2


def test_languages_added_at_startup(capsys, isolated_cwd, monkeypatch):
    """The CLI resolves codes registered in the process-wide registry."""
    monkeypatch.setattr(langs, "_registry", default_registry())
    langs.add_language_map("fr", {"&": "et"})
    (isolated_cwd / "slug.toml").write_text('[slug]\nlanguages = ["fr"]\n', encoding="utf-8")

    assert run_cli(["make", "Tom & Jerry"]) == 0
    assert capsys.readouterr().out.strip() == "tom-et-jerry"

    assert run_cli(["--lang", "fr", "--separator", "_", "make", "A & B"]) == 0
    assert capsys.readouterr().out.strip() == "a_et_b"
