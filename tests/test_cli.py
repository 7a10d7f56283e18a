import io
import json

from mathformat import cli
from mathformat.errors import ClipboardError


def test_convert_prints_latex(capsys):
    assert cli.main(["convert", "x^2"]) == 0
    assert capsys.readouterr().out == "x^{2}\n"


def test_convert_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a/b\n"))
    assert cli.main(["convert"]) == 0
    assert capsys.readouterr().out == "\\frac{a}{b}\n"


def test_convert_mathml(capsys):
    assert cli.main(["convert", "--mathml", "x_1"]) == 0
    assert capsys.readouterr().out == "<math><mrow>x_{1}</mrow></math>\n"


def test_convert_json(capsys, einstein_input, einstein_latex):
    assert cli.main(["convert", "--json", einstein_input]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["latex"] == einstein_latex
    assert data["patterns"]["isEinsteinEquation"] is True


def test_convert_copy(capsys, monkeypatch):
    copied = []
    monkeypatch.setattr(cli, "copy_to_clipboard", copied.append)
    assert cli.main(["convert", "--copy", "mathml", "x^2"]) == 0
    assert copied == ["<math><mrow>x^{2}</mrow></math>"]


def test_clipboard_failure_exits_1(monkeypatch):
    def _fail(text):
        raise ClipboardError("no clipboard")

    monkeypatch.setattr(cli, "copy_to_clipboard", _fail)
    assert cli.main(["convert", "--copy", "latex", "x^2"]) == 1


def test_detect(capsys):
    assert cli.main(["detect", "alpha/β"]) == 0
    flags = json.loads(capsys.readouterr().out)
    assert flags["hasGreekLetters"] is True
    assert flags["hasFractions"] is False


def test_export(capsys, tmp_path):
    target = tmp_path / "out.docx"
    assert cli.main(["export", "a/b", "-o", str(target)]) == 0
    assert target.exists()
    assert capsys.readouterr().out.strip() == str(target)


def test_preview_without_browser(capsys, tmp_path, monkeypatch):
    opened = []
    monkeypatch.setattr(cli.webbrowser, "open", opened.append)
    target = tmp_path / "preview.html"
    assert cli.main(["preview", "x^2", "-o", str(target), "--dark", "--no-open"]) == 0
    assert target.exists()
    assert '<body class="dark">' in target.read_text(encoding="utf-8")
    assert opened == []


def test_preview_opens_browser(tmp_path, monkeypatch):
    opened = []
    monkeypatch.setattr(cli.webbrowser, "open", opened.append)
    target = tmp_path / "preview.html"
    assert cli.main(["preview", "x^2", "-o", str(target)]) == 0
    assert opened == [target.resolve().as_uri()]
