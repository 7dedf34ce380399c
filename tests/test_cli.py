"""Tests for the htmlbuilder CLI."""

from typer.testing import CliRunner

from htmlbuilder import __version__
from htmlbuilder.cli import typer_app

runner = CliRunner()

TEMPLATE = """div.box
>h1(Title)
>div.menu
>>ul
>>>li(Item 1)
"""


def write(tmp_path, text=TEMPLATE, name="page.hb"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_version():
    result = runner.invoke(typer_app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_render_prints_html(tmp_path):
    result = runner.invoke(typer_app, ["render", str(write(tmp_path))])
    assert result.exit_code == 0, result.output
    assert (
        '<div class="box"><h1>Title</h1><div class="menu"><ul><li>Item 1</li></ul></div></div>'
        in result.output
    )


def test_render_page_to_file(tmp_path):
    out = tmp_path / "out" / "page.html"
    result = runner.invoke(
        typer_app,
        ["render", str(write(tmp_path)), "--page", "--title", "Demo", "-o", str(out)],
    )
    assert result.exit_code == 0, result.output
    html = out.read_text()
    assert "<title>Demo</title>" in html
    assert "<li>Item 1</li>" in html


def test_render_uses_config_file(tmp_path):
    config = tmp_path / "custom.yaml"
    config.write_text('marker: "-"\ncontainer: main\n')
    template = write(tmp_path, "ul\n-li(x)\n")
    result = runner.invoke(typer_app, ["render", str(template), "-c", str(config)])
    assert result.exit_code == 0, result.output
    assert "<ul><li>x</li></ul>" in result.output


def test_render_missing_tag_fails(tmp_path):
    template = write(tmp_path, "div\n>(no tag)\n")
    result = runner.invoke(typer_app, ["render", str(template)])
    assert result.exit_code == 1
    assert "missing tag" in result.output


def test_render_missing_file(tmp_path):
    result = runner.invoke(typer_app, ["render", str(tmp_path / "nope.hb")])
    assert result.exit_code == 1
    assert "File not found" in result.output


def test_tree(tmp_path):
    result = runner.invoke(typer_app, ["tree", str(write(tmp_path))])
    assert result.exit_code == 0, result.output
    for label in ["div.box", "h1(Title)", "div.menu", "ul", "li(Item 1)"]:
        assert label in result.output
