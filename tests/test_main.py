import json

import pytest

from box_layout.main import main


@pytest.fixture
def page(tmp_path):
    html = tmp_path / 'page.html'
    html.write_text('<div class="a"><span>x</span></div>')
    css = tmp_path / 'style.css'
    css.write_text('.a { width: 100px; } div { display: block; } span { display: inline; }')
    return html, css


def test_json_output(page, capsys):
    html, css = page

    status = main([str(html), '--css', str(css), '--width', '100', '--json'])

    assert status == 0
    data = json.loads(capsys.readouterr().out)
    assert data['tag'] == 'div'
    assert data['dimensions']['content']['width'] == 100
    assert data['children'][0]['box_type'] == 'anonymous'


def test_text_output(page, capsys):
    html, css = page

    status = main([str(html), '--css', str(css), '--width', '100'])

    lines = capsys.readouterr().out.splitlines()
    assert status == 0
    assert lines[0].startswith('block <div> content=(0, 0, 100x0)')
    assert lines[1].strip().startswith('anonymous <anonymous>')
    assert lines[2].strip().startswith('inline <span>')


def test_hidden_root_fails(tmp_path, capsys):
    html = tmp_path / 'page.html'
    html.write_text('<div></div>')
    css = tmp_path / 'style.css'
    css.write_text('div { display: none; }')

    assert main([str(html), '--css', str(css)]) == 1
    assert capsys.readouterr().out == ''


def test_missing_input_fails(tmp_path):
    assert main([str(tmp_path / 'nope.html')]) == 1


def test_config_viewport(page, tmp_path, capsys):
    html, css = page
    config = tmp_path / 'config.json'
    config.write_text(json.dumps({'viewport': {'width': 300}}))

    main([str(html), '--css', str(css), '--config', str(config), '--json'])

    # .a pins the width at 100px; margin-right takes the rest
    data = json.loads(capsys.readouterr().out)
    assert data['dimensions']['content']['width'] == 100
    assert data['dimensions']['margin']['right'] == 200
