import pytest

from blueprints.games.guess_number.pages import (
    render_page, home_fragment, result_fragment,
)


def test_render_page_embeds_fragment(app):
    with app.test_request_context():
        html = render_page("<p id='frag'>hi</p>")
    assert html.startswith("<!DOCTYPE html>")
    assert '<html lang="zh-CN">' in html
    assert "<title>猜数字游戏</title>" in html
    assert "<h1>猜数字游戏</h1>" in html
    assert ".message.success" in html
    assert "<p id='frag'>hi</p>" in html


def test_home_fragment_form(app):
    with app.test_request_context():
        frag = home_fragment()
    assert '<form method="POST" action="/guess">' in frag
    assert 'name="number"' in frag
    assert 'min="1"' in frag and 'max="100"' in frag
    assert "提交猜测" in frag


@pytest.mark.parametrize("css_class", ["success", "error", "info"])
def test_result_fragment_classes(app, css_class):
    with app.test_request_context():
        frag = result_fragment(css_class, "太小了！")
    assert f'<div class="message {css_class}">太小了！</div>' in frag
    assert '<form method="GET" action="/">' in frag
    assert "再玩一次" in frag


def test_result_fragment_escapes_message(app):
    with app.test_request_context():
        frag = result_fragment("info", "<script>x</script>")
    assert "<script>" not in frag
    assert "&lt;script&gt;" in frag


def test_result_fragment_rejects_unknown_class(app):
    with app.test_request_context():
        with pytest.raises(ValueError):
            result_fragment("warning", "x")
