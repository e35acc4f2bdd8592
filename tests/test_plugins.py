from flask import Flask

import plugins


def test_guess_number_registered_at_root(app):
    rules = {r.rule: r.endpoint for r in app.url_map.iter_rules()}
    assert rules["/"] == "guess_number.home"
    assert rules["/guess"] == "guess_number.guess"


def test_registration_logged(capsys):
    app = Flask("games")
    plugins.register_plugins(app)
    assert "[plugins] Registered 'guess_number' at /" in capsys.readouterr().out
    assert "guess_number" in app.blueprints


def test_missing_base_pkg_is_skipped(capsys):
    app = Flask("empty")
    plugins.register_plugins(app, base_pkg="no_such_games_pkg")
    assert "not found" in capsys.readouterr().out
    assert not app.blueprints
