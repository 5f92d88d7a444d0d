"""Tests for the Jinja2 integration."""

from pathlib import Path

from jinja2 import Environment

from withclass import create_jinja_env, install_jinja, load_manifest


class TestJinjaIntegration:
    """Tests for components and cx inside templates."""

    def test_component_global(self, manifest_path: Path):
        env = create_jinja_env(load_manifest(manifest_path).components)
        template = env.from_string("{{ button('Save', color='danger') }}")
        assert template.render() == '<button type="button" class="btn btn-error">Save</button>'

    def test_children_escaped_in_template(self, action):
        env = create_jinja_env({"Action": action})
        html = env.from_string("{{ Action(label) }}").render(label="<b>")
        assert html == '<button type="button" class="button bg-indigo-600">&lt;b&gt;</button>'

    def test_cx_filter_and_global(self):
        env = create_jinja_env()
        template = env.from_string(
            '<div class="{{ ["card", none, {"card-active": active}] | cx }}" '
            'data-x="{{ cx("a", "", ["b"]) }}"></div>'
        )
        assert template.render(active=True) == '<div class="card card-active" data-x="a b"></div>'
        assert template.render(active=False) == '<div class="card" data-x="a b"></div>'

    def test_install_on_existing_environment(self, action):
        env = Environment(autoescape=True)
        assert install_jinja(env, {"Action": action}) is env
        assert env.globals["Action"] is action
        assert "cx" in env.filters
