"""Tests for TOML component manifests."""

from pathlib import Path

import pytest

from withclass import ManifestError, load_manifest, parse_manifest


class TestLoadManifest:
    """Tests for loading components from withclass.toml."""

    def test_components_in_file_order(self, manifest_path: Path):
        registry = load_manifest(manifest_path)
        assert registry.names == ["button", "badge"]
        assert len(registry) == 2
        assert "button" in registry
        assert registry.source == manifest_path

    def test_button_configuration(self, manifest_path: Path):
        button = load_manifest(manifest_path)["button"]
        assert button.display_name == "button"
        assert button.variant_names == ("color", "is_ghost")
        assert button.config.get_axis("is_ghost").is_boolean

    def test_render_with_defaults(self, manifest_path: Path):
        button = load_manifest(manifest_path)["button"]
        assert button("Save") == '<button type="button" class="btn btn-primary">Save</button>'

    def test_compound_variant_from_manifest(self, manifest_path: Path):
        button = load_manifest(manifest_path)["button"]
        composition = button.compose(color="danger", is_ghost=True)
        assert composition.class_name == "btn btn-error btn-ghost text-error"

    def test_list_classes(self, manifest_path: Path):
        badge = load_manifest(manifest_path).get("badge")
        assert badge("New") == '<span class="badge badge-sm">New</span>'

    def test_unknown_component(self, manifest_path: Path):
        assert load_manifest(manifest_path).get("card") is None

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ManifestError, match="Manifest not found"):
            load_manifest(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "withclass.toml"
        path.write_text("[components.button\n")
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_manifest(path)

    def test_error_names_component(self, tmp_path: Path):
        path = tmp_path / "withclass.toml"
        path.write_text('[components.card]\nclasses = "card"\n')
        with pytest.raises(ManifestError) as exc_info:
            load_manifest(path)
        assert exc_info.value.context.component == "card"
        assert "in component card" in str(exc_info.value)


class TestParseManifest:
    def test_empty(self):
        assert len(parse_manifest({})) == 0

    def test_components_must_be_table(self):
        with pytest.raises(ManifestError, match="must be a table"):
            parse_manifest({"components": ["button"]})

    def test_unknown_keys_rejected(self):
        with pytest.raises(ManifestError):
            parse_manifest({"components": {"button": {"tag": "button", "colour": "red"}}})

    def test_default_for_undeclared_axis(self):
        data = {"components": {"button": {"tag": "button", "default_variants": {"size": "lg"}}}}
        with pytest.raises(ManifestError, match="undeclared axes"):
            parse_manifest(data)
