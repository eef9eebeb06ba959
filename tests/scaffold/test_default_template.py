"""Tests for rendering the bundled default template."""

import json

import pytest

from create_next_app.resolver import ProjectConfig
from create_next_app.scaffold.default_template import install_default_template
from create_next_app.scaffold.template_renderer import render_template

TS_APP = ProjectConfig(
    typescript=True, eslint=True, tailwind=True, app_router=True, src_dir=False, import_alias="@/*",
)
JS_PAGES = ProjectConfig(
    typescript=False, eslint=False, tailwind=False, app_router=False, src_dir=True, import_alias="~/*",
)


@pytest.mark.unit
class TestTypeScriptAppRouter:

    @pytest.fixture
    def root(self, tmp_path):
        root = tmp_path / "my-app"
        install_default_template(str(root), "my-app", TS_APP)
        return root

    def test_writes_expected_files(self, root):
        for relative in [
            "package.json", ".gitignore", "README.md", "next.config.mjs", "tsconfig.json",
            "next-env.d.ts", ".eslintrc.json", "tailwind.config.ts", "postcss.config.js",
            "app/layout.tsx", "app/page.tsx", "app/globals.css",
        ]:
            assert (root / relative).is_file(), relative

    def test_package_json(self, root):
        package = json.loads((root / "package.json").read_text())

        assert package["name"] == "my-app"
        assert package["scripts"]["lint"] == "next lint"
        assert {"typescript", "eslint", "tailwindcss"} <= set(package["devDependencies"])

    def test_tsconfig_carries_import_alias(self, root):
        tsconfig = json.loads((root / "tsconfig.json").read_text())

        assert tsconfig["compilerOptions"]["paths"] == {"@/*": ["./*"]}

    def test_no_pages_router_files(self, root):
        assert not (root / "pages").exists()
        assert not (root / "jsconfig.json").exists()


@pytest.mark.unit
class TestJavaScriptPagesRouterInSrc:

    @pytest.fixture
    def root(self, tmp_path):
        root = tmp_path / "site"
        install_default_template(str(root), "site", JS_PAGES)
        return root

    def test_pages_live_under_src(self, root):
        assert (root / "src" / "pages" / "index.js").is_file()
        assert (root / "src" / "pages" / "_app.js").is_file()
        assert (root / "src" / "styles" / "globals.css").is_file()

    def test_jsconfig_points_alias_at_src(self, root):
        jsconfig = json.loads((root / "jsconfig.json").read_text())

        assert jsconfig == {"compilerOptions": {"paths": {"~/*": ["./src/*"]}}}

    def test_optional_tooling_skipped(self, root):
        for relative in ["tsconfig.json", ".eslintrc.json", "tailwind.config.js", "postcss.config.js"]:
            assert not (root / relative).exists(), relative

    def test_package_json_has_no_lint_script(self, root):
        package = json.loads((root / "package.json").read_text())

        assert "lint" not in package["scripts"]
        assert package["devDependencies"] == {}

    def test_app_imports_styles_through_alias(self, root):
        assert 'import "~/styles/globals.css";' in (root / "src" / "pages" / "_app.js").read_text()


@pytest.mark.unit
class TestUnresolvedToggles:

    def test_example_fallback_config_renders_javascript(self, tmp_path):
        root = tmp_path / "fallback"

        install_default_template(str(root), "fallback", ProjectConfig())

        assert (root / "jsconfig.json").is_file()
        assert (root / "pages" / "index.js").is_file()


@pytest.mark.unit
class TestRenderTemplate:

    def test_missing_template_raises(self):
        with pytest.raises(FileNotFoundError):
            render_template("default/nonexistent.j2")
