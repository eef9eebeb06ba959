"""Materialise the bundled default project template."""

import os
from dataclasses import dataclass

from create_next_app.scaffold.template_renderer import render_template

NEXT_VERSION = "14.1.0"


@dataclass(frozen=True)
class TemplateFile:
    template: str
    target: str
    # Name of a boolean template variable that must be true, or None.
    when: str | None = None
    unless: str | None = None
    in_src_dir: bool = False


TEMPLATE_FILES = (
    TemplateFile("package.json.j2", "package.json"),
    TemplateFile("gitignore.j2", ".gitignore"),
    TemplateFile("README.md.j2", "README.md"),
    TemplateFile("next.config.mjs.j2", "next.config.mjs"),
    TemplateFile("tsconfig.json.j2", "tsconfig.json", when="typescript"),
    TemplateFile("next-env.d.ts.j2", "next-env.d.ts", when="typescript"),
    TemplateFile("tsconfig.json.j2", "jsconfig.json", unless="typescript"),
    TemplateFile("eslintrc.json.j2", ".eslintrc.json", when="eslint"),
    TemplateFile("tailwind.config.j2", "tailwind.config.{ext}", when="tailwind"),
    TemplateFile("postcss.config.js.j2", "postcss.config.js", when="tailwind"),
    TemplateFile("globals.css.j2", "app/globals.css", when="app_router", in_src_dir=True),
    TemplateFile("app/layout.j2", "app/layout.{jsx}", when="app_router", in_src_dir=True),
    TemplateFile("app/page.j2", "app/page.{jsx}", when="app_router", in_src_dir=True),
    TemplateFile("globals.css.j2", "styles/globals.css", unless="app_router", in_src_dir=True),
    TemplateFile("pages/_app.j2", "pages/_app.{jsx}", unless="app_router", in_src_dir=True),
    TemplateFile("pages/index.j2", "pages/index.{jsx}", unless="app_router", in_src_dir=True),
)


def template_variables(app_name, config):
    typescript = bool(config.typescript)
    return {
        "app_name": app_name,
        "typescript": typescript,
        "eslint": bool(config.eslint),
        "tailwind": bool(config.tailwind),
        "app_router": bool(config.app_router),
        "src_dir": bool(config.src_dir),
        "import_alias": config.import_alias or "@/*",
        "alias_prefix": (config.import_alias or "@/*")[:-2],
        "next_version": NEXT_VERSION,
        "ext": "ts" if typescript else "js",
        "jsx": "tsx" if typescript else "js",
    }


def _selected(template_file, variables):
    if template_file.when and not variables[template_file.when]:
        return False
    if template_file.unless and variables[template_file.unless]:
        return False
    return True


def _target_path(root, template_file, variables):
    target = template_file.target.format(ext=variables["ext"], jsx=variables["jsx"])
    if template_file.in_src_dir and variables["src_dir"]:
        target = os.path.join("src", target)
    return os.path.join(root, target)


def install_default_template(root: str, app_name: str, config) -> list[str]:
    """Render the default template into root and return the written paths.

    Args:
        root: Destination directory; created if missing.
        app_name: Package name written into package.json.
        config: ProjectConfig with the resolved toggles.
    """
    variables = template_variables(app_name, config)
    written = []
    for template_file in TEMPLATE_FILES:
        if not _selected(template_file, variables):
            continue
        path = _target_path(root, template_file, variables)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            f.write(render_template(f"default/{template_file.template}", **variables))
        written.append(path)
    return written
