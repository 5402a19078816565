import json
import os
import re
import string

import yaml

from .config_builder import referenced_env_vars
from .constants import JS_PRELUDE, JS_TYPE_ANNOTATION
from .custom_exceptions import RenderError
from .custom_types import EnvRef, EnvTemplate, HardhatUserConfig
from .helpers import create_dirs
from .logger import logger

FORMATS = ("js", "json", "yaml")

EXTENSIONS = {
    ".js": "js",
    ".cjs": "js",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}

JS_INDENT = "  "
JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def detect_format(path: str) -> str:
    _, ext = os.path.splitext(path)
    fmt = EXTENSIONS.get(ext.lower())
    if fmt is None:
        raise ValueError(
            f"Unsupported config file extension '{ext}', expected one of {sorted(EXTENSIONS)}"
        )
    return fmt


def _ensure_resolved(config, fmt):
    unresolved = referenced_env_vars(config)
    if unresolved:
        raise RenderError(
            f"{fmt} output needs resolved values, unresolved env vars: {', '.join(unresolved)}"
        )


def to_json(config: HardhatUserConfig) -> str:
    _ensure_resolved(config, "json")
    return json.dumps(config, indent=2) + "\n"


def to_yaml(config: HardhatUserConfig) -> str:
    _ensure_resolved(config, "yaml")
    return yaml.safe_dump(config, sort_keys=False, default_flow_style=False)


def _js_template_literal(template: EnvTemplate) -> str:
    parts = []
    for literal, field, _, _ in string.Formatter().parse(template.template):
        parts.append(
            literal.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
        )
        if field:
            parts.append("${process.env." + field + "}")
    return "`" + "".join(parts) + "`"


def _js_key(key: str) -> str:
    return key if JS_IDENTIFIER.match(key) else json.dumps(key)


def _is_scalar(value) -> bool:
    return not isinstance(value, (dict, list))


def js_literal(value, level=0) -> str:
    """Render `value` as a JavaScript expression, prettier-style with trailing commas."""
    if isinstance(value, EnvRef):
        return f"process.env.{value.name}"
    if isinstance(value, EnvTemplate):
        return _js_template_literal(value)
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value)

    pad = JS_INDENT * (level + 1)
    closing_pad = JS_INDENT * level
    if isinstance(value, dict):
        if not value:
            return "{}"
        entries = [
            f"{pad}{_js_key(key)}: {js_literal(item, level + 1)},\n"
            for key, item in value.items()
        ]
        return "{\n" + "".join(entries) + closing_pad + "}"
    if isinstance(value, list):
        if all(_is_scalar(item) for item in value):
            return "[" + ", ".join(js_literal(item, level) for item in value) + "]"
        entries = [f"{pad}{js_literal(item, level + 1)},\n" for item in value]
        return "[\n" + "".join(entries) + closing_pad + "]"

    raise RenderError(f"Can't render value of type {type(value).__name__} to JavaScript")


def to_javascript(config: HardhatUserConfig, with_dotenv: bool | None = None) -> str:
    """
    Render a CommonJS Hardhat config. `with_dotenv` controls the
    `require("dotenv").config()` line and defaults to whether `config` still
    reads anything from the environment.
    """
    if with_dotenv is None:
        with_dotenv = bool(referenced_env_vars(config))
    prelude = JS_PRELUDE if with_dotenv else JS_PRELUDE[:1]
    lines = prelude + [
        "",
        JS_TYPE_ANNOTATION,
        f"module.exports = {js_literal(config)};",
    ]
    return "\n".join(lines) + "\n"


RENDERERS = {
    "js": to_javascript,
    "json": to_json,
    "yaml": to_yaml,
}


def render(config: HardhatUserConfig, fmt: str, **options) -> str:
    if fmt not in RENDERERS:
        raise RenderError(f"Unknown format '{fmt}', expected one of {list(FORMATS)}")
    return RENDERERS[fmt](config, **options)


def write_config(
    config: HardhatUserConfig, path: str, fmt: str | None = None, **options
) -> str:
    fmt = fmt or detect_format(path)
    content = render(config, fmt, **options)

    create_dirs(path)
    with open(path, "w") as config_file:
        config_file.write(content)

    logger.okay(f"Config written ({fmt})", path)
    return path
