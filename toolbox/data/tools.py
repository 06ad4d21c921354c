"""Discover tools from README front matter and render the tools index.

Every README.md under the scan root whose front matter carries both a
``name`` and a ``purpose`` becomes a row of the index. Tools that ship a
Bun lock file are tagged so a justfile can install them.
"""

from __future__ import annotations

import os
import re
import shlex
import sys
from pathlib import Path
from typing import List, Optional

import frontmatter
import jinja2
import yaml

from toolbox.data.models import Tool

README_FILE = "README.md"
SKIPPED_SEGMENT = "node_modules"
BUN_LOCKFILES = ("bun.lock", "bun.lockb")
JUSTFILE = "justfile"

_INDEX_TEMPLATE = """\
# Tools

| Name | Purpose |
|------|---------|
{% for tool in tools %}
| [{{ tool.name }}]({{ tool.link }}) | {{ tool.purpose }} |
{% endfor %}
"""

_JUSTFILE_TEMPLATE = """\
# Generated by tools-index. Do not edit by hand.

default: list

# List available recipes
list:
    @just --list

# Regenerate the tools index
index:
    tools-index {{ root | quote }}{% if output %} {{ output | quote }}{% endif %} --just

{% if dirs %}
# Install dependencies for every Bun tool
install: {{ install_targets }}

{% endif %}
{% for dir in dirs %}
# Install dependencies for {{ dir.name }}
install-{{ dir.name }}:
    cd {{ dir.path | quote }} && bun install

{% endfor %}
"""

_env = jinja2.Environment(
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
_env.filters["quote"] = shlex.quote


def _detect_lang(tool_dir: Path) -> Optional[str]:
    if any((tool_dir / lockfile).exists() for lockfile in BUN_LOCKFILES):
        return "bun"
    return None


def _cell(value: object) -> str:
    """Flatten a front matter value into a single Markdown table cell."""
    return " ".join(str(value).split()).replace("|", "\\|")


def _find_readmes(root: Path) -> List[Path]:
    """Every README.md under root, sorted, without descending into node_modules."""
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if name != SKIPPED_SEGMENT]
        if README_FILE in filenames:
            found.append(Path(dirpath) / README_FILE)
    found.sort()
    return found


def scan(root: Path) -> List[Tool]:
    """Collect tools from every README.md under root.

    READMEs inside node_modules are ignored. A README that cannot be read
    or parsed is reported on stderr and skipped.
    """
    tools: List[Tool] = []

    for readme in _find_readmes(root):
        relative = readme.relative_to(root)

        try:
            with open(readme, encoding="utf-8") as f:
                post = frontmatter.load(f)
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
            print(f"Warning: Could not read {relative}: {exc}", file=sys.stderr)
            continue

        meta = post.metadata or {}
        name = meta.get("name")
        purpose = meta.get("purpose")
        if not name or not purpose:
            continue

        tool_dir = relative.parent.as_posix()
        if tool_dir == ".":
            tool_dir = ""
        tools.append(
            Tool(
                name=_cell(name),
                purpose=_cell(purpose),
                link=f"./{tool_dir}",
                path=relative.as_posix(),
                lang=_detect_lang(readme.parent),
            )
        )

    return tools


def sort_tools(tools: List[Tool]) -> List[Tool]:
    """Return tools ordered by name, ignoring case."""
    return sorted(tools, key=lambda t: (t.name.casefold(), t.name))


def render(tools: List[Tool]) -> str:
    """Render tools as a Markdown table sorted by name."""
    template = _env.from_string(_INDEX_TEMPLATE)
    return template.render(tools=sort_tools(tools))


def emit(text: str, destination: Optional[Path] = None) -> None:
    """Write text to destination, or to stdout when no destination is given."""
    if destination is None:
        sys.stdout.write(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    print(f"Tools index written to {destination}", file=sys.stderr)


def manifest_dirs(tools: List[Tool]) -> List[str]:
    """Top-level directory of every Bun tool, deduplicated, in name order."""
    dirs: List[str] = []
    for tool in sort_tools(tools):
        if tool.lang != "bun":
            continue
        segment = Path(tool.path).parts[0]
        if segment == README_FILE or segment in dirs:
            continue
        dirs.append(segment)
    return dirs


def _recipe_name(segment: str) -> str:
    return re.sub(r"[^A-Za-z0-9_-]+", "-", segment)


def _relative_to(path: Path, base: Path) -> str:
    """Path as seen from base, which is where just runs recipes."""
    return Path(os.path.relpath(path, base)).as_posix()


def render_manifest(tools: List[Tool], root: Path, output_dir: Path,
                    output: Optional[Path] = None) -> str:
    """Render the justfile that will live in output_dir.

    Install recipes and the index recipe use paths relative to output_dir,
    so they resolve no matter where tools-index was invoked from.
    """
    template = _env.from_string(_JUSTFILE_TEMPLATE)
    dirs = [
        {"name": _recipe_name(segment), "path": _relative_to(root / segment, output_dir)}
        for segment in manifest_dirs(tools)
    ]
    return template.render(
        dirs=dirs,
        install_targets=" ".join(f"install-{d['name']}" for d in dirs),
        root=_relative_to(root, output_dir),
        output=_relative_to(output, output_dir) if output is not None else None,
    )


def generate_manifest(tools: List[Tool], output_dir: Path, root: Path,
                      output: Optional[Path] = None) -> Path:
    """Write a justfile with one install recipe per Bun tool into output_dir."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / JUSTFILE
    path.write_text(render_manifest(tools, root, output_dir, output=output), encoding="utf-8")
    print(f"Justfile written to {path}", file=sys.stderr)
    return path
