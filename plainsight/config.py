"""Load CLI / app defaults from config.txt.

Reads a simple ``key = value`` text file from the project root.
Blank lines and lines starting with ``#`` are ignored.
Integer-looking values are cast to ``int`` and true/false words to ``bool``.

Set ``PLAINSIGHT_CONFIG`` (in the environment or a ``.env`` file) to read
a different file.

The simplifier itself never reads this; the CLI and the Streamlit app use
it to build a complete :class:`~plainsight.simplify.SimplifyOptions`.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .glossary import DEFAULT_GLOSSARY, load_glossary
from .simplify import SimplifyConfigError, SimplifyOptions

logger = logging.getLogger(__name__)

load_dotenv()

_console = Console()

ConfigValue = str | int | bool

DEFAULTS: Dict[str, ConfigValue] = {
    "mode": "paragraph",
    "inline_glossary": True,
    "glossary_path": "",
    "log_level": "WARNING",
}

CONFIG_PATH = os.environ.get(
    "PLAINSIGHT_CONFIG",
    os.path.join(os.path.dirname(__file__), os.pardir, "config.txt"),
)

_BOOL_TRUE = frozenset({"true", "yes", "1", "on"})
_BOOL_FALSE = frozenset({"false", "no", "0", "off"})


def load_config(path: str = CONFIG_PATH) -> Dict[str, ConfigValue]:
    """Parse *path* and return defaults merged with its overrides.

    File format (one pair per line)::

        # comment
        mode = bullets
        inline_glossary = no
        glossary_path = glossary.json

    Keys not present in the file keep their default values.
    """
    cfg: Dict[str, ConfigValue] = dict(DEFAULTS)

    resolved = os.path.normpath(path)
    if not os.path.isfile(resolved):
        logger.warning(f"Config file not found at {resolved}, using defaults")
        return cfg

    with open(resolved, encoding="utf-8") as fh:
        for lineno, raw_line in enumerate(fh, start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                logger.warning(f"{resolved}:{lineno}: skipping malformed line: {line!r}")
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip()

            if value.lower() in _BOOL_TRUE:
                cfg[key] = True
                continue
            if value.lower() in _BOOL_FALSE:
                cfg[key] = False
                continue
            if value.isdigit():
                cfg[key] = int(value)
                continue
            cfg[key] = value

    logger.info(f"Loaded config from {resolved}: {cfg}")
    return cfg


def glossary_from_config(cfg: Mapping[str, ConfigValue]) -> Dict[str, str]:
    """The glossary named by ``glossary_path``, or the example glossary."""
    path = str(cfg.get("glossary_path") or "").strip()
    if not path:
        return dict(DEFAULT_GLOSSARY)
    return load_glossary(path)


def options_from_config(
    cfg: Mapping[str, ConfigValue],
    glossary: Optional[Mapping[str, str]] = None,
) -> SimplifyOptions:
    """Build fully specified options from a config dict.

    *glossary* overrides whatever ``glossary_path`` points to.
    """
    inline = cfg.get("inline_glossary", DEFAULTS["inline_glossary"])
    if not isinstance(inline, bool):
        raise SimplifyConfigError(f"inline_glossary must be a boolean, got {inline!r}.")
    return SimplifyOptions(
        mode=str(cfg.get("mode", DEFAULTS["mode"])),  # type: ignore[arg-type]
        inline_glossary=inline,
        glossary=glossary if glossary is not None else glossary_from_config(cfg),
    )


def print_config(cfg: Mapping[str, ConfigValue]) -> None:
    """Pretty-print the active configuration using a rich table."""
    table = Table(
        title="config.txt",
        title_style="bold yellow",
        border_style="yellow",
        show_header=True,
        header_style="bold",
        padding=(0, 2),
    )
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white bold")
    for key, value in cfg.items():
        table.add_row(str(key), str(value))
    _console.print(table)
