# topmark:header:start
#
#   project      : BuildBits
#   file         : filetypes.py
#   file_relpath : src/buildbits/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits `filetypes` command.

Lists the recognized asset types with their capabilities and the backend
bound to each extension.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildbits.assettypes.capabilities import CAPABILITY_TABLE
from buildbits.assettypes.instances import get_asset_type_registry
from buildbits.backends.registry import BackendRegistry

if TYPE_CHECKING:
    from buildbits.cli.console import ClickConsole


def _capability_names(ext: str) -> str:
    names = sorted(c.value for c in CAPABILITY_TABLE.get(ext, ()))
    return ", ".join(names) if names else "-"


@click.command(
    name="filetypes",
    help="List supported asset types, their capabilities and backends.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show one line per extension with capabilities and backend class.",
)
def filetypes_command(*, show_details: bool = False) -> None:
    """List asset types known to BuildBits.

    Args:
        show_details (bool): If True, list every extension with its
            capabilities and the backend class bound to it.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    asset_types = get_asset_type_registry()
    backends = BackendRegistry.as_mapping()

    if not show_details:
        width = max(len(name) for name in asset_types)
        for name, at in sorted(asset_types.items()):
            console.print(
                f"{console.styled(name.ljust(width), bold=True)}  "
                f"{' '.join(at.extensions)}  {at.description}"
            )
        return

    headers = ("Extension", "Type", "Capabilities", "Backend")
    rows: list[tuple[str, ...]] = []
    for name, at in sorted(asset_types.items()):
        for ext in at.extensions:
            backend_cls = backends.get(ext)
            backend = f"{backend_cls.name} ({backend_cls.__name__})" if backend_cls else "-"
            rows.append((ext, name, _capability_names(ext), backend))

    widths = [max(len(row[i]) for row in (headers, *rows)) for i in range(len(headers))]
    console.print(
        console.styled("  ".join(h.ljust(w) for h, w in zip(headers, widths)), underline=True)
    )
    for row in rows:
        console.print("  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())
