"""CLI entry point for list_diagrams package.

Invoke as:  python scripts/list_diagrams --diagram list
"""

# Bootstrap: when run as `python scripts/list_diagrams` (directory path),
# re-execute through runpy so the package machinery resolves relative imports
# correctly and without DeprecationWarning.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("list_diagrams", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable — run_module already calls sys.exit()

import argparse
import math
import sys

from ._common import OUTPUT_DIR, Metrics, save
from .lists import REMOVERS
from .scenes import SCENES, SCENES_BY_NAME, render
from .surface import Surface


def pixel_ratio(text):
    """argparse type for --pixel-ratio: a finite, strictly positive float."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid pixel ratio: {text!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"pixel ratio must be finite and positive, got {text}")
    return value


def match_diagram(query):
    """Match a query like 'list', 'list.png', or 'LIST' to a scene name."""
    q = query.strip().lower()
    if q.endswith(".png"):
        q = q[: -len(".png")]
    return q if q in SCENES_BY_NAME else None


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate the linked-list diagrams as PNG images."
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--diagram",
        action="append",
        help="Diagram to generate (e.g. list); may be repeated",
    )
    group.add_argument("--all", action="store_true", help="Generate all diagrams")
    group.add_argument("--list", action="store_true", help="List available diagrams")
    parser.add_argument(
        "--pixel-ratio",
        type=pixel_ratio,
        default=1.0,
        help="Device pixel ratio the images are drawn for (default: 1)",
    )
    parser.add_argument(
        "--out", default=OUTPUT_DIR, help=f"Output directory (default: {OUTPUT_DIR})"
    )
    args = parser.parse_args(argv)

    if args.list:
        print("Available diagrams:")
        for scene in SCENES:
            print(f"  {scene.name + '.png':<20} {scene.title}")
            remover = REMOVERS.get(scene.name)
            if remover is not None:
                print(f"  {'':<20} depicts lists.{remover.__name__}()")
        print(f"\n{len(SCENES)} diagrams total.")
        return 0

    if args.all:
        names = [scene.name for scene in SCENES]
    else:
        names = []
        for query in args.diagram:
            name = match_diagram(query)
            if name is None:
                print(f"No diagram named '{query}'.")
                print("Use --list to see available diagrams.")
                return 1
            names.append(name)

    metrics = Metrics.for_ratio(args.pixel_ratio)
    host = {name: Surface(metrics) for name in names}

    drawn = render(host)
    for name in drawn:
        save(host[name], args.out, f"{name}.png")

    print(f"\nGenerated {len(drawn)} diagram(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
