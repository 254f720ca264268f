# src/bem_classnames/demo.py
import argparse
import json
import sys

from .bem import ClassNameError


def main(argv=None):
    """CLI demo: print a block's class-name map and the root class built from params."""
    from .naming import BlockModule

    parser = argparse.ArgumentParser(
        prog="bem-demo",
        description="Print the namespaced class-name map of a BEM block.",
    )
    parser.add_argument("block", nargs="?", default=None, help="Block name (default: accordion demo)")
    parser.add_argument(
        "elements",
        nargs="*",
        help="Element names (e.g. header section)",
    )
    parser.add_argument("--namespace", default=None, help="Override the configured namespace")
    parser.add_argument(
        "--modifier",
        action="append",
        default=[],
        dest="modifiers",
        help="Modifier to add to the root class (repeatable)",
    )

    args = parser.parse_args(argv)
    if args.block is None:
        module = BlockModule("accordion", ("header", "section"))
    else:
        module = BlockModule(args.block, tuple(args.elements))

    try:
        result = {
            "classNames": module.class_names(args.namespace),
            "className": module.format_class(
                {f"@{m}": True for m in args.modifiers}, namespace=args.namespace
            ),
        }
    except ClassNameError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
