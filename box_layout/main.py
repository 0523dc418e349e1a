#!/usr/bin/env python3
"""
Box Layout - Main Entry Point

Lays out an HTML file against CSS files and prints the resulting box tree.
"""

import sys
import json
import argparse
from typing import List, Optional

from box_layout import __version__
from box_layout.engine import LayoutEngine
from box_layout.layout import LayoutBox, LayoutError, BoxType
from box_layout.utils.config import Config
from box_layout.utils.logging import setup_logging, log_exception

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Box Layout - compute box geometry for an HTML document")

    parser.add_argument("html", help="HTML file to lay out")
    parser.add_argument("--css", action="append", default=[], metavar="FILE",
                        help="CSS file to apply (may be repeated, applied in order)")
    parser.add_argument("--width", type=float, default=None, help="Viewport width in pixels")
    parser.add_argument("--height", type=float, default=None, help="Viewport height in pixels")
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--full-document", action="store_true",
                        help="Parse as a whole HTML5 document (adds html/head/body)")
    parser.add_argument("--ignore-style-elements", action="store_true",
                        help="Do not apply <style> elements found in the document")
    parser.add_argument("--json", action="store_true", help="Print the layout tree as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def format_tree(layout_box: LayoutBox, indent: int = 0) -> List[str]:
    """
    Format a layout tree as indented text lines.

    Args:
        layout_box: Root of the tree
        indent: Current depth

    Returns:
        One line per box
    """
    if layout_box.box_type == BoxType.ANONYMOUS_BLOCK:
        label = "anonymous"
    else:
        node = layout_box.style_node.node
        label = getattr(node, 'tag_name', None) or '#text'

    content = layout_box.dimensions.content
    margin_box = layout_box.dimensions.margin_box()
    lines = [
        f"{'  ' * indent}{layout_box.box_type.value} <{label}> "
        f"content=({content.x:g}, {content.y:g}, {content.width:g}x{content.height:g}) "
        f"margin-box=({margin_box.x:g}, {margin_box.y:g}, {margin_box.width:g}x{margin_box.height:g})"
    ]
    for child in layout_box.children:
        lines.extend(format_tree(child, indent + 1))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = parse_args(argv)

    config = Config(args.config)
    console_level = "DEBUG" if args.debug else config.get('logging.console_level', "INFO")
    logger = setup_logging(log_file=config.get('logging.file'),
                           console_level=console_level,
                           file_level=config.get('logging.file_level', "DEBUG"),
                           colored=sys.stderr.isatty())

    try:
        with open(args.html, 'r', encoding='utf-8') as f:
            html_content = f.read()

        css_texts = []
        for css_path in args.css:
            with open(css_path, 'r', encoding='utf-8') as f:
                css_texts.append(f.read())
    except OSError as e:
        log_exception(logger, e, "Error reading input")
        return 1

    engine = LayoutEngine(config)
    try:
        root_box = engine.render(html_content, css_texts,
                                 width=args.width, height=args.height,
                                 full_document=args.full_document,
                                 use_style_elements=not args.ignore_style_elements)
    except LayoutError as e:
        log_exception(logger, e, "Layout failed")
        return 1

    if args.json:
        print(json.dumps(root_box.to_dict(), indent=2))
    else:
        print("\n".join(format_tree(root_box)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
