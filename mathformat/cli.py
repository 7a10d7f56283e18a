#!/usr/bin/env python3
"""
Command line front-end for the math expression formatter.

Usage examples:
  # Print LaTeX for an expression
  mathformat convert "G_μν + Λg_μν = c^4/(8πG) T_μν"

  # Read from stdin, print everything as JSON and copy the MathML
  echo "x^2 + y_1" | mathformat convert --json --copy mathml

  # Write a Word document and an HTML preview
  mathformat export "a/b + alpha" -o out/expr.docx
  mathformat preview "a/b + alpha" --dark --no-open

  # Serve the JSON API and preview page
  mathformat serve --port 8000
"""
import argparse
import json
import sys
import webbrowser
from pathlib import Path
from typing import Optional

from loguru import logger

from mathformat import config
from mathformat.clipboard import copy_to_clipboard
from mathformat.converter import convert
from mathformat.errors import MathFormatError
from mathformat.export.docx_export import export_to_word
from mathformat.render.preview import write_preview
from mathformat.tex.detector import detect_patterns


def _configure_logging(verbose: bool = False) -> None:
    """Log to stderr only; stdout carries the command's output."""
    logger.remove()
    level = "DEBUG" if verbose else config.LOG_LEVEL
    logger.add(sys.stderr, level=level)


def _read_expression(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    return sys.stdin.read().rstrip("\n")


def cmd_convert(args: argparse.Namespace) -> None:
    result = convert(_read_expression(args))

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    elif args.mathml:
        print(result.mathml)
    else:
        print(result.latex)

    if args.copy:
        copy_to_clipboard(result.mathml if args.copy == "mathml" else result.latex)
        logger.info(f"{args.copy} copied to clipboard")


def cmd_detect(args: argparse.Namespace) -> None:
    flags = detect_patterns(_read_expression(args))
    print(json.dumps(flags.to_dict(), indent=2))


def cmd_export(args: argparse.Namespace) -> None:
    result = convert(_read_expression(args))
    path = export_to_word(result.input, result.latex, args.output)
    print(path)


def cmd_preview(args: argparse.Namespace) -> None:
    result = convert(_read_expression(args))
    path = write_preview(result, args.output, dark=args.dark)
    print(path)

    if args.open_browser:
        try:
            webbrowser.open(path.resolve().as_uri())
            logger.info(f"Opening in browser: {path.resolve().as_uri()}")
        except Exception as e:
            logger.warning(f"Could not open browser automatically: {e}")


def cmd_serve(args: argparse.Namespace) -> None:
    import uvicorn

    from mathformat.server.app import app

    uvicorn.run(app, host=args.host, port=args.port, reload=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mathformat",
        description="Turn informally typed maths into LaTeX, MathML and Word documents.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Available commands"
    )

    def add_text_argument(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "text",
            nargs="?",
            default=None,
            help="Expression to process. Read from stdin when omitted.",
        )

    # --- 'convert' command ---
    parser_convert = subparsers.add_parser(
        "convert", help="Rewrite an expression to LaTeX (or MathML)."
    )
    add_text_argument(parser_convert)
    output_group = parser_convert.add_mutually_exclusive_group()
    output_group.add_argument(
        "--mathml", action="store_true", help="Print MathML instead of LaTeX."
    )
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print input, LaTeX, MathML and detected patterns as JSON.",
    )
    parser_convert.add_argument(
        "--copy",
        choices=("latex", "mathml"),
        default=None,
        help="Also copy the LaTeX or MathML output to the clipboard.",
    )
    parser_convert.set_defaults(func=cmd_convert)

    # --- 'detect' command ---
    parser_detect = subparsers.add_parser(
        "detect", help="Report structural patterns found in an expression."
    )
    add_text_argument(parser_detect)
    parser_detect.set_defaults(func=cmd_detect)

    # --- 'export' command ---
    parser_export = subparsers.add_parser(
        "export", help="Write the input and its LaTeX to a Word document."
    )
    add_text_argument(parser_export)
    parser_export.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help=f"Path of the .docx file (default: {config.DEFAULT_EXPORT_FILENAME} in $MATHFORMAT_EXPORT_DIR).",
    )
    parser_export.set_defaults(func=cmd_export)

    # --- 'preview' command ---
    parser_preview = subparsers.add_parser(
        "preview", help="Write an HTML page rendering the expression with MathJax."
    )
    add_text_argument(parser_preview)
    parser_preview.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help=f"Path of the HTML file (default: {config.DEFAULT_PREVIEW_FILENAME} in $MATHFORMAT_EXPORT_DIR).",
    )
    parser_preview.add_argument(
        "--dark", action="store_true", help="Start the page in dark mode."
    )
    parser_preview.add_argument(
        "--open",
        dest="open_browser",
        action="store_true",
        help="Open the generated HTML file in the default web browser.",
    )
    parser_preview.add_argument(
        "--no-open",
        dest="open_browser",
        action="store_false",
        help="Do not open the generated HTML in the browser.",
    )
    parser_preview.set_defaults(func=cmd_preview, open_browser=True)

    # --- 'serve' command ---
    parser_serve = subparsers.add_parser("serve", help="Run the HTTP service.")
    parser_serve.add_argument("--host", default=config.HOST)
    parser_serve.add_argument("--port", type=int, default=config.PORT)
    parser_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        args.func(args)
    except MathFormatError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
