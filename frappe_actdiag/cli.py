from __future__ import annotations

import argparse
import os
import sys
import zlib
from pathlib import Path
from typing import NoReturn, Optional, Sequence

import requests

from .config import ConfigError, FrappeConfig, load_config
from .constants import ENV_FILE_DEFAULT, ENV_KROKI_URL, OUTPUT_FORMAT_DEFAULT, OUTPUT_FORMATS
from .diagrams.actdiag import gen_actdiag
from .frappe_client import FrappeClient
from .grouping import group_by_role
from .io import load_document
from .kroki import DiagramEncodingError, build_kroki_url, decode_diagram, encode_diagram
from .model import WorkflowDocument
from .prompt import select_workflow
from .writer import write_diagram


def _fail(message: str, code: int = 1) -> NoReturn:
    print(f"error: {message}", file=sys.stderr)
    raise SystemExit(code)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frappe-actdiag",
        description=(
            "Render a Frappe Workflow as an actdiag swimlane diagram and print "
            "a kroki.io URL for it."
        ),
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(ENV_FILE_DEFAULT),
        help="Env file holding FRAPPE_BASE_URL, FRAPPE_API_KEY and FRAPPE_API_SECRET",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--workflow",
        type=str,
        default="",
        help="Workflow name to render (skips the interactive menu)",
    )
    source.add_argument(
        "--document",
        type=Path,
        default=None,
        help=(
            "Render a saved getdoc response (JSON or YAML) instead of calling the "
            "Frappe API. No credentials are needed in this mode."
        ),
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=OUTPUT_FORMAT_DEFAULT,
        help="Image format requested from kroki",
    )
    parser.add_argument(
        "--kroki-url",
        type=str,
        default=None,
        help="Base URL of the kroki service (default: KROKI_URL or https://kroki.io)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each Frappe response (default: wait indefinitely)",
    )
    parser.add_argument(
        "--escape-quotes",
        action="store_true",
        help=(
            'Backslash-escape " in role, state and action names. Off by default, '
            "which keeps the output identical to the unescaped form."
        ),
    )
    parser.add_argument(
        "--print-source",
        action="store_true",
        help="Also print the generated actdiag source",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the generated actdiag source to this file",
    )
    parser.add_argument(
        "--decode",
        metavar="TOKEN",
        type=str,
        default=None,
        help="Print the diagram source encoded in a kroki URL token and exit",
    )
    return parser


def _fetch_document(cfg: FrappeConfig, workflow: str) -> WorkflowDocument:
    with FrappeClient(cfg) as client:
        name = workflow or select_workflow(client.list_workflows())
        return client.get_workflow(name)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entrypoint."""
    args = _build_parser().parse_args(argv)

    if args.decode is not None:
        try:
            print(decode_diagram(args.decode))
        except (ValueError, zlib.error) as e:
            _fail(f"cannot decode token: {e}")
        return

    kroki_url = args.kroki_url

    try:
        if args.document is not None:
            kroki_url = kroki_url or os.environ.get(ENV_KROKI_URL)
            document = load_document(args.document)
        else:
            try:
                cfg = load_config(args.env_file, timeout=args.timeout)
            except (FileNotFoundError, ConfigError) as e:
                _fail(str(e), code=2)
            kroki_url = kroki_url or cfg.kroki_url
            document = _fetch_document(cfg, args.workflow)
    except requests.RequestException as e:
        _fail(f"request to Frappe failed: {e}")
    except (OSError, TypeError, ValueError) as e:
        _fail(str(e))
    except EOFError:
        _fail("no workflow selected")
    except KeyboardInterrupt:
        _fail("interrupted", code=130)

    view = group_by_role(document)
    diagram_code = gen_actdiag(view, escape_quotes=args.escape_quotes)

    if args.out is not None:
        try:
            write_diagram(args.out, diagram_code)
        except OSError as e:
            _fail(f"cannot write {args.out}: {e}")
    if args.print_source:
        print(diagram_code)

    try:
        token = encode_diagram(diagram_code)
    except DiagramEncodingError as e:
        _fail(f"Cannot generate diagram URL: {e}")

    url = build_kroki_url(token, kroki_url=kroki_url, output_format=args.output_format)
    print("Please click to the following URL:")
    print(url)
