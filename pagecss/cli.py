#!/usr/bin/env python3
"""
Command-line interface for pagecss.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import orjson

from pagecss.core.host import DirectoryHost, MemoryHost
from pagecss.core.pipeline import PageCSSPipeline
from pagecss.managers.factory import ManagerFactory
from pagecss.utils.config import DATA_DIR, PAGES_DIR, Settings
from pagecss.utils.error import PageCSSError
from pagecss.utils.file import safe_read_file
from pagecss.utils.logging import setup_logging

def build_settings(args: argparse.Namespace) -> Settings:
    return Settings(
        minify_css=args.minify,
        disable_raw_div_styling=args.disable_raw_div_styling
    )

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Process <css>, <pagecss> and <nscss> blocks in wiki pages'
    )

    parser.add_argument(
        '--pages-dir',
        help='Directory holding page sources as <namespace>/<page>.txt',
        type=Path,
        default=Path(PAGES_DIR)
    )
    parser.add_argument(
        '--data-dir',
        help='Directory for page metadata and the namespace CSS cache',
        type=Path,
        default=Path(DATA_DIR)
    )
    parser.add_argument(
        '--minify',
        help='Minify injected CSS',
        action='store_true'
    )
    parser.add_argument(
        '--disable-raw-div-styling',
        help='Drop rules that style bare div elements',
        action='store_true'
    )
    parser.add_argument(
        '--log-file',
        help='Diagnostic log file',
        type=str,
        default=None
    )
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    save = subparsers.add_parser('save', help='Recompute and cache the CSS of a page')
    save.add_argument('page_id', help='Page id, e.g. wiki:syntax')

    render = subparsers.add_parser('render', help='Print the head style entries of a page as JSON')
    render.add_argument('page_id', help='Page id, e.g. wiki:syntax')

    extract = subparsers.add_parser('extract', help='Print the processed page CSS of a text file')
    extract.add_argument('file', help='Path to a wiki text file', type=Path)

    clear_ns = subparsers.add_parser('clear-ns', help='Remove the cached CSS of a namespace')
    clear_ns.add_argument('namespace', help="Namespace, ':' for the root")

    return parser.parse_args(argv)

def run(args: argparse.Namespace) -> int:
    settings = build_settings(args)

    if args.command == 'extract':
        text = safe_read_file(args.file)
        pipeline = PageCSSPipeline.from_factory(MemoryHost(), ManagerFactory(), settings)
        context = pipeline.process_page_css(text, args.file.stem)
        print(context.page_css)
        return 0

    with ManagerFactory(str(args.data_dir)) as factory:
        pipeline = PageCSSPipeline.from_factory(DirectoryHost(args.pages_dir), factory, settings)

        if args.command == 'save':
            styles = pipeline.on_content_change(args.page_id)
            logging.info(f"Cached {len(styles)} characters of CSS for {args.page_id}")
        elif args.command == 'render':
            head = pipeline.on_render(args.page_id)
            print(orjson.dumps(head, option=orjson.OPT_INDENT_2).decode('utf-8'))
        elif args.command == 'clear-ns':
            if not pipeline.aggregator.remove_fragment(args.namespace):
                logging.warning(f"No cached CSS for namespace {args.namespace}")
        return 0

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        return run(args)
    except (PageCSSError, OSError) as e:
        logging.error(f"Error: {str(e)}")
        return 1

if __name__ == '__main__':
    sys.exit(main())
