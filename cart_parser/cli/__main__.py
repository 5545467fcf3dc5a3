from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, CartConfig, ConfigError, load_config
from ..logging.init import enable_debug, log_summary, setup_logging
from ..parser.cart_parser import CartParser
from ..parser.exceptions import ValidationFailedError
from ..services.orchestrator import ProcessingError, process_all, scan_cart_files
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (CART_SOURCE_DIRECTORY may override the config directory)
- Load config (default config/cart.yml)
- Parse every cart file in the source directory
- Print per-file results and a SUMMARY line

Exit codes: 0 all files parsed (or none found), 2 some file failed, 1 fatal.
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="cart-parser", description="Validate and parse cart CSV files")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to YAML config")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print item tables of valid carts then exit")
    return p.parse_args(argv)


def _inspect_data(cfg: CartConfig) -> int:
    directory = Path(cfg.source_directory)
    files = scan_cart_files(directory, cfg.file_pattern)
    if not files:
        print(f"inspect: no files matching {cfg.file_pattern}")
        return EXIT_SUCCESS_ALL
    parser = CartParser(encoding=cfg.encoding)
    for f in files:
        print(f"FILE: {f.name}")
        try:
            result = parser.parse(f)
        except ValidationFailedError as e:
            print(f"  invalid: {e}")
            continue
        except (OSError, UnicodeDecodeError) as e:
            print(f"  read_error: {e}")
            continue
        print(result.to_dataframe().to_string(index=False))
        print(f"  total={result.total:.2f}")
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみシステム引数を読む ([] はテストで明示的に渡される)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        enable_debug()

    load_dotenv(dotenv_path=Path(".env"), override=False)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.is_dir():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    logger.info(f"Processing files from: {directory}")

    try:
        if args.inspect_data:
            return _inspect_data(cfg)
        result = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    # log_summary が "SUMMARY " を付与するので除去して渡す
    log_summary(render_summary_line(result).removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
