from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration layering
(defaults, JSON file, command-line overrides), validation, the pre-flight
root check, generation and the final summary.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treedocs.core.pipeline.engine import run_pipeline
from treedocs.core.pipeline.stages.validator import validate_config
from treedocs.domain.config import get_default_config, load_config
from treedocs.domain.constants import DEFAULT_LOCALE
from treedocs.domain.generation_models import GenerationResult
from treedocs.infra import fs
from treedocs.infra.logging import LoggingConfig, configure_logging, get_logger
from treedocs.interface.cli import args as cli_args
from treedocs.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_ROOT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional argument list. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration layering
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    locale = clean_conf["locale"]
    if locale not in i18n.available_locales():
        logger.warning(f"Unknown locale '{locale}'. Falling back to '{DEFAULT_LOCALE}'.")
    i18n.load_locale(locale)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pre-flight input verification
    root_path = clean_conf["root_path"]
    if not fs.is_directory(root_path):
        msg = i18n.t("cli.errors.path_not_exist", path=root_path)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_MISSING_ROOT

    # 5. Generation
    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.generation_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Summary
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override values into ``base``."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# OUTPUT RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult) -> None:
    t = i18n.t
    summary = result.summary
    collection = result.collection_name
    if not result.collection_found:
        collection += " " + t("cli.summary.collection_missing")

    pages_label = t("cli.summary.pages_dry") if result.dry_run else t("cli.summary.pages")
    lines = [
        t("cli.summary.title"),
        "-" * 40,
        f"{t('cli.summary.root')}: {result.root_path}",
        f"{t('cli.summary.collection')}: {collection}",
        f"{t('cli.summary.directories')}: {result.directories}",
        f"{pages_label}: {len(result.pages)}",
        f"{t('cli.summary.documents')}: {summary.get('documents', 0)}",
        f"{t('cli.summary.volume')}: {summary.get('content_volume', 0)}",
        f"{t('cli.summary.size')}: {summary.get('formatted_size', '0 B')}",
    ]
    if result.failures:
        lines.append(f"{t('cli.summary.failures')}: {len(result.failures)}")
        lines.extend(f"  - {f.path}: {f.reason}" for f in result.failures)
    if result.warnings:
        lines.append(f"{t('cli.summary.warnings')}: {len(result.warnings)}")
    print(os.linesep.join(lines))
