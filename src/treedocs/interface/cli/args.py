from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from treedocs.domain.constants import LINK_STYLES
from treedocs.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treedocs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treedocs",
        description=i18n.t("app.description"),
    )

    # --- Positional inputs ---
    p.add_argument("root_path", nargs="?", default=None, help=i18n.t("cli.args.root"))
    p.add_argument("collection_name", nargs="?", default=None, help=i18n.t("cli.args.collection"))

    # --- Configuration sources ---
    p.add_argument("--config", dest="config_file", default=None, help=i18n.t("cli.args.config"))
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.use_defaults"))

    # --- Rendering ---
    p.add_argument("--locale", default=None, help=i18n.t("cli.args.locale"))
    p.add_argument("--ext", dest="document_extension", default=None, help=i18n.t("cli.args.ext"))
    p.add_argument("--exclude", dest="exclude_patterns", default=None, help=i18n.t("cli.args.exclude"))
    p.add_argument(
        "--link-style",
        dest="link_style",
        choices=LINK_STYLES,
        default=None,
        help=i18n.t("cli.args.link_style"),
    )

    # --- Runtime ---
    p.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))
    p.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump_config"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Values left at ``None`` are ignored by the merge step.
    """
    overrides: Dict[str, Any] = {
        "root_path": args.root_path,
        "collection_name": args.collection_name,
        "locale": args.locale,
        "document_extension": args.document_extension,
        "link_style": args.link_style,
    }
    if args.exclude_patterns is not None:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    return overrides


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
