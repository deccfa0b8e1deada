"""Plan an NFS export configuration against its current state.

Exit codes: 0 when nothing changes, 2 when changes are planned, 1 on
invalid input or error diagnostics.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from powerscale_models.config.parser import load_config
from powerscale_models.documents import load_nfs_export
from powerscale_models.enums import OutputFormat
from powerscale_models.exceptions import DocumentLoadError
from powerscale_models.plan import plan_resource

logger = logging.getLogger(__name__)

EXIT_NO_CHANGES = 0
EXIT_ERROR = 1
EXIT_CHANGES = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="powerscale-plan",
        description="Plan an NFS export configuration against its current state",
    )
    parser.add_argument(
        "-s", "--state", required=True, help="Path to the state document"
    )
    parser.add_argument(
        "-c", "--config", required=True, help="Path to the configuration document"
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        help="Output format (defaults to PLAN_OUTPUT_FORMAT or text)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the plan command."""
    args = build_parser().parse_args(argv)
    settings = load_config(verbose=args.verbose)
    output_format = OutputFormat(args.format) if args.format else settings.output_format

    try:
        state = load_nfs_export(args.state)
        proposed = load_nfs_export(args.config)
    except DocumentLoadError as e:
        logger.error("%s: %s", e, e.original_error)
        return EXIT_ERROR

    plan = plan_resource(state, proposed, resource_type="nfs_export")
    planned = state.model_copy(update=plan.planned_values())
    plan.diagnostics.extend(planned.validate_update(state))

    if output_format == OutputFormat.JSON:
        print(plan.model_dump_json(indent=2))
    else:
        print(plan.summary())

    if plan.diagnostics.has_error():
        return EXIT_ERROR
    return EXIT_CHANGES if plan.has_changes else EXIT_NO_CHANGES


if __name__ == "__main__":
    sys.exit(main())
