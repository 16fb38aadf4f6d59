"""CLI entry point for gl-mr."""

from __future__ import annotations

import argparse
import os
import sys

from gl_mr.client import GitLabClient
from gl_mr.config import load_config, load_env_file
from gl_mr.dispatch import MergeRequestDispatcher
from gl_mr.logging_utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gl-mr",
        description="Create GitLab merge requests from a source branch into every configured target branch.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment (may also be set in a .env file):
    GL_URL              - GitLab instance URL
    GL_PRIVATE_TOKEN    - GitLab Personal Access Token
    GL_ASSIGNEE_ID      - Numeric id of the assignee
    GL_PROJECT_ID       - Numeric id of the project
    GL_REVIEWER_IDS     - Comma-separated numeric reviewer ids
    GL_TARGET_BRANCHES  - Comma-separated target branch names
    METEOR_LINK         - Task link; the ticket id is appended to it
    USER_PREFIX         - Text placed at the start of every title

Examples:
    # Open merge requests into every target branch
    gl-mr "ВВ-48904 Fix report export" feature/48904

    # Dry-run to see the titles and payloads without creating anything
    gl-mr "ВВ-48904 Fix report export" feature/48904 --dry-run --verbose
""",
    )
    parser.add_argument("task_name", help='Task name, e.g. "ВВ-48904 Fix report export"')
    parser.add_argument("source_branch", help="Branch holding the changes, e.g. feature/48904")
    parser.add_argument("--env-file", default=None, help="Path to a .env file (default: search from the current directory)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be done without creating merge requests")
    parser.add_argument("--json", action="store_true", dest="json_output", help="Output results as JSON lines")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logging(json_mode=args.json_output, verbose=args.verbose)

    if args.env_file and not os.path.isfile(args.env_file):
        logger.error(f"Env file not found: {args.env_file}")
        return 1
    load_env_file(args.env_file)
    result = load_config()
    if not result.ok:
        logger.error(f"Invalid configuration: {result.error}")
        return 1
    config = result.config

    if args.dry_run:
        logger.info("DRY-RUN MODE - no merge requests will be created")

    client = GitLabClient(base_url=config.gitlab_url, token=config.private_token, dry_run=args.dry_run)
    dispatcher = MergeRequestDispatcher(client=client, config=config)

    try:
        dispatcher.run(args.task_name, args.source_branch)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    finally:
        client.close()

    total = len(dispatcher.results)
    created = sum(1 for r in dispatcher.results if r.action in ("created", "would_create"))
    errors = sum(1 for r in dispatcher.results if r.action == "error")
    logger.info(
        f"Done: {total} target branches, {created} {'would be created' if args.dry_run else 'created'}, {errors} errors"
    )

    # Per-branch failures are reported above and do not affect the exit code
    return 0


if __name__ == "__main__":
    sys.exit(main())
