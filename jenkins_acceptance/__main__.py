import argparse
import logging
import sys
from typing import List, Optional

from playwright_custom.browser import LocalPlaywrightBrowser
from playwright_custom.session import PlaywrightSession

from .config import Settings
from .errors import AcceptanceError
from .matchers import assert_that, has_content
from .page_objects import Jenkins
from .plugins.git import GitScm
from .session import Session

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Configure a job's Git SCM through the Jenkins web UI")
    parser.add_argument("--url", default=settings.jenkins_url, help="Jenkins base URL")
    parser.add_argument("--job", required=True, help="Name of an existing job to configure")
    parser.add_argument("--git-url", required=True, help="Repository URL")
    parser.add_argument("--branch", help="Branch specifier to build")
    parser.add_argument("--credentials", help="Credentials entry, by its visible name")
    parser.add_argument("--local-branch", help="Check out to this local branch")
    parser.add_argument("--sparse-path", action="append", default=[], help="Sparse checkout path (repeatable)")
    parser.add_argument("--expect", help="Text the job page must show after saving")
    parser.add_argument("--timeout", type=int, default=settings.timeout_ms, help="Element lookup timeout in ms")
    parser.add_argument("--animate", action="store_true", default=settings.animate_actions,
                        help="Highlight elements before acting on them")
    headless = parser.add_mutually_exclusive_group()
    headless.add_argument("--headless", dest="headless", action="store_true", help="Run browser in headless mode")
    headless.add_argument("--headed", dest="headless", action="store_false", help="Show the browser window")
    parser.set_defaults(headless=settings.headless)
    return parser


def configure_git_job(session: Session, args: argparse.Namespace) -> None:
    job = Jenkins(session, args.url).job(args.job).configure()
    git = job.use_scm(GitScm).url(args.git_url)
    if args.credentials:
        git.credentials(args.credentials)
    if args.branch:
        git.branch(args.branch)
    if args.local_branch:
        git.local_branch(args.local_branch)
    if args.sparse_path:
        sparse = git.sparse_checkout()
        for path in args.sparse_path:
            sparse.add_path(path)
    job.save()
    logger.info("Saved job %s", job.name)
    if args.expect:
        assert_that(session, has_content(args.expect), f"job {job.name} after saving")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser(Settings.from_env()).parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s %(message)s")

    # If animations are enabled, ensure we're not in headless mode
    if args.animate and args.headless:
        print("Note: --animate flag requires non-headless mode. Disabling headless mode.")
        args.headless = False

    with LocalPlaywrightBrowser(headless=args.headless) as browser:
        session = PlaywrightSession(browser.page, timeout_ms=args.timeout, animate_actions=args.animate)
        try:
            configure_git_job(session, args)
        except (AssertionError, AcceptanceError) as exc:
            print(f"FAILED: {exc}", file=sys.stderr)
            return 1
    print(f"Job {args.job} configured.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
