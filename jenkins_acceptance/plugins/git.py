from __future__ import annotations

"""Git SCM section of a job configuration form.

Besides its plain fields the section has an "Additional Behaviours" list. Each
behaviour is added by clicking the list's *Add* button and then the menu entry
carrying the behaviour's label; its fields then live under
``<scm>/extensions``, ``<scm>/extensions[1]`` and so on, in order of addition.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Type

from ..errors import ElementNotFound, RevealError
from ..page_area import Control, PageArea, ProbeOutcome, RepeatableList, probe
from ..page_objects import Job, Scm
from ..selectors import By

logger = logging.getLogger(__name__)


class BehaviourState(str, Enum):
    """Lifecycle of a behaviour handle; before it is added a behaviour exists only as its
    :class:`BehaviourKind` descriptor."""

    REVEALED = "revealed"
    CONFIGURED = "configured"


class Behaviour(PageArea):
    """Handle on one revealed behaviour; created by :meth:`GitScm.add_behaviour`."""

    def __init__(self, git: "GitScm", path: str, kind: "BehaviourKind") -> None:
        super().__init__(git, path)
        self.git = git
        self.kind = kind
        self.state = BehaviourState.REVEALED

    def field(self, name: str) -> Control:
        try:
            return self.control(self.kind.controls[name])
        except KeyError:
            raise KeyError(f"{self.kind.label!r} has no field {name!r}") from None

    def _mark_configured(self) -> None:
        self.state = BehaviourState.CONFIGURED


class SparseCheckoutPaths(Behaviour):
    def __init__(self, git: "GitScm", path: str, kind: "BehaviourKind") -> None:
        super().__init__(git, path, kind)
        # the first path entry is rendered together with the behaviour
        self.paths = RepeatableList(
            self, "sparseCheckoutPaths", "repeatable-add", first_prerendered=True
        )

    def add_path(self, name: str) -> "SparseCheckoutPaths":
        item = self.paths.append()
        self.control(item + "/path").set(name)
        return self


@dataclass(frozen=True)
class BehaviourKind:
    """Descriptor of a behaviour: its menu label and named field paths."""

    label: str
    controls: Dict[str, str] = field(default_factory=dict)
    handle: Type[Behaviour] = Behaviour


CHECKOUT_TO_LOCAL_BRANCH = BehaviourKind(
    "Check out to specific local branch", {"name": "localBranch"})
CHECKOUT_TO_LOCAL_DIR = BehaviourKind(
    "Check out to a sub-directory", {"name": "relativeTargetDir"})
RECURSIVE_SUBMODULES = BehaviourKind(
    "Advanced sub-modules behaviours", {"enable": "recursiveSubmodules"})
ADVANCED_CHECKOUT = BehaviourKind(
    "Advanced checkout behaviours", {"timeout": "timeout"})
ADVANCED_CLONE = BehaviourKind("Advanced clone behaviours", {
    "shallow": "shallow",
    "depth": "depth",
    "no_tags": "noTags",
    "honor_refspec": "honorRefspec",
    "reference": "reference",
    "timeout": "timeout",
})
CALCULATE_CHANGELOG = BehaviourKind("Calculate changelog against a specific branch", {
    "compare_remote": "options/compareRemote",
    "compare_target": "options/compareTarget",
})
CLEAN_AFTER_CHECKOUT = BehaviourKind("Clean after checkout")
CLEAN_BEFORE_CHECKOUT = BehaviourKind("Clean before checkout")
CREATE_TAG_FOR_BUILD = BehaviourKind("Create a tag for every build")
CUSTOM_SCM_NAME = BehaviourKind("Custom SCM name", {"name": "name"})
CUSTOM_NAME_AND_MAIL = BehaviourKind(
    "Custom user name/e-mail address", {"name": "name", "email": "email"})
NO_BUILD_ON_COMMIT = BehaviourKind("Don't trigger a build on commit notifications")
FORCE_POLLING_USING_WORKSPACE = BehaviourKind("Force polling using workspace")
GIT_LFS_PULL = BehaviourKind("Git LFS pull after checkout")
MERGE_BEFORE_BUILD = BehaviourKind("Merge before build", {
    "remote": "mergeRemote",
    "target": "mergeTarget",
    "strategy": "mergeStrategy",
    "fast_forward_mode": "fastForwardMode",
})
POLLING_IGNORES_USER = BehaviourKind(
    "Polling ignores commits from certain users", {"exclude_users": "excludeUsers"})
POLLING_IGNORES_PATH = BehaviourKind("Polling ignores commits in certain paths", {
    "included_regions": "includedRegions",
    "excluded_regions": "excludedRegions",
})
POLLING_IGNORES_MESSAGE = BehaviourKind(
    "Polling ignores commits with certain messages", {"excluded_message": "excludedMessage"})
PRUNE_STALE_BRANCHES = BehaviourKind("Prune stale remote-tracking branches")
SPARSE_CHECKOUT_PATHS = BehaviourKind("Sparse Checkout paths", handle=SparseCheckoutPaths)
STRATEGY_TO_CHOOSE_BUILD = BehaviourKind("Strategy for choosing what to build", {
    "strategy": "/",
    "max_age": "buildChooser/maximumAgeInDays",
    "ancestor_commit": "buildChooser/ancestorCommitSha1",
})
COMMIT_AUTHOR_IN_CHANGELOG = BehaviourKind("Use commit author in changelog")
WIPE_AND_FORCE_CLONE = BehaviourKind("Wipe out repository & force clone")


class GitScm(Scm):
    display_name = "Git"

    def __init__(self, job: Job, path: str) -> None:
        super().__init__(job, path)
        self._branch = self.control("branches/name")
        self._url = self.control("userRemoteConfigs/url")
        self._tool = self.control("gitTool")
        self._repository_browser = self.control("/")
        self._url_repository_browser = self.control("browser/repoUrl")
        # extra fields of some repository browsers
        self._project_name = self.control("browser/projectName")  # gitblit, viewgit
        self._gitlab_version = self.control("browser/version")
        self._phabricator_repo = self.control("browser/repo")
        self.extensions = RepeatableList(self, "extensions", "hetero-list-add[extensions]")

    # ------------------------------------------------------------------
    # repository

    def url(self, url: str) -> "GitScm":
        self._url.set(url)
        return self

    def credentials(self, name: str) -> "GitScm":
        self.control_by(By.class_name("credentials-select")).select(name)
        return self

    def tool(self, tool: str) -> "GitScm":
        self._tool.select(tool)
        return self

    def branch(self, branch: str) -> "GitScm":
        self._branch.set(branch)
        return self

    def remote_name(self, name: str) -> "GitScm":
        self.control("userRemoteConfigs/advanced-button").click()
        self.control("userRemoteConfigs/name").set(name)
        return self

    # ------------------------------------------------------------------
    # fields that moved into behaviours in Git plugin 2.0

    def _advanced_or_behaviour(self, field_path: str, kind: BehaviourKind, value: str) -> None:
        def advanced() -> None:
            self.control("advanced-button").click()
            self.control(field_path).set(value)

        result = probe(advanced)
        if result.outcome is ProbeOutcome.UNSUPPORTED:
            logger.info("No advanced %s field, using behaviour %r", field_path, kind.label)
            self.add_behaviour(kind).field("name").set(value)
        result.raise_for_error()

    def local_branch(self, branch: str) -> "GitScm":
        self._advanced_or_behaviour("localBranch", CHECKOUT_TO_LOCAL_BRANCH, branch)
        return self

    def local_dir(self, directory: str) -> "GitScm":
        self._advanced_or_behaviour("relativeTargetDir", CHECKOUT_TO_LOCAL_DIR, directory)
        return self

    # ------------------------------------------------------------------
    # behaviours

    def add_behaviour(self, kind: BehaviourKind) -> Behaviour:
        """Append *kind* to the behaviour list and return its revealed handle."""

        def reveal() -> None:
            try:
                self.click_link(kind.label)
            except ElementNotFound as exc:
                raise RevealError(kind.label) from exc

        path = self.extensions.append(reveal)
        logger.info("Added behaviour %r at %s", kind.label, path)
        return kind.handle(self, path, kind)

    def enable_recursive_submodule_processing(self) -> "GitScm":
        self.add_behaviour(RECURSIVE_SUBMODULES).field("enable").click()
        return self

    def calculate_changelog(self, remote: str, branch: str) -> "GitScm":
        """Add behaviour "Calculate changelog against a specific branch"."""
        behaviour = self.add_behaviour(CALCULATE_CHANGELOG)
        behaviour.field("compare_remote").set(remote)
        behaviour.field("compare_target").set(branch)
        return self

    def clean_after_checkout(self) -> "GitScm":
        self.add_behaviour(CLEAN_AFTER_CHECKOUT)
        return self

    def clean_before_checkout(self) -> "GitScm":
        self.add_behaviour(CLEAN_BEFORE_CHECKOUT)
        return self

    def create_tag_for_build(self) -> "GitScm":
        self.add_behaviour(CREATE_TAG_FOR_BUILD)
        return self

    def custom_scm_name(self, name: str) -> "GitScm":
        self.add_behaviour(CUSTOM_SCM_NAME).field("name").set(name)
        return self

    def custom_name_and_mail(self, name: str, email: str) -> "GitScm":
        behaviour = self.add_behaviour(CUSTOM_NAME_AND_MAIL)
        behaviour.field("name").set(name)
        behaviour.field("email").set(email)
        return self

    def merge_before_build(
        self,
        remote: str,
        target: str,
        strategy: Optional[str] = None,
        fast_forward_mode: Optional[str] = None,
    ) -> "GitScm":
        behaviour = self.add_behaviour(MERGE_BEFORE_BUILD)
        behaviour.field("remote").set(remote)
        behaviour.field("target").set(target)
        if strategy is not None:
            behaviour.field("strategy").select(strategy)
        if fast_forward_mode is not None:
            behaviour.field("fast_forward_mode").select(fast_forward_mode)
        return self

    def advanced_clone(
        self,
        shallow: bool = False,
        depth: Optional[int] = None,
        no_tags: bool = False,
        reference: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> "GitScm":
        behaviour = self.add_behaviour(ADVANCED_CLONE)
        if shallow:
            behaviour.field("shallow").click()
            if depth is not None:
                behaviour.field("depth").set(depth)
        if no_tags:
            behaviour.field("no_tags").click()
        if reference is not None:
            behaviour.field("reference").set(reference)
        if timeout is not None:
            behaviour.field("timeout").set(timeout)
        return self

    def advanced_checkout(self, timeout: int) -> "GitScm":
        self.add_behaviour(ADVANCED_CHECKOUT).field("timeout").set(timeout)
        return self

    def polling_ignores_users(self, users: str) -> "GitScm":
        self.add_behaviour(POLLING_IGNORES_USER).field("exclude_users").set(users)
        return self

    def polling_ignores_paths(
        self, included: Optional[str] = None, excluded: Optional[str] = None
    ) -> "GitScm":
        behaviour = self.add_behaviour(POLLING_IGNORES_PATH)
        if included is not None:
            behaviour.field("included_regions").set(included)
        if excluded is not None:
            behaviour.field("excluded_regions").set(excluded)
        return self

    def polling_ignores_messages(self, pattern: str) -> "GitScm":
        self.add_behaviour(POLLING_IGNORES_MESSAGE).field("excluded_message").set(pattern)
        return self

    def sparse_checkout(self) -> SparseCheckoutPaths:
        """Add behaviour "Sparse Checkout paths"; paths are added on the returned handle."""
        return self.add_behaviour(SPARSE_CHECKOUT_PATHS)

    def choose_build_strategy(
        self, strategy: str, age: int = 0, ancestor: Optional[str] = None
    ) -> "GitScm":
        """Select the strategy for choosing what to build.

        ``age`` and ``ancestor`` only apply to the "Ancestry" strategy.
        """
        behaviour = self.add_behaviour(STRATEGY_TO_CHOOSE_BUILD)
        behaviour.field("strategy").select(strategy)
        if strategy == "Ancestry":
            behaviour.field("max_age").set(age)
            if ancestor is not None:
                behaviour.field("ancestor_commit").set(ancestor)
        return self

    # ------------------------------------------------------------------
    # repository browser

    def repository_browser(self, name: str) -> "GitScm":
        self._repository_browser.select(name)
        return self

    def url_repository_browser(self, url: str) -> "GitScm":
        self._url_repository_browser.set(url)
        return self

    def project_name(self, project_name: str) -> "GitScm":
        """Project name for the gitblit and viewgit browsers."""
        self._project_name.set(project_name)
        return self

    def gitlab_version(self, version: str) -> "GitScm":
        self._gitlab_version.set(version)
        return self

    def phabricator_repo(self, repo: str) -> "GitScm":
        self._phabricator_repo.set(repo)
        return self
