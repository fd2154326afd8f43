from __future__ import annotations

"""Page objects for the CI server's top-level pages."""

import logging
from typing import Any, Optional, Type, TypeVar
from urllib.parse import quote, urljoin

from .page_area import PageArea
from .selectors import By
from .session import Session

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="Scm")


class PageObject(PageArea):
    """A page reachable at a canonical URL; the root area of its form."""

    def __init__(self, session: Session, url: str) -> None:
        super().__init__(None, "")
        self.session = session
        self.url = url

    def open(self) -> "PageObject":
        logger.info("Opening %s", self.url)
        self.session.visit(self.url)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.url!r})"


class ContainerPageObject(PageObject):
    """A page object backed by a ``/api/json`` representation."""

    def json_url(self, depth: int = 0) -> str:
        url = urljoin(self.url, "api/json")
        return f"{url}?depth={depth}" if depth else url

    def get_json(self, depth: int = 0) -> Any:
        """Fetch the JSON representation; raises PageObjectError when unavailable."""
        return self.session.fetch_json(self.json_url(depth))


class Jenkins(ContainerPageObject):
    def __init__(self, session: Session, base_url: str) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        super().__init__(session, base_url)

    def job(self, name: str) -> "Job":
        return Job(self, name)

    def user(self, user_id: str) -> "User":
        return User(self, user_id)


class Job(ContainerPageObject):
    def __init__(self, jenkins: Jenkins, name: str) -> None:
        # folder jobs: "a/b" lives at job/a/job/b/
        segments = "".join(f"job/{quote(part, safe='')}/" for part in name.split("/"))
        super().__init__(jenkins.session, urljoin(jenkins.url, segments))
        self.jenkins = jenkins
        self.name = name

    def configure(self) -> "Job":
        logger.info("Configuring job %s", self.name)
        self.session.visit(urljoin(self.url, "configure"))
        return self

    def use_scm(self, scm_type: Type[S]) -> S:
        """Select *scm_type* in the source code management section."""
        self.control_by(By.radio_button(scm_type.display_name)).click()
        return scm_type(self, "/scm")

    def save(self) -> "Job":
        self.control_by(By.button("Save")).click()
        return self

    def __str__(self) -> str:
        return self.name


class User(ContainerPageObject):
    def __init__(self, jenkins: Jenkins, user_id: str) -> None:
        super().__init__(jenkins.session, urljoin(jenkins.url, f"user/{quote(user_id)}/"))
        self.id = user_id

    def full_name(self) -> Optional[str]:
        return self.get_json().get("fullName")

    def mail(self) -> Optional[str]:
        """Address from the mailer user property, if the user has one."""
        for prop in self.get_json().get("property", []):
            if prop and "address" in prop:
                return prop["address"]
        return None

    def __str__(self) -> str:
        return self.id


class Scm(PageArea):
    """Source code management section of a job configuration form."""

    display_name = ""

    def __init__(self, job: Job, path: str) -> None:
        super().__init__(job, path)
        self.job = job
