"""
Page objects
"""
from jenkins_acceptance.page_objects import Jenkins
from jenkins_acceptance.plugins.git import GitScm
from jenkins_acceptance.selectors import By


class TestJenkins:
    def test_base_url_gets_trailing_slash(self, session):
        assert Jenkins(session, "http://ci.example.com/jenkins").url == "http://ci.example.com/jenkins/"

    def test_job_and_user_urls(self, jenkins):
        assert jenkins.job("my job").url == "http://jenkins/job/my%20job/"
        assert jenkins.user("alice").url == "http://jenkins/user/alice/"

    def test_job_in_folder(self, jenkins):
        job = jenkins.job("team/build")
        assert job.url == "http://jenkins/job/team/job/build/"
        assert str(job) == "team/build"

    def test_json_url(self, jenkins):
        assert jenkins.job("demo").json_url() == "http://jenkins/job/demo/api/json"
        assert jenkins.job("demo").json_url(depth=2) == "http://jenkins/job/demo/api/json?depth=2"

    def test_get_json(self, jenkins, session):
        session.json["http://jenkins/api/json"] = {"jobs": []}
        assert jenkins.get_json() == {"jobs": []}


class TestJob:
    def test_configure_opens_configuration_page(self, jenkins, session):
        jenkins.job("demo").configure()
        assert session.ops == [("visit", "http://jenkins/job/demo/configure", None)]

    def test_use_scm(self, jenkins, session):
        scm = jenkins.job("demo").use_scm(GitScm)
        assert isinstance(scm, GitScm)
        assert scm.path == "/scm"
        assert session.ops == [("click", By.radio_button("Git"), None)]

    def test_save(self, jenkins, session):
        jenkins.job("demo").save()
        assert session.ops == [("click", By.button("Save"), None)]


class TestUser:
    def test_full_name_and_mail(self, jenkins, session):
        session.json["http://jenkins/user/alice/api/json"] = {
            "fullName": "Alice",
            "property": [{"address": "alice@example.com"}],
        }
        alice = jenkins.user("alice")
        assert alice.full_name() == "Alice"
        assert alice.mail() == "alice@example.com"
        assert str(alice) == "alice"

    def test_mail_absent(self, jenkins, session):
        session.json["http://jenkins/user/alice/api/json"] = {"fullName": "Alice"}
        assert jenkins.user("alice").mail() is None
