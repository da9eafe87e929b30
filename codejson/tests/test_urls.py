from codejson.utils import (
    is_valid_email,
    is_valid_repository_url,
    is_valid_url,
    parse_github_url,
)


def test_parse_github_url_strips_slash_and_git_suffix() -> None:
    expected = {"owner": "GSA", "repo": "code-gov-harvester"}

    assert parse_github_url("https://github.com/GSA/code-gov-harvester/") == expected
    assert parse_github_url("https://github.com/GSA/code-gov-harvester.git") == expected
    assert parse_github_url("http://github.com/GSA/code-gov-harvester") == expected
    assert parse_github_url("git://github.com/GSA/code-gov-harvester.git") == expected
    assert parse_github_url("git@github.com:/GSA/code-gov-harvester.git") == expected


def test_parse_github_url_keeps_first_two_segments() -> None:
    assert parse_github_url("https://github.com/GSA/code-gov/tree/master") == {
        "owner": "GSA",
        "repo": "code-gov",
    }
    assert parse_github_url("https://github.com/GSA")["repo"] is None


def test_is_valid_repository_url() -> None:
    assert is_valid_repository_url("https://github.com/GSA/code-gov-harvester")
    assert is_valid_repository_url("git://www.github.com/GSA/code-gov-harvester.git")
    assert not is_valid_repository_url("https://github.com/GSA")
    assert not is_valid_repository_url("https://gitlab.com/GSA/code-gov")
    assert not is_valid_repository_url(None)
    assert not is_valid_repository_url("")


def test_is_valid_email() -> None:
    assert is_valid_email("gsa-github.support@gsa.gov")
    assert is_valid_email('"odd name"@example.org')
    assert not is_valid_email("not-an-email")
    assert not is_valid_email("a@b")
    assert not is_valid_email(None)


def test_is_valid_url() -> None:
    assert is_valid_url("https://www.gsa.gov/code.json")
    assert is_valid_url("see http://code.gov for details")
    assert not is_valid_url("ftp://code.gov")
    assert not is_valid_url("code.gov")
    assert not is_valid_url(42)
