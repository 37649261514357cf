import json

import pytest

from wpplugingen.composer import (
    Author,
    generate_composer_json,
    generate_project_name_slug,
    write_composer_json,
)
from wpplugingen.utils import ProjectNameError

CASES = [
    (
        "company/my-project",
        [Author("John Doe", "john@example.com")],
        "company/my-project",
        "Company\\MyProject\\",
    ),
    (
        "Company/MyProject",
        [Author("John Doe", "john@example.com")],
        "company/my-project",
        "Company\\MyProject\\",
    ),
    (
        "company/project",
        [Author("John Doe", "john@example.com"), Author("Adam Doe", "adam@example.com")],
        "company/project",
        "Company\\Project\\",
    ),
]


@pytest.mark.parametrize("project_name, authors, expected_name, expected_namespace", CASES)
def test_generate_composer_json(project_name, authors, expected_name, expected_namespace):
    result = json.loads(generate_composer_json(project_name, authors))

    assert result["name"] == expected_name
    assert result["type"] == "project"
    psr4 = result["autoload"]["psr-4"]
    assert psr4[expected_namespace] == "includes/"
    assert psr4[expected_namespace + "Public\\"] == "public/"
    assert psr4[expected_namespace + "Admin\\"] == "admin/"
    assert psr4[expected_namespace + "API\\"] == "api/"
    assert result["authors"] == [{"name": a.name, "email": a.email} for a in authors]
    assert result["require-dev"]["php-stubs/wordpress-stubs"] == "^6.8"


def test_key_order():
    text = generate_composer_json("company/project", [])
    result = json.loads(text)
    assert list(result) == ["name", "type", "autoload", "authors", "require-dev"]
    psr4 = result["autoload"]["psr-4"]
    assert list(psr4) == sorted(psr4)
    assert result["authors"] == []


def test_indentation_is_four_spaces():
    text = generate_composer_json("company/project", [])
    assert text.splitlines()[1].startswith('    "name"')


def test_html_characters_are_escaped():
    author = Author("A <b> & c", "a@example.com")
    text = generate_composer_json("company/project", [author])
    assert "<" not in text and ">" not in text and "&" not in text
    assert json.loads(text)["authors"][0]["name"] == author.name


def test_project_name_slug():
    assert generate_project_name_slug("Company/MyProject") == "company/my-project"


def test_project_name_slug_requires_company():
    with pytest.raises(ProjectNameError, match="Expecting projectname format"):
        generate_project_name_slug("MyProject")


def test_composer_json_requires_company():
    with pytest.raises(ProjectNameError):
        generate_composer_json("MyProject", [])


def test_write_composer_json(tmp_path):
    authors = [Author("John Doe", "john@example.com")]
    path = write_composer_json(tmp_path, "company/my-project", authors)
    assert path == tmp_path / "composer.json"
    assert path.read_text(encoding="utf-8") == generate_composer_json(
        "company/my-project", authors
    )