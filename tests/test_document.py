from pathlib import Path

from api_pseudodoc.config import RenderSettings
from api_pseudodoc.document import assemble, group_by_tag, render_document, render_operation
from api_pseudodoc.loader import load_document
from api_pseudodoc.parser.base import Operation, Request
from api_pseudodoc.walker import walk

FIXTURES = Path(__file__).parent / "fixtures"


def _make_operation(method: str, uri: str, tags: list[str], **kwargs) -> Operation:
    kwargs.setdefault("request", Request())
    kwargs.setdefault("response", "string")
    return Operation(method=method, url=f"/api{uri}", uri=uri, tags=tags, **kwargs)


class TestGroupByTag:
    def test_first_seen_tag_order(self):
        ops = [
            _make_operation("get", "/b", ["beta"]),
            _make_operation("get", "/a", ["alpha"]),
            _make_operation("post", "/b", ["beta"]),
        ]
        groups = group_by_tag(ops)
        assert list(groups) == ["beta", "alpha"]
        assert [op.method for op in groups["beta"]] == ["get", "post"]

    def test_multi_tag_fan_out(self):
        op = _make_operation("get", "/x", ["one", "two"])
        groups = group_by_tag([op])
        assert groups == {"one": [op], "two": [op]}

    def test_duplicate_tag_listed_once(self):
        op = _make_operation("get", "/x", ["one", "one"])
        assert group_by_tag([op]) == {"one": [op]}

    def test_untagged_goes_to_default(self):
        op = _make_operation("get", "/x", [])
        assert group_by_tag([op]) == {"Default": [op]}
        assert group_by_tag([op], default_tag="misc") == {"misc": [op]}


class TestRenderOperation:
    def test_minimal_block(self):
        op = _make_operation("delete", "/x", [], response="{}")
        assert render_operation(op) == (
            "## /x \n"
            "\n**Request->Response:**\n"
            "```\n"
            'DELETE "/api/x" -> {}\n'
            "```\n"
        )

    def test_full_block(self):
        op = _make_operation(
            "post",
            "/users/{id}",
            ["users"],
            summary="Update user",
            name="updateUser",
            request=Request(
                headers="{\n    X-Token: string\n}",
                data="{\n    name: string\n}\n",
                search_query="{\n    dryRun?: boolean\n}",
                path_params="{\n    id: int64\n}",
            ),
            response="{\n    ok: boolean\n}\n",
        )
        assert render_operation(op) == (
            "## /users/{id} Update user\n"
            "\nupdateUser Update user\n"
            "\n**Headers:**\n```\n{\n    X-Token: string\n}\n```\n"
            "\n**SearchQueryParams:**\n```\n{\n    dryRun?: boolean\n}\n```\n"
            "\n**PathParams:**\n```\n{\n    id: int64\n}\n```\n"
            "\n**Request->Response:**\n"
            "```\n"
            'POST "/api/users/{id}" + {\n    name: string\n} -> {\n    ok: boolean\n}\n'
            "```\n"
        )


class TestAssemble:
    def test_layout(self):
        ops = [
            _make_operation("get", "/a", ["alpha"]),
            _make_operation("get", "/b", []),
        ]
        text = assemble(ops)
        parts = text.split("\n\n")
        assert parts[0] == "[TOC]"
        assert parts[1] == "# alpha"
        assert text.index("# alpha") < text.index("## /a") < text.index("# Default") < text.index("## /b")

    def test_empty(self):
        assert assemble([]) == "[TOC]"

    def test_settings(self):
        settings = RenderSettings(default_tag="Other", toc_marker="<!-- toc -->")
        text = assemble([_make_operation("get", "/a", [])], settings)
        assert text.startswith("<!-- toc -->\n\n# Other\n\n## /a")


class TestRenderDocument:
    def test_petstore(self):
        doc = load_document(FIXTURES / "petstore.yaml")
        text = render_document(doc)
        assert text.startswith("[TOC]\n\n# pets\n\n## /pets List all pets\n")
        assert text.index("# pets") < text.index("# store") < text.index("# Default")
        assert text.count("## /pets/{petId} Info for a specific pet") == 2
        assert 'DELETE "/v1/pets/{petId}" -> {}' in text
        assert 'POST "/v1/pets" + {\n    name: string\n} -> {' in text

    def test_matches_walk_then_assemble(self):
        doc = load_document(FIXTURES / "petstore.yaml")
        assert render_document(doc) == assemble(walk(doc))
