import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import yaml
from click.testing import CliRunner

from prismic_client.cli import _build_request, _collect_predicates, main
from prismic_client.decoder.api import decode_api
from prismic_client.errors import TransportError
from prismic_client.predicates import AnyIn, At, AtIn, FullText

FIXTURES = Path(__file__).parent / "fixtures"
API_URL = "https://blog.cdn.prismic.io/api"


def _load(name: str) -> dict:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


def _mock_transport(*payloads) -> MagicMock:
    transport = MagicMock()
    transport.fetch_json = AsyncMock(side_effect=list(payloads))
    return transport


class TestCliApi:
    @patch("prismic_client.cli.RequestsTransport")
    def test_api_yaml(self, MockTransport):
        MockTransport.return_value = _mock_transport(_load("api.json"))

        runner = CliRunner()
        result = runner.invoke(main, ["api", API_URL])

        assert result.exit_code == 0
        summary = yaml.safe_load(result.output)
        assert summary["bookmarks"] == {"about": "UlfoxUnM0wkXYXbX"}
        assert summary["refs"][0]["master"] is True

    @patch("prismic_client.cli.RequestsTransport")
    def test_api_json(self, MockTransport):
        MockTransport.return_value = _mock_transport(_load("api.json"))

        runner = CliRunner()
        result = runner.invoke(main, ["api", API_URL, "--format", "json"])

        assert result.exit_code == 0
        assert "everything" in json.loads(result.output)["forms"]

    @patch("prismic_client.cli.RequestsTransport")
    def test_api_fetch_failure(self, MockTransport):
        MockTransport.return_value = _mock_transport(TransportError(API_URL, "refused"))

        runner = CliRunner()
        result = runner.invoke(main, ["api", API_URL])

        assert result.exit_code != 0
        assert "could not fetch API descriptor" in result.output
        MockTransport.return_value.close.assert_called_once()

    @patch("prismic_client.cli.RequestsTransport")
    def test_api_closes_transport(self, MockTransport):
        MockTransport.return_value = _mock_transport(_load("api.json"))

        runner = CliRunner()
        result = runner.invoke(main, ["api", API_URL])

        assert result.exit_code == 0
        MockTransport.return_value.close.assert_called_once()

    def test_api_requires_url(self, monkeypatch):
        monkeypatch.delenv("PRISMIC_API_URL", raising=False)
        runner = CliRunner()
        result = runner.invoke(main, ["api"])
        assert result.exit_code != 0
        assert "PRISMIC_API_URL" in result.output

    @patch("prismic_client.cli.RequestsTransport")
    def test_api_url_from_env(self, MockTransport, monkeypatch):
        monkeypatch.setenv("PRISMIC_API_URL", API_URL)
        transport = _mock_transport(_load("api.json"))
        MockTransport.return_value = transport

        runner = CliRunner()
        result = runner.invoke(main, ["api"])

        assert result.exit_code == 0
        transport.fetch_json.assert_awaited_once_with(API_URL)


class TestCliQuery:
    @patch("prismic_client.cli.RequestsTransport")
    def test_query_summary(self, MockTransport):
        transport = _mock_transport(_load("api.json"), _load("search.json"))
        MockTransport.return_value = transport

        runner = CliRunner()
        result = runner.invoke(main, ["query", API_URL, "--at", "document.type", "article"])

        assert result.exit_code == 0
        assert "Found 1 documents" in result.output
        assert "article UlfoxUnM0wkXYXbX hello-world" in result.output
        query_url = transport.fetch_json.await_args_list[1].args[0]
        assert "q=" in query_url
        transport.close.assert_called_once()

    @patch("prismic_client.cli.RequestsTransport")
    def test_query_html(self, MockTransport):
        MockTransport.return_value = _mock_transport(_load("api.json"), _load("search.json"))

        runner = CliRunner()
        result = runner.invoke(main, ["query", API_URL, "--html"])

        assert result.exit_code == 0
        assert "<h1>Hello world</h1>" in result.output
        assert "<strong>Hello</strong>" in result.output

    @patch("prismic_client.cli.RequestsTransport")
    def test_query_missing_form(self, MockTransport):
        MockTransport.return_value = _mock_transport(_load("api.json"))

        runner = CliRunner()
        result = runner.invoke(main, ["query", API_URL, "--form", "missing"])

        assert result.exit_code != 0
        assert "form not found" in result.output
        MockTransport.return_value.close.assert_called_once()


class TestBuildRequest:
    def test_collect_predicates(self):
        predicates = _collect_predicates(
            (("document.type", "article"),),
            (("document.tags", "a, b"),),
            (("document.id", "x,y"),),
            (("document", "cats"),),
        )
        assert predicates == [
            At(fragment="document.type", value="article"),
            AtIn(fragment="document.tags", values=["a", "b"]),
            AnyIn(fragment="document.id", values=["x", "y"]),
            FullText(fragment="document", value="cats"),
        ]

    def test_bookmark_overrides_form(self):
        api = decode_api(_load("api.json"))
        request = _build_request("articles", "spring-release", "about", []).build(api)
        assert "UlfoxUnM0wkXYXbX" in request.query
        assert request.ref == "WqaSPRINGref"
