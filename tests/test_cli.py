#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import json
import os
from unittest.mock import patch

import httpx
import pytest

from jasperclient import cli
from jasperclient.rest_client import JasperRestClient

from conftest import SERVER_URL


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / "jasper.env"
    path.write_text(
        f"JASPER_SERVER_URL={SERVER_URL}\n"
        "JASPER_USERNAME=jasperadmin\n"
        "JASPER_PASSWORD=jasperadmin\n"
        "JASPER_MAX_RETRIES=0\n"
    )
    with patch.dict(os.environ, {}, clear=True):
        yield path


@pytest.fixture
def fake_server(monkeypatch):
    """Route the CLI's client to ``handler`` by setting ``fake_server.handler``."""
    requests = []

    class Server:
        handler = None

    def transport_handler(request):
        requests.append(request)
        return Server.handler(request)

    def client_factory(profile, **kwargs):
        return JasperRestClient(profile, transport=httpx.MockTransport(transport_handler), **kwargs)

    monkeypatch.setattr(cli, "JasperRestClient", client_factory)
    Server.requests = requests
    return Server


def test_parse_parameters_groups_repeated_names():
    parameters = cli.parse_parameters(["Country=USA", "State=CA", "Country=Mexico", "Query=a=b"])

    assert [(p.name, p.values) for p in parameters] == [
        ("Country", ["USA", "Mexico"]),
        ("State", ["CA"]),
        ("Query", ["a=b"]),
    ]
    assert cli.parse_parameters(None) == []


def test_parse_parameters_rejects_missing_value():
    with pytest.raises(ValueError):
        cli.parse_parameters(["Country"])


def test_missing_connection_settings(tmp_path, capsys):
    with patch.dict(os.environ, {}, clear=True):
        exit_code = cli.main(["--env-file", str(tmp_path / "missing.env"), "info"])

    assert exit_code == 2
    assert "JASPER_SERVER_URL" in capsys.readouterr().err


def test_info(env_file, fake_server):
    fake_server.handler = lambda request: httpx.Response(200, json={"version": "5.5", "edition": "PRO"})

    assert cli.main(["--env-file", str(env_file), "--no-color", "info"]) == 0
    assert fake_server.requests[0].url.path == "/jasperserver/rest_v2/serverInfo"


def test_server_error_exit_code(env_file, fake_server):
    fake_server.handler = lambda request: httpx.Response(401)

    assert cli.main(["--env-file", str(env_file), "--no-color", "info"]) == 1


def test_ls_runs_through_task_manager(env_file, fake_server):
    fake_server.handler = lambda request: httpx.Response(
        200,
        json={
            "resourceLookup": [
                {"label": "Report", "uri": "/reports/report", "resourceType": "reportUnit"},
                {"label": "Samples", "uri": "/reports/samples", "resourceType": "folder"},
            ]
        },
    )

    assert cli.main(["--env-file", str(env_file), "--no-color", "ls", "/reports", "-t", "reportUnit", "-t", "folder"]) == 0

    params = fake_server.requests[0].url.params
    assert params["folderUri"] == "/reports"
    assert params.get_list("type") == ["reportUnit", "folder"]


def test_controls_validation_errors(env_file, fake_server):
    def handler(request):
        if request.url.path.endswith("/values"):
            return httpx.Response(200, json={"inputControlState": [{"id": "Country", "error": "Unknown value"}]})
        return httpx.Response(200, json={"inputControl": [{"id": "Country", "label": "Country", "type": "singleSelect"}]})

    fake_server.handler = handler

    exit_code = cli.main(["--env-file", str(env_file), "--no-color", "controls", "/reports/Cascading", "-p", "Country=Mars"])

    assert exit_code == 1
    body = json.loads(fake_server.requests[-1].content)
    assert body == {"reportParameter": [{"name": "Country", "value": ["Mars"]}]}


def test_download(env_file, fake_server, tmp_path):
    fake_server.handler = lambda request: httpx.Response(200, content=b"%PDF")
    output = tmp_path / "reports" / "out.pdf"

    exit_code = cli.main(
        ["--env-file", str(env_file), "--no-color", "download", "/reports/A", str(output), "-p", "Country=USA"]
    )

    assert exit_code == 0
    assert output.read_bytes() == b"%PDF"
    assert str(fake_server.requests[0].url) == SERVER_URL + "/rest_v2/reports/reports/A.PDF?Country=USA"
