"""Tests for the 1-Click service."""

import json

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from doclient import (
    APIError,
    Client,
    DecodeError,
    InstallKubernetesAppsRequest,
    OneClick,
)

TEST_ONE_CLICK_JSON = """
    {
      "slug":"test-slug",
      "type":"droplet"
    }
"""


@pytest.mark.asyncio
async def test_one_click_list(client: Client, mux: FastAPI):
    """Test listing decodes the 1_clicks envelope."""
    captured = {}

    @mux.get("/v2/1-clicks")
    async def list_one_clicks(request: Request):
        captured["query"] = dict(request.query_params)
        return json.loads('{"1_clicks": [' + TEST_ONE_CLICK_JSON + "]}")

    one_clicks, resp = await client.one_click.list()

    assert one_clicks == [OneClick(slug="test-slug", type="droplet")]
    assert captured["query"] == {}
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_one_click_list_preserves_order(client: Client, mux: FastAPI):
    """Test every entry is returned in server order."""
    entries = [
        {"slug": "wordpress-18-04", "type": "droplet"},
        {"slug": "monitoring", "type": "kubernetes"},
        {"slug": "docker-18-04", "type": "droplet"},
    ]

    @mux.get("/v2/1-clicks")
    async def list_one_clicks():
        return {"1_clicks": entries}

    one_clicks, _ = await client.one_click.list()

    assert len(one_clicks) == 3
    assert [(o.slug, o.type) for o in one_clicks] == [(e["slug"], e["type"]) for e in entries]


@pytest.mark.asyncio
async def test_one_click_list_type_filter(client: Client, mux: FastAPI):
    """Test the type filter is sent as a query parameter."""
    captured = {}

    @mux.get("/v2/1-clicks")
    async def list_one_clicks(request: Request):
        captured["type"] = request.query_params.get("type")
        return {"1_clicks": [{"slug": "monitoring", "type": "kubernetes"}]}

    one_clicks, _ = await client.one_click.list("kubernetes")

    assert captured["type"] == "kubernetes"
    assert one_clicks[0].type == "kubernetes"


@pytest.mark.asyncio
async def test_one_click_list_empty(client: Client, mux: FastAPI):
    """Test an empty envelope yields an empty list."""

    @mux.get("/v2/1-clicks")
    async def list_one_clicks():
        return {"1_clicks": []}

    one_clicks, _ = await client.one_click.list()

    assert one_clicks == []


@pytest.mark.asyncio
async def test_one_click_list_normalized_key_is_not_read(client: Client, mux: FastAPI):
    """Test only the exact "1_clicks" key is accepted."""

    @mux.get("/v2/1-clicks")
    async def list_one_clicks():
        return {"one_clicks": [{"slug": "test-slug", "type": "droplet"}]}

    one_clicks, _ = await client.one_click.list()

    assert one_clicks == []


@pytest.mark.asyncio
async def test_one_click_list_shape_mismatch(client: Client, mux: FastAPI):
    """Test a mismatched JSON shape raises DecodeError."""

    @mux.get("/v2/1-clicks")
    async def list_one_clicks():
        return {"1_clicks": "not-a-list"}

    with pytest.raises(DecodeError) as exc_info:
        await client.one_click.list()

    assert exc_info.value.response.status_code == 200
    assert exc_info.value.details["errors"]


@pytest.mark.asyncio
async def test_one_click_list_error(client: Client, mux: FastAPI):
    """Test a non-2xx listing raises APIError."""

    @mux.get("/v2/1-clicks")
    async def list_one_clicks():
        return JSONResponse(
            status_code=503,
            content={"id": "service_unavailable", "message": "try again later"},
        )

    with pytest.raises(APIError) as exc_info:
        await client.one_click.list()

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_one_click_install_kubernetes(client: Client, mux: FastAPI):
    """Test installing applications posts the install parameters."""
    captured = {}

    @mux.post("/v2/1-clicks")
    async def install(request: Request):
        captured["body"] = await request.json()
        return {"message": "Successfully kicked off addon job."}

    result, resp = await client.one_click.install_kubernetes(
        InstallKubernetesAppsRequest(
            slugs=["slug1", "slug2"],
            cluster_uuid="50a994b6-c303-438f-9495-7e896cfe6b08",
        )
    )

    assert captured["body"] == {
        "addon_slugs": ["slug1", "slug2"],
        "cluster_uuid": "50a994b6-c303-438f-9495-7e896cfe6b08",
    }
    assert result.message == "Successfully kicked off addon job."
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_one_click_install_kubernetes_error(client: Client, mux: FastAPI):
    """Test a rejected install raises APIError."""

    @mux.post("/v2/1-clicks")
    async def install():
        return JSONResponse(
            status_code=422,
            content={"id": "unprocessable_entity", "message": "cluster not found"},
        )

    with pytest.raises(APIError) as exc_info:
        await client.one_click.install_kubernetes(
            InstallKubernetesAppsRequest(slugs=["monitoring"], cluster_uuid="missing")
        )

    assert exc_info.value.status_code == 422
    assert exc_info.value.api_message == "cluster not found"


@pytest.mark.asyncio
async def test_one_click_install_kubernetes_shape_mismatch(client: Client, mux: FastAPI):
    """Test an install response of the wrong shape raises DecodeError."""

    @mux.post("/v2/1-clicks")
    async def install():
        return {"message": ["not", "a", "string"]}

    with pytest.raises(DecodeError):
        await client.one_click.install_kubernetes(
            InstallKubernetesAppsRequest(slugs=["monitoring"], cluster_uuid="c1")
        )


def test_install_kubernetes_request_requires_cluster():
    """Test an install request cannot be built without a cluster."""
    with pytest.raises(ValidationError):
        InstallKubernetesAppsRequest(slugs=["monitoring"])
