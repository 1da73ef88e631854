import logging

from starlette.applications import Starlette
from starlette.routing import Route
from starlette.testclient import TestClient

from hateoas_builder import RelationDescriptor, RepresentationBuilder, RepresentationFormat
from hateoas_builder.core.observability import LOGGER_NAME
from hateoas_builder.transports.http import (
    EXCEPTION_HANDLERS,
    HypermediaResponse,
    install_error_handlers,
    representation_response,
)

ORDERS = {1: {"id": 1, "status": "open", "item_ids": [10, 11]}}


def _relations(order):
    return [
        RelationDescriptor(
            name="items",
            target_href_template="/orders/{id}/items",
            cardinality="many",
            related_ids=order["item_ids"],
        )
    ]


async def get_order(request):
    order = ORDERS[int(request.path_params["order_id"])]
    fmt = request.query_params.get("format", "hal")
    return representation_response(order, "/orders/{id}", _relations(order), fmt)


async def broken_order(request):
    # Misconfigured template: no placeholder
    return representation_response({"id": 1}, "/orders", format="hal")


def _app(**kwargs):
    return Starlette(
        routes=[
            Route("/orders/broken", broken_order),
            Route("/orders/{order_id:int}", get_order),
        ],
        **kwargs,
    )


def test_hal_response_media_type_and_body():
    client = TestClient(_app(exception_handlers=EXCEPTION_HANDLERS))
    resp = client.get("/orders/1")

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/hal+json"
    body = resp.json()
    assert body["status"] == "open"
    assert body["_links"]["self"] == {"href": "/orders/1"}
    assert body["_links"]["items"] == [
        {"href": "/orders/1/items/10"},
        {"href": "/orders/1/items/11"},
    ]


def test_json_api_response_media_type_and_body():
    client = TestClient(_app(exception_handlers=EXCEPTION_HANDLERS))
    resp = client.get("/orders/1", params={"format": "json_api"})

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/vnd.api+json"
    items = resp.json()["data"]["relationships"]["items"]
    assert items["data"] == [10, 11]
    assert items["links"]["related"] == "/orders/1/relationships/items"


def test_builder_errors_become_500(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    app = _app()
    install_error_handlers(app)
    client = TestClient(app)

    resp = client.get("/orders/broken")

    assert resp.status_code == 500
    assert resp.json()["error"] == "InvalidTemplateError"
    record = next(r for r in caplog.records if r.getMessage() == "representation_error")
    assert record.path == "/orders/broken"
    assert record.status == 500


def test_response_uses_builder_defaults():
    builder = RepresentationBuilder(
        base_url="https://api.example.com",
        default_format=RepresentationFormat.JSON_API,
    )
    resp = representation_response({"id": 5, "status": "paid"}, "/orders/{id}", builder=builder)

    assert resp.media_type == "application/vnd.api+json"
    assert resp.format is RepresentationFormat.JSON_API
    assert b'"self":"https://api.example.com/orders/5"' in resp.body


def test_hypermedia_response_accepts_format_strings():
    resp = HypermediaResponse({"_links": {}}, "hal", status_code=201, headers={"Location": "/orders/1"})

    assert resp.status_code == 201
    assert resp.media_type == "application/hal+json"
    assert resp.headers["location"] == "/orders/1"
