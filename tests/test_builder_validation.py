import pytest
from pydantic import ValidationError

from hateoas_builder import (
    DuplicateRelationNameError,
    InvalidTemplateError,
    MissingIdentifierError,
    RelationDescriptor,
    RepresentationError,
    build,
)


def _rel(name: str, template: str = "/orders/{id}/items") -> RelationDescriptor:
    return RelationDescriptor(name=name, target_href_template=template)


@pytest.mark.parametrize(
    "entity",
    [
        {"status": "open"},
        {"id": None},
        {"id": ""},
        {"id": "   "},
        {"id": True},
        {"id": {"nested": 1}},
    ],
)
def test_missing_identifier(entity):
    with pytest.raises(MissingIdentifierError) as exc:
        build(entity, "/orders/{id}")
    assert exc.value.id_field == "id"


def test_missing_custom_identifier_field():
    with pytest.raises(MissingIdentifierError) as exc:
        build({"id": 1}, "/orders/{order_no}", id_field="order_no")
    assert "order_no" in str(exc.value)


def test_zero_identifier_is_valid():
    doc = build({"id": 0}, "/orders/{id}")
    assert doc["_links"]["self"]["href"] == "/orders/0"


def test_duplicate_relation_names():
    with pytest.raises(DuplicateRelationNameError) as exc:
        build({"id": 1}, "/orders/{id}", [_rel("items"), _rel("items")])
    assert exc.value.name == "items"


def test_relation_named_self_collides_with_self_link():
    with pytest.raises(DuplicateRelationNameError):
        build({"id": 1}, "/orders/{id}", [_rel("self")], "json_api")


@pytest.mark.parametrize(
    "template, count",
    [
        ("/orders", 0),
        ("/orders/{id}/items/{item_id}", 2),
        ("", 0),
    ],
)
def test_self_template_placeholder_count(template, count):
    with pytest.raises(InvalidTemplateError) as exc:
        build({"id": 1}, template)
    assert exc.value.placeholder_count == count


def test_relation_template_without_placeholder():
    with pytest.raises(InvalidTemplateError) as exc:
        build({"id": 1}, "/orders/{id}", [_rel("items", "/items")])
    assert exc.value.template == "/items"


def test_json_api_type_cannot_be_derived():
    with pytest.raises(InvalidTemplateError):
        build({"id": 1}, "/{id}", format="json_api")


def test_identifier_checked_before_templates():
    with pytest.raises(MissingIdentifierError):
        build({}, "/orders", [_rel("items"), _rel("items")])


def test_templates_checked_before_duplicate_names():
    with pytest.raises(InvalidTemplateError):
        build({"id": 1}, "/orders/{id}", [_rel("items"), _rel("items", "/bad")])


def test_errors_share_a_value_error_base():
    with pytest.raises(RepresentationError):
        build({}, "/orders/{id}")
    assert issubclass(RepresentationError, ValueError)


def test_non_mapping_entity_is_a_type_error():
    with pytest.raises(TypeError):
        build([("id", 1)], "/orders/{id}")


def test_unknown_format_is_rejected():
    with pytest.raises(ValueError):
        build({"id": 1}, "/orders/{id}", format="xml")


def test_one_relation_rejects_several_ids():
    with pytest.raises(ValidationError):
        RelationDescriptor(
            name="customer",
            target_href_template="/customers/{id}",
            related_ids=[1, 2],
        )


def test_descriptor_rejects_unknown_fields_and_empty_name():
    with pytest.raises(ValidationError):
        RelationDescriptor(name="x", target_href_template="/x/{id}", href="/x")
    with pytest.raises(ValidationError):
        RelationDescriptor(name="", target_href_template="/x/{id}")


def test_float_identifier_message_names_accepted_types():
    with pytest.raises(MissingIdentifierError) as exc:
        build({"id": 1.5}, "/orders/{id}")
    assert "int, str or UUID" in str(exc.value)
    assert "float" in str(exc.value)
