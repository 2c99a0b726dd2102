# =============================================================================
# tests/test_actions.py - Action Entry Point Tests
# =============================================================================
# Covers the envelope contract end to end (action -> repository -> fake DB):
# - validation failures return the first message and write nothing
# - lower-layer failures become a fixed generic message
# - successful mutations revalidate cached views
# =============================================================================

from decimal import Decimal
from types import MappingProxyType
from uuid import uuid4

import pytest

from core.actions import (
    apply_example_markup,
    create_example,
    delete_example,
    get_current_organization,
    get_example_by_id,
    get_examples,
    get_organization_summary,
    update_example,
    update_organization,
)
from core.context import RequestContext
from lib.view_cache import view_cache


# =============================================================================
# Create
# =============================================================================

class TestCreateExample:

    def test_widget_scenario(self, ctx, organization_row):
        result = create_example(ctx, {
            "name": "Widget",
            "value": 10.10,
            "organization_id": organization_row["id"],
        })

        assert result.success is True
        assert result.data.is_active is True
        assert result.data.value == Decimal("10.10")

        payload = result.model_dump(mode="json")
        assert set(payload) == {"success", "data"}
        assert payload["data"]["value"] == "10.10"

    def test_caller_cannot_choose_server_fields(self, ctx, organization_row):
        chosen_id = str(uuid4())

        result = create_example(ctx, {
            "id": chosen_id,
            "is_active": False,
            "created_at": "2000-01-01T00:00:00Z",
            "name": "Widget",
            "value": 1,
            "organization_id": organization_row["id"],
        })

        assert result.success is True
        assert str(result.data.id) != chosen_id
        assert result.data.is_active is True
        assert result.data.created_at.year != 2000

    def test_empty_name_scenario(self, ctx, fake_client, organization_row):
        result = create_example(ctx, {
            "name": "",
            "value": 10,
            "organization_id": organization_row["id"],
        })

        assert result.model_dump(mode="json") == {"success": False, "error": "Nome obrigatório"}
        assert fake_client.writes("examples") == []

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({"name": "Widget", "value": -1}, "Valor deve ser maior ou igual a zero"),
            ({"name": "Widget", "value": "abc"}, "Valor inválido"),
            ({"name": "Widget", "value": "1e30"}, "Valor muito alto"),
            ({"name": "Widget", "value": 1e30}, "Valor muito alto"),
            ({"name": "Widget", "value": 1, "organization_id": "x"}, "Organização inválida"),
        ],
    )
    def test_invalid_inputs_write_nothing(self, ctx, fake_client, organization_row, payload, message):
        payload = {"organization_id": organization_row["id"], **payload}

        result = create_example(ctx, payload)

        assert result.success is False
        assert result.error == message
        assert fake_client.writes("examples") == []

    def test_non_mapping_input(self, ctx):
        result = create_example(ctx, ["Widget", 10])

        assert result.success is False
        assert result.error == "Dados inválidos"

    def test_storage_failure_is_generic(self, ctx, fake_client, organization_row):
        fake_client.fail_next("duplicate key value violates unique constraint")

        result = create_example(ctx, {
            "name": "Widget",
            "value": 1,
            "organization_id": organization_row["id"],
        })

        assert result.success is False
        assert result.error == "Erro ao criar exemplo"
        assert "duplicate" not in result.error

    def test_revalidates_list_views(self, ctx, organization_row):
        view_cache.set(f"/examples?organization_id={ctx.organization_id}", {"examples": []})
        view_cache.set(f"/organizations/{ctx.organization_id}/summary", {"total_value": "0"})

        create_example(ctx, {"name": "Widget", "value": 1, "organization_id": organization_row["id"]})

        assert view_cache.get(f"/examples?organization_id={ctx.organization_id}") is None
        assert view_cache.get(f"/organizations/{ctx.organization_id}/summary") is None

    def test_validation_failure_keeps_cache(self, ctx):
        view_cache.set("/examples", ["cached"])

        create_example(ctx, {"name": ""})

        assert view_cache.get("/examples") == ["cached"]


# =============================================================================
# Update
# =============================================================================

class TestUpdateExample:

    def test_omitted_fields_are_preserved(self, ctx, seed_example):
        row = seed_example(name="Widget", value="10.10")

        result = update_example(ctx, row["id"], {"name": "Gadget"})

        assert result.success is True
        assert result.data.name == "Gadget"
        assert result.data.value == Decimal("10.10")

        result = update_example(ctx, row["id"], {"value": "12.5"})

        assert result.data.name == "Gadget"
        assert result.data.value == Decimal("12.50")

    def test_empty_update_returns_current(self, ctx, fake_client, seed_example):
        row = seed_example(name="Widget")

        result = update_example(ctx, row["id"], {})

        assert result.success is True
        assert result.data.name == "Widget"
        assert fake_client.writes("examples") == []

    def test_empty_update_missing_record(self, ctx):
        result = update_example(ctx, uuid4(), {})
        assert result.model_dump() == {"success": False, "error": "Exemplo não encontrado"}

    def test_invalid_update(self, ctx, fake_client, seed_example):
        row = seed_example()

        result = update_example(ctx, row["id"], {"value": -5})

        assert result.error == "Valor deve ser maior ou igual a zero"
        assert fake_client.writes("examples") == []

    def test_value_too_large(self, ctx, fake_client, seed_example):
        row = seed_example(value="10.10")

        result = update_example(ctx, row["id"], {"value": 1e30})

        assert result.model_dump() == {"success": False, "error": "Valor muito alto"}
        assert fake_client.writes("examples") == []

    def test_missing_record_is_generic_failure(self, ctx):
        result = update_example(ctx, uuid4(), {"name": "Ghost"})
        assert result.model_dump() == {"success": False, "error": "Erro ao atualizar exemplo"}


# =============================================================================
# Delete
# =============================================================================

class TestDeleteExample:

    def test_soft_delete_semantics(self, ctx, seed_example):
        row = seed_example(name="Widget")

        result = delete_example(ctx, row["id"])

        assert result.success is True
        assert result.data == {"id": row["id"]}
        assert get_examples(ctx, ctx.organization_id) == []

        example = get_example_by_id(ctx, row["id"])
        assert example is not None
        assert example.is_active is False

    def test_non_existent_id_scenario(self, ctx):
        result = delete_example(ctx, uuid4())

        assert result.model_dump(mode="json") == {"success": False, "error": "Erro ao excluir exemplo"}


# =============================================================================
# Markup
# =============================================================================

class TestApplyExampleMarkup:

    def test_exact_markup(self, ctx, seed_example):
        row = seed_example(value="10.10")

        result = apply_example_markup(ctx, row["id"])

        assert result.success is True
        assert result.data.value == Decimal("11.11")
        assert get_example_by_id(ctx, row["id"]).value == Decimal("11.11")

    def test_missing(self, ctx):
        result = apply_example_markup(ctx, uuid4())
        assert result.error == "Exemplo não encontrado"

    def test_storage_failure(self, ctx, fake_client):
        fake_client.fail_next()
        result = apply_example_markup(ctx, uuid4())
        assert result.error == "Erro ao aplicar reajuste"

    def test_result_above_column_limit(self, ctx, fake_client, seed_example):
        row = seed_example(value="9999999999.00")

        result = apply_example_markup(ctx, row["id"])

        assert result.error == "Erro ao aplicar reajuste"
        assert fake_client.writes("examples") == []


# =============================================================================
# Organizations
# =============================================================================

class TestOrganizationActions:

    def test_current_organization(self, ctx, organization_row):
        organization = get_current_organization(ctx)
        assert str(organization.id) == organization_row["id"]

    def test_no_organization_in_context(self, fake_client):
        ctx = RequestContext(user_id=uuid4(), organization_id=None, client=fake_client)

        assert get_current_organization(ctx) is None
        assert get_organization_summary(ctx) is None
        assert update_organization(ctx, {"name": "Acme"}).error == "Organização não encontrada"

    def test_summary(self, ctx, seed_example):
        seed_example(value="1.10")
        seed_example(value="2.20")

        summary = get_organization_summary(ctx)

        assert summary.active_examples == 2
        assert summary.total_value == Decimal("3.30")

    def test_rename(self, ctx):
        view_cache.set("/organizations/current", {"name": "Acme"})

        result = update_organization(ctx, {"name": "Acme Ltda"})

        assert result.success is True
        assert result.data.name == "Acme Ltda"
        assert view_cache.get("/organizations/current") is None

    def test_rename_validation(self, ctx):
        result = update_organization(ctx, {"name": ""})
        assert result.model_dump() == {"success": False, "error": "Nome obrigatório"}

    def test_rename_storage_failure(self, ctx, fake_client):
        fake_client.fail_next()
        result = update_organization(ctx, {"name": "Acme Ltda"})
        assert result.error == "Erro ao atualizar organização"

    def test_rename_accepts_any_mapping(self, ctx):
        result = update_organization(ctx, MappingProxyType({"name": "Acme Ltda"}))

        assert result.success is True
        assert result.data.name == "Acme Ltda"

    def test_rename_non_mapping_input(self, ctx, fake_client):
        result = update_organization(ctx, ["Acme Ltda"])

        assert result.model_dump() == {"success": False, "error": "Dados inválidos"}
        assert fake_client.writes("organizations") == []
