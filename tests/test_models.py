"""Unit tests for drafts and entities."""

import pytest

from behat_endpoint.exceptions import MalformedPayload
from behat_endpoint.models import Entity, EntityDraft, OperationRequest, get_entity_type_info


class TestEntityDraft:
    """Tests for EntityDraft accessors."""

    def test_from_payload_copies(self) -> None:
        """The draft does not alias the decoded dict."""
        payload = {"title": "T"}
        draft = EntityDraft.from_payload("node", payload)
        draft.set("status", True)
        assert "status" not in payload

    def test_from_payload_rejects_list(self) -> None:
        """Only JSON objects make drafts."""
        with pytest.raises(MalformedPayload, match="Expected a JSON object for node"):
            EntityDraft.from_payload("node", [1, 2])

    def test_null_counts_as_unset(self) -> None:
        """has() is false for null values."""
        draft = EntityDraft(entity_type="node", values={"status": None, "title": ""})
        assert draft.has("status") is False
        assert draft.has("title") is True
        assert draft.get("status", 1) == 1

    def test_get_str_rejects_non_string(self) -> None:
        """get_str raises for numbers."""
        draft = EntityDraft(entity_type="node", values={"author": 5})
        with pytest.raises(MalformedPayload, match="'author' must be a string"):
            draft.get_str("author")

    @pytest.mark.parametrize("raw,expected", [(3, 3), ("3", 3), (" 12 ", 12), (None, None)])
    def test_get_int(self, raw, expected) -> None:
        """get_int accepts ints and digit strings."""
        draft = EntityDraft(entity_type="node", values={"nid": raw})
        assert draft.get_int("nid") == expected

    @pytest.mark.parametrize("raw", ["abc", True, 1.5])
    def test_get_int_rejects(self, raw) -> None:
        """get_int rejects non-integers."""
        draft = EntityDraft(entity_type="node", values={"nid": raw})
        with pytest.raises(MalformedPayload):
            draft.get_int("nid")


class TestOperationRequest:
    """Tests for OperationRequest."""

    def test_handler_name(self) -> None:
        """Dashes become underscores."""
        assert OperationRequest(operation="create-taxonomy-term").handler_name == "create_taxonomy_term"


class TestEntityTypes:
    """Tests for entity type key lookup."""

    def test_known_types(self) -> None:
        """Node and term keys match the payload keys used by operations."""
        assert get_entity_type_info("node").id_key == "nid"
        assert get_entity_type_info("taxonomy_term").bundle_key == "vid"

    def test_unknown_type(self) -> None:
        """Unknown types raise ValueError."""
        with pytest.raises(ValueError):
            get_entity_type_info("widget")

    def test_published(self) -> None:
        """published reflects status."""
        assert Entity(entity_type="node", id=1, values={"status": 1}).published is True
        assert Entity(entity_type="node", id=1, values={}).published is False

    @pytest.mark.parametrize("status,expected", [("0", False), ("false", False), ("", False), ("1", True), ("yes", True)])
    def test_published_from_strings(self, status, expected: bool) -> None:
        """String flags are read as yes/no, not by truthiness."""
        assert Entity(entity_type="node", id=1, values={"status": status}).published is expected
