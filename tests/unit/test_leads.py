"""
Unit Tests for Lead.

Test Aspects Covered:
    ✅ Business Logic: Line combines lead identity and train label
    ✅ Error Handling: Missing train rejected
    ✅ Edge Cases: Custom verb, duck-typed trains
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from rail_bridge.adapters.memory_sink import InMemoryLineSink
from rail_bridge.domain.entities import ManageEvent
from rail_bridge.interfaces.lead import LeadProtocol
from rail_bridge.leads.base import Lead
from rail_bridge.leads.variants import NorthLead, SouthLead
from rail_bridge.trains.variants import NorthTrain, SouthTrain


class TestTryManage:
    """Test cases for try_manage()."""

    def test_north_lead_manages_south_train(
        self,
        memory_sink: InMemoryLineSink,
        north_lead: NorthLead,
        south_train: SouthTrain,
    ) -> None:
        """
        SCENARIO: North lead manages a south-category train
        EXPECTED: Exactly "North Lead manages South-category"
        """
        # Act
        event = north_lead.try_manage(south_train)

        # Assert
        assert memory_sink.lines == ["North Lead manages South-category"]
        assert event == ManageEvent(
            lead_name="North Lead",
            category_label="South-category",
            text="North Lead manages South-category",
        )

    @pytest.mark.parametrize(
        "lead_cls, train_cls, lead_name, label",
        [
            (NorthLead, NorthTrain, "North Lead", "North-category"),
            (NorthLead, SouthTrain, "North Lead", "South-category"),
            (SouthLead, NorthTrain, "South Lead", "North-category"),
            (SouthLead, SouthTrain, "South Lead", "South-category"),
        ],
    )
    def test_line_names_lead_then_label(
        self, lead_cls, train_cls, lead_name: str, label: str
    ) -> None:
        """Identity comes first, label last, never swapped."""
        sink = InMemoryLineSink()

        event = lead_cls(sink=sink).try_manage(train_cls())

        line = sink.lines[0]
        assert line.startswith(lead_name)
        assert line.endswith(label)
        assert event.lead_name == lead_name
        assert event.category_label == label
        assert str(event) == line

    def test_accepts_any_object_with_label(self, north_lead: NorthLead) -> None:
        train = SimpleNamespace(category_label="Freight")

        event = north_lead.try_manage(train)

        assert event.text == "North Lead manages Freight"

    def test_missing_train_rejected(
        self, memory_sink: InMemoryLineSink, south_lead: SouthLead
    ) -> None:
        """
        SCENARIO: try_manage called with None
        EXPECTED: ValueError, nothing emitted
        """
        with pytest.raises(ValueError, match="missing train"):
            south_lead.try_manage(None)

        assert memory_sink.lines == []

    def test_custom_verb_and_name(self, memory_sink: InMemoryLineSink) -> None:
        lead = NorthLead(sink=memory_sink, verb="管理")

        lead.try_manage(SouthTrain(category_label="南车"))

        assert memory_sink.lines == ["North Lead 管理 南车"]

    def test_emits_to_injected_sink(self, south_train: SouthTrain) -> None:
        sink = Mock()

        SouthLead(sink=sink).try_manage(south_train)

        sink.emit.assert_called_once_with("South Lead manages South-category")

    def test_defaults_to_console(
        self, south_train: SouthTrain, capsys: pytest.CaptureFixture
    ) -> None:
        NorthLead().try_manage(south_train)

        assert capsys.readouterr().out == "North Lead manages South-category\n"


class TestLeadConstruction:
    """Test cases for Lead construction."""

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            Lead("")

    def test_empty_verb_rejected(self) -> None:
        """
        SCENARIO: Lead built with an empty verb
        EXPECTED: ValueError instead of a double-spaced line
        """
        with pytest.raises(ValueError, match="verb"):
            Lead("X", verb="")
        with pytest.raises(ValueError, match="verb"):
            NorthLead(verb="")

    def test_variant_rejects_explicit_empty_name(self) -> None:
        with pytest.raises(ValueError, match="name"):
            SouthLead(name="")

    def test_variant_defaults(self) -> None:
        assert NorthLead().name == "North Lead"
        assert SouthLead().name == "South Lead"
        assert SouthLead().verb == "manages"

    def test_satisfies_protocol(self, north_lead: NorthLead) -> None:
        assert isinstance(north_lead, LeadProtocol)
