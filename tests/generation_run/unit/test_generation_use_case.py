"""Generation run use-case tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from xsd_workato_generator.generation_run import (
    GenerationError,
    GenerationRequest,
    execute_generation,
)

_CUSTOMER_XSD = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
  <xs:element name="Customer">
    <xs:complexType>
      <xs:sequence>
        <xs:element name="Email" type="xs:string"/>
      </xs:sequence>
    </xs:complexType>
  </xs:element>
</xs:schema>
"""


def _write_xsd(path: Path, contents: str = _CUSTOMER_XSD) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_writes_template_and_schema_next_to_input(tmp_path: Path) -> None:
    input_path = _write_xsd(tmp_path / "Customer.xsd")

    outcome = execute_generation(GenerationRequest(input_path=str(input_path)))

    assert outcome.template_path == (tmp_path / "customer.template").resolve()
    assert outcome.schema_path == (tmp_path / "customer-schema.json").resolve()
    assert outcome.element_count == 1
    assert "<Email>{{Customer_Email}}</Email>" in outcome.template_path.read_text(
        encoding="utf-8"
    )
    schema = json.loads(outcome.schema_path.read_text(encoding="utf-8"))
    assert schema[0]["properties"][0]["name"] == "Customer_Email"


def test_output_dir_overrides_configured_directory(tmp_path: Path) -> None:
    input_path = _write_xsd(tmp_path / "customer.xsd")
    config_path = tmp_path / "xsd2wkt.yaml"
    config_path.write_text("output:\n  directory: configured\n", encoding="utf-8")

    outcome = execute_generation(
        GenerationRequest(
            input_path=str(input_path),
            config_path=str(config_path),
            output_dir=str(tmp_path / "override"),
        )
    )

    assert outcome.template_path.parent == (tmp_path / "override").resolve()
    assert not (tmp_path / "configured").exists()


def test_configuration_controls_naming_and_indent(tmp_path: Path) -> None:
    input_path = _write_xsd(tmp_path / "Customer.xsd")
    config_path = tmp_path / "xsd2wkt.yaml"
    config_path.write_text(
        "output:\n  directory: out\n  lowercase_names: false\nschema_json:\n  indent: 0\n",
        encoding="utf-8",
    )

    outcome = execute_generation(
        GenerationRequest(input_path=str(input_path), config_path=str(config_path))
    )

    assert outcome.schema_path == (tmp_path / "out" / "Customer-schema.json").resolve()
    assert "\n" not in outcome.schema_path.read_text(encoding="utf-8")


def test_schema_without_elements_writes_header_and_empty_array(tmp_path: Path) -> None:
    input_path = _write_xsd(
        tmp_path / "empty.xsd", '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"/>'
    )

    outcome = execute_generation(GenerationRequest(input_path=str(input_path)))

    assert outcome.element_count == 0
    assert outcome.template_path.read_text(encoding="utf-8") == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
    )
    assert outcome.schema_path.read_text(encoding="utf-8") == "[]"


def test_multiple_top_level_elements_are_logged(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    input_path = _write_xsd(
        tmp_path / "multi.xsd",
        '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
        '<xs:element name="One" type="xs:string"/>'
        '<xs:element name="Two" type="xs:string"/>'
        "</xs:schema>",
    )

    with caplog.at_level(logging.WARNING, logger="xsd_workato_generator"):
        execute_generation(GenerationRequest(input_path=str(input_path)))

    assert "2 top-level elements found" in caplog.text


def test_unreadable_schema_raises_generation_error(tmp_path: Path) -> None:
    input_path = _write_xsd(tmp_path / "broken.xsd", "<xs:schema")

    with pytest.raises(GenerationError, match="Failed to parse schema XML"):
        execute_generation(GenerationRequest(input_path=str(input_path)))
    assert not (tmp_path / "broken.template").exists()


def test_invalid_configuration_raises_generation_error(tmp_path: Path) -> None:
    input_path = _write_xsd(tmp_path / "customer.xsd")

    with pytest.raises(GenerationError, match="Configuration file not found"):
        execute_generation(
            GenerationRequest(
                input_path=str(input_path), config_path=str(tmp_path / "missing.yaml")
            )
        )


def test_write_failures_raise_generation_error(tmp_path: Path) -> None:
    input_path = _write_xsd(tmp_path / "customer.xsd")
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")

    with pytest.raises(GenerationError, match="Failed to write generated artifacts"):
        execute_generation(
            GenerationRequest(input_path=str(input_path), output_dir=str(blocker / "out"))
        )
