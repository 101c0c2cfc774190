"""FileParser — deserializes payroll XML bytes into document models."""

from __future__ import annotations

import logging
from typing import Any

from lxml import etree
from pydantic import ValidationError

from conversorxml.core.exceptions import MalformedDocumentError, SchemaMismatchError
from conversorxml.models.document import (
    COMPANY_COLUMNS,
    DOCUMENT_TYPES,
    Company,
    DocumentVariant,
    PayrollDocument,
)

logger = logging.getLogger(__name__)

COMPANY_TAG = "Empresa"
EMPLOYEE_TAG = "Funcionario"
EMPLOYEE_FIELDS: tuple[str, ...] = ("CPF", "Valor", "MetaPremio")


def _make_parser() -> etree.XMLParser:
    # Payroll exports are untrusted input: no entity expansion, no fetching DTDs.
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _child_elements(element: etree._Element) -> list[etree._Element]:
    return [child for child in element if isinstance(child.tag, str)]


def _store_once(payload: dict[str, Any], tag: str, element: etree._Element, parent: str) -> None:
    if tag in payload:
        raise MalformedDocumentError(f"Duplicate <{tag}> in <{parent}>")
    payload[tag] = (element.text or "").strip()


def _employee_payload(element: etree._Element) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for child in _child_elements(element):
        tag = _local_name(child)
        if tag in EMPLOYEE_FIELDS:
            _store_once(payload, tag, child, EMPLOYEE_TAG)
    return payload


def _company_payload(element: etree._Element) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    employees: list[dict[str, Any]] = []
    for child in _child_elements(element):
        tag = _local_name(child)
        if tag == EMPLOYEE_TAG:
            employees.append(_employee_payload(child))
        elif tag in COMPANY_COLUMNS:
            _store_once(payload, tag, child, COMPANY_TAG)
    if employees:
        payload[EMPLOYEE_TAG] = employees
    return payload


def _describe_validation_error(exc: ValidationError) -> str:
    problems: list[str] = []
    for error in exc.errors():
        loc = error["loc"]
        if len(loc) >= 3 and loc[0] == EMPLOYEE_TAG:
            where = f"<{EMPLOYEE_TAG}> #{int(loc[1]) + 1}"
            field = loc[2]
        else:
            where = f"<{COMPANY_TAG}>"
            field = loc[-1] if loc else "?"
        problems.append(f"{where}: <{field}> {error['msg'].lower()}")
    return "Malformed document: " + "; ".join(problems)


def parse(data: bytes, variant: DocumentVariant) -> PayrollDocument:
    """Parse ``data`` as the XML layout of ``variant``.

    The root element must be the variant's wrapper (``Comissao`` or ``Vales``)
    holding exactly one ``Empresa``. Leaf text is trimmed of surrounding
    whitespace and otherwise kept as written. A company with
    no ``Funcionario`` elements parses to ``employees=None``.

    Raises:
        SchemaMismatchError: root element belongs to another variant or is unknown.
        MalformedDocumentError: XML not well-formed or a required field is missing.
    """
    try:
        root = etree.fromstring(data, _make_parser())
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise MalformedDocumentError(f"XML is not well-formed: {exc}") from exc

    root_tag = _local_name(root)
    if root_tag != variant.root_tag:
        raise SchemaMismatchError(expected=variant.root_tag, found=root_tag)

    companies = [child for child in _child_elements(root) if _local_name(child) == COMPANY_TAG]
    if not companies:
        raise MalformedDocumentError(f"Missing <{COMPANY_TAG}> in <{root_tag}>")
    if len(companies) > 1:
        raise MalformedDocumentError(f"Expected one <{COMPANY_TAG}> in <{root_tag}>, found {len(companies)}")

    try:
        company = Company.model_validate(_company_payload(companies[0]))
    except ValidationError as exc:
        raise MalformedDocumentError(_describe_validation_error(exc)) from exc

    logger.debug(
        "Parsed %s document for CNPJ %s with %d employee(s)",
        variant.value, company.tax_id, len(company.employees or ()),
    )
    return DOCUMENT_TYPES[variant](company=company)
