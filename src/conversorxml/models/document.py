"""Payroll document models for the two supported XML variants.

Field aliases are the XML element names, so a dict keyed by tag names can be
validated straight into these models.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class DocumentVariant(StrEnum):
    """Supported document kinds, valued by their filename prefix."""

    COMMISSION = "comissao"
    VALE = "vales"

    @property
    def root_tag(self) -> str:
        return _ROOT_TAGS[self]

    @property
    def columns(self) -> tuple[str, ...]:
        return _COLUMNS[self]


COMPANY_COLUMNS: tuple[str, ...] = ("Fantasia", "Razao", "CNPJ", "MesAno")

_ROOT_TAGS: dict[DocumentVariant, str] = {
    DocumentVariant.COMMISSION: "Comissao",
    DocumentVariant.VALE: "Vales",
}

_COLUMNS: dict[DocumentVariant, tuple[str, ...]] = {
    DocumentVariant.COMMISSION: COMPANY_COLUMNS + ("CPF", "Valor", "MetaPremio"),
    DocumentVariant.VALE: COMPANY_COLUMNS + ("CPF", "Valor"),
}


class Employee(BaseModel):
    """One <Funcionario> entry. Amounts are kept as raw source text."""

    model_config = {"frozen": True, "populate_by_name": True}

    tax_id: str = Field(alias="CPF")
    amount: str = Field(alias="Valor")
    bonus_target: Optional[str] = Field(default=None, alias="MetaPremio")


class Company(BaseModel):
    """The <Empresa> block shared by both variants."""

    model_config = {"frozen": True, "populate_by_name": True}

    display_name: str = Field(alias="Fantasia")
    legal_name: str = Field(alias="Razao")
    tax_id: str = Field(alias="CNPJ")
    period_label: str = Field(alias="MesAno")
    employees: Optional[list[Employee]] = Field(default=None, alias="Funcionario")

    @property
    def has_employees(self) -> bool:
        return bool(self.employees)

    @property
    def row_prefix(self) -> tuple[str, ...]:
        """Company fields in column order, repeated on every output row."""
        return (self.display_name, self.legal_name, self.tax_id, self.period_label)


class CommissionDocument(BaseModel):
    """<Comissao><Empresa>...</Empresa></Comissao>"""

    model_config = {"frozen": True}

    variant: Literal[DocumentVariant.COMMISSION] = DocumentVariant.COMMISSION
    company: Company


class ValeDocument(BaseModel):
    """<Vales><Empresa>...</Empresa></Vales>"""

    model_config = {"frozen": True}

    variant: Literal[DocumentVariant.VALE] = DocumentVariant.VALE
    company: Company


PayrollDocument = Annotated[
    Union[CommissionDocument, ValeDocument], Field(discriminator="variant")
]

DOCUMENT_TYPES: dict[DocumentVariant, type[CommissionDocument] | type[ValeDocument]] = {
    DocumentVariant.COMMISSION: CommissionDocument,
    DocumentVariant.VALE: ValeDocument,
}
