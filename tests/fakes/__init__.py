"""Shared test doubles — re-export memory backends and sample documents."""

from __future__ import annotations

from conversorxml.persistence.memory_backend import MemoryFileStore
from tests.fakes.documents import ACME, commission_xml, employee_xml, vale_xml

__all__ = ["ACME", "MemoryFileStore", "commission_xml", "employee_xml", "vale_xml"]
