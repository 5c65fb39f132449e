"""
Core Domain Entities.

This module defines the record types of the dashboard dataset. Rows arrive
from the data-retrieval layer with many more columns than the engine
filters on; unknown columns are kept on the record untouched.

Numeric columns that the source stores loosely (revenue as "$1.2B",
years as "12") are typed as ``NumberLike`` and only interpreted by the
parsers in ``account_facets.matching.parsing``.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

NumberLike = Optional[Union[float, str]]


class EntityKind(str, Enum):
    """Collections produced by a filtering pass."""

    ACCOUNT = "accounts"
    CENTER = "centers"
    FUNCTION = "functions"
    SERVICE = "services"
    PROSPECT = "prospects"


_RECORD_CONFIG = ConfigDict(frozen=True, extra="allow")


class Account(BaseModel):
    """A business account, keyed by its global legal name."""

    account_global_legal_name: str = Field(..., description="Natural join key")
    account_hq_region: Optional[str] = None
    account_hq_country: Optional[str] = None
    account_hq_industry: Optional[str] = None
    account_data_coverage: Optional[str] = None
    account_source: Optional[str] = None
    account_type: Optional[str] = None
    account_primary_category: Optional[str] = None
    account_primary_nature: Optional[str] = None
    account_nasscom_status: Optional[str] = None
    account_hq_employee_range: Optional[str] = None
    account_center_employees_range: Optional[str] = None
    account_hq_revenue: NumberLike = Field(
        default=None, description="Number, numeric string or formatted amount"
    )
    years_in_india: NumberLike = None

    model_config = _RECORD_CONFIG


class Center(BaseModel):
    """A delivery center belonging to one account."""

    cn_unique_key: str = Field(..., description="Center-level natural key")
    account_global_legal_name: str
    center_name: Optional[str] = None
    center_type: Optional[str] = None
    center_focus: Optional[str] = None
    center_city: Optional[str] = None
    center_state: Optional[str] = None
    center_country: Optional[str] = None
    center_employees_range: Optional[str] = None
    center_status: Optional[str] = None
    center_inc_year: NumberLike = None

    model_config = _RECORD_CONFIG


class Function(BaseModel):
    """A (center, function) association row."""

    cn_unique_key: str
    function_name: Optional[str] = None

    model_config = _RECORD_CONFIG


class Service(BaseModel):
    """Descriptive per-center services row; filtered only by center key."""

    cn_unique_key: str
    primary_service: Optional[str] = None
    focus_region: Optional[str] = None

    model_config = _RECORD_CONFIG


class Tech(BaseModel):
    """A (center, software) row used to build the software index."""

    cn_unique_key: Optional[str] = None
    account_global_legal_name: Optional[str] = None
    software_in_use: Optional[str] = None
    software_vendor: Optional[str] = None
    software_category: Optional[str] = None

    model_config = _RECORD_CONFIG


class Prospect(BaseModel):
    """A contact at an account."""

    account_global_legal_name: str
    prospect_full_name: Optional[str] = None
    prospect_title: Optional[str] = None
    prospect_department: Optional[str] = None
    prospect_level: Optional[str] = None
    prospect_city: Optional[str] = None

    model_config = _RECORD_CONFIG


class Dataset(BaseModel):
    """All collections supplied to one engine call."""

    accounts: List[Account] = Field(default_factory=list)
    centers: List[Center] = Field(default_factory=list)
    functions: List[Function] = Field(default_factory=list)
    services: List[Service] = Field(default_factory=list)
    prospects: List[Prospect] = Field(default_factory=list)
    tech: List[Tech] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def row_count(self) -> int:
        """Total rows across every collection."""
        return (
            len(self.accounts)
            + len(self.centers)
            + len(self.functions)
            + len(self.services)
            + len(self.prospects)
            + len(self.tech)
        )
