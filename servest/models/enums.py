"""Enums for the servest domain models.

These enums cover the recurring-task vocabulary shared by the housekeeping,
facilities-management and retrofit estimators.
"""

from enum import StrEnum


class Frequency(StrEnum):
    """How often a recurring task is performed."""

    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    ANNUAL = "annual"


class EstimationMode(StrEnum):
    """Whether headcount is derived from workload or supplied directly."""

    OUTPUT_BASE = "output_base"
    INPUT_BASE = "input_base"


class Bucket(StrEnum):
    """Housekeeping resource bucket a cleaning area is assigned to."""

    MACHINE = "machine"
    MANUAL_DETAIL = "manual_detail"
    MANUAL_GENERAL = "manual_general"


class Responsibility(StrEnum):
    """Who performs the maintenance of an asset type."""

    IN_HOUSE = "in_house"
    SUBCONTRACT = "subcontract"


class ContractModel(StrEnum):
    """Commercial model governing which materials the contractor absorbs."""

    FULLY_COMPREHENSIVE = "fully_comprehensive"
    SEMI_COMPREHENSIVE = "semi_comprehensive"
    COST_PLUS = "cost_plus"


class PricingMode(StrEnum):
    """How a specialised service or subcontract package is priced."""

    PER_ASSET = "per_asset"
    PER_UNIT = "per_unit"
    LUMP_SUM = "lump_sum"


class DeploymentModel(StrEnum):
    """Resident staff are rounded to whole heads; rotating staff stay fractional."""

    RESIDENT = "resident"
    ROTATING = "rotating"


class RetrofitMode(StrEnum):
    """Retrofit estimates are built from itemised inputs or a bill of quantities."""

    STANDARD = "standard"
    BOQ = "boq"


class FleetVariance(StrEnum):
    """Declared machine quantity compared with the workload requirement."""

    SUFFICIENT = "sufficient"
    INSUFFICIENT = "insufficient"
    EXCESS = "excess"


class ProjectStatus(StrEnum):
    """Lifecycle status of an estimated project."""

    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    PENDING_CLIENT_DECISION = "PENDING_CLIENT_DECISION"
    AWARDED = "AWARDED"
    LOST = "LOST"
    CANCELLED = "CANCELLED"
