"""End-to-end tests for the facilities-management estimator."""

from __future__ import annotations

import pytest

from servest.data.defaults import default_facilities_state
from servest.engine import EstimationPipeline
from servest.factory import create_facilities_pipeline
from servest.models.enums import (
    ContractModel,
    DeploymentModel,
    EstimationMode,
    Frequency,
    PricingMode,
    Responsibility,
)
from servest.models.facilities import (
    AssetInventory,
    AssetType,
    CatalogItem,
    ContractModelConfig,
    DeployedTechnician,
    FacilitiesAssumptions,
    FacilitiesState,
    PPMTask,
    ReactiveProfile,
    SpecializedService,
    SupportRole,
)
from servest.models.results import FacilitiesResult
from servest.variants.facilities import reactive_annual_hours

HVAC_MONTHLY_CTC = 3500 + 300
COVERAGE = 365 / 263

# Daily hours for 100 split units: quarterly 1.5h PPM plus 2%/month reactive at 2h
SPLIT_DAILY_HOURS = (1.5 * 100 / 90) + (0.02 * 100 * 2 * 12) / 365


@pytest.fixture()
def pipeline() -> EstimationPipeline:
    return create_facilities_pipeline()


def _split_unit(critical: bool = False, tech_id: str = "tech-hvac") -> AssetType:
    return AssetType(
        id="split",
        category="HVAC",
        asset_name="Split AC Unit",
        ppm_tasks=[
            PPMTask(
                id="ppm-1",
                task_name="Quarterly Service",
                frequency=Frequency.QUARTERLY,
                hours_per_visit=1.5,
                technician_type_id=tech_id,
                is_critical=critical,
            )
        ],
        reactive=ReactiveProfile(
            reactive_calls_percent=2,
            avg_hours_per_call=2,
            technician_type_id=tech_id,
            is_monthly_rate=True,
        ),
    )


def _chiller() -> AssetType:
    return AssetType(
        id="chiller",
        category="HVAC",
        asset_name="Chiller",
        ppm_tasks=[
            PPMTask(
                id="ppm-1",
                frequency=Frequency.MONTHLY,
                hours_per_visit=8,
                technician_type_id="tech-hvac",
            )
        ],
        responsibility=Responsibility.SUBCONTRACT,
    )


def _state(**updates: object) -> FacilitiesState:
    base = default_facilities_state().model_copy(
        update={
            "asset_types": [_split_unit()],
            "asset_inventory": [AssetInventory(id="inv-1", asset_type_id="split", quantity=100)],
        }
    )
    return base.model_copy(update=updates)


def _estimate(pipeline: EstimationPipeline, state: FacilitiesState) -> FacilitiesResult:
    result = pipeline.estimate(state)
    assert isinstance(result, FacilitiesResult)
    return result


class TestWorkload:
    def test_reactive_annual_hours(self) -> None:
        assert reactive_annual_hours(2, 100, 2) == pytest.approx(4.0)
        assert reactive_annual_hours(2, 100, 2, is_monthly_rate=True) == pytest.approx(48.0)

    def test_daily_hours_per_technician(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, _state())
        (hvac,) = result.manpower_by_type
        assert hvac.technician_type_id == "tech-hvac"
        assert hvac.daily_hours == pytest.approx(SPLIT_DAILY_HOURS)
        assert hvac.annual_hours == pytest.approx(SPLIT_DAILY_HOURS * 365)

    def test_fte_uses_effective_shift_hours(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, _state())
        (hvac,) = result.manpower_by_type
        # 12h shift less a 60 minute break
        assert hvac.active_fte == pytest.approx(SPLIT_DAILY_HOURS / 11)
        assert hvac.total_with_relief == pytest.approx(SPLIT_DAILY_HOURS / 11 * COVERAGE)

    def test_subcontracted_assets_add_no_hours(self, pipeline: EstimationPipeline) -> None:
        state = _state(
            asset_types=[_split_unit(), _chiller()],
            asset_inventory=[
                AssetInventory(id="inv-1", asset_type_id="split", quantity=100),
                AssetInventory(
                    id="inv-2", asset_type_id="chiller", quantity=2, unit_subcontract_cost=500
                ),
            ],
        )
        result = _estimate(pipeline, state)
        (hvac,) = result.manpower_by_type
        assert hvac.daily_hours == pytest.approx(SPLIT_DAILY_HOURS)
        assert result.subcontract_assets_annual == pytest.approx(2 * 500 * 12)


class TestDeployment:
    def test_non_critical_work_is_rotating(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, _state())
        (hvac,) = result.manpower_by_type
        assert hvac.deployment_model is DeploymentModel.ROTATING
        assert hvac.headcount == pytest.approx(hvac.total_with_relief)
        assert hvac.annual_cost == pytest.approx(hvac.headcount * HVAC_MONTHLY_CTC * 12)
        assert result.total_resident_headcount == 0

    def test_critical_work_is_resident_and_rounded_up(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, _state(asset_types=[_split_unit(critical=True)]))
        (hvac,) = result.manpower_by_type
        assert hvac.deployment_model is DeploymentModel.RESIDENT
        assert hvac.headcount == 1
        assert result.manpower_annual == pytest.approx(HVAC_MONTHLY_CTC * 12)
        assert result.total_resident_headcount == 1

    def test_support_roles(self, pipeline: EstimationPipeline) -> None:
        state = _state(
            support_roles=[
                SupportRole(id="s1", technician_type_id="supervisor", count=1),
                SupportRole(
                    id="s2",
                    technician_type_id="helper",
                    count=0.5,
                    deployment_model=DeploymentModel.ROTATING,
                ),
            ]
        )
        result = _estimate(pipeline, state)
        assert result.supervision_annual == pytest.approx(5300 * 12 + 0.5 * 2300 * 12)
        assert result.support_headcount == pytest.approx(1.5)


class TestInputBased:
    def test_deployed_technicians_drive_headcount(self, pipeline: EstimationPipeline) -> None:
        state = _state(
            assumptions=FacilitiesAssumptions(contract_mode=EstimationMode.INPUT_BASE),
            deployed_technicians=[
                DeployedTechnician(id="d1", technician_type_id="tech-hvac", quantity=2),
                DeployedTechnician(id="d2", technician_type_id="retired", quantity=4),
            ],
        )
        result = _estimate(pipeline, state)
        (hvac,) = result.manpower_by_type
        assert result.estimation_mode is EstimationMode.INPUT_BASE
        assert hvac.active_fte == 2
        assert hvac.deployment_model is DeploymentModel.RESIDENT
        # ceil(2 * 365 / 263) = 3
        assert hvac.headcount == 3
        assert result.manpower_annual == pytest.approx(3 * HVAC_MONTHLY_CTC * 12)

    def test_unknown_deployed_type_is_reported(self, pipeline: EstimationPipeline) -> None:
        state = _state(
            assumptions=FacilitiesAssumptions(contract_mode=EstimationMode.INPUT_BASE),
            deployed_technicians=[
                DeployedTechnician(id="d1", technician_type_id="ghost", quantity=3),
            ],
        )
        result = _estimate(pipeline, state)
        assert result.total_active_fte == 0
        assert len(result.manpower_by_type) == 0
        assert len(result.warnings) == 1
        assert "ghost" in result.warnings[0]

    def test_deployed_types_are_ignored_in_output_mode(
        self, pipeline: EstimationPipeline
    ) -> None:
        state = _state(
            deployed_technicians=[
                DeployedTechnician(id="d1", technician_type_id="ghost", quantity=3),
            ],
        )
        assert _estimate(pipeline, state).warnings == ()


class TestOrphans:
    def test_deleted_technician_is_excluded_with_warning(
        self, pipeline: EstimationPipeline
    ) -> None:
        state = _state(asset_types=[_split_unit(tech_id="ghost")])
        result = _estimate(pipeline, state)
        assert result.manpower_by_type == ()
        assert result.manpower_annual == 0.0
        assert any("ghost" in warning for warning in result.warnings)


class TestCostPaths:
    def test_materials_follow_contract_model(self, pipeline: EstimationPipeline) -> None:
        materials = [
            CatalogItem(id="m1", category="HVAC", unit_rate=20, expected_annual_qty=50),
            CatalogItem(
                id="m2", category="HVAC", unit_rate=100, expected_annual_qty=5, included=False
            ),
        ]
        fully = _estimate(pipeline, _state(materials_catalog=materials))
        semi = _estimate(
            pipeline,
            _state(
                materials_catalog=materials,
                contract_model=ContractModelConfig(global_model=ContractModel.SEMI_COMPREHENSIVE),
            ),
        )
        assert fully.materials_annual == pytest.approx(1500.0)
        assert semi.materials_annual == pytest.approx(1000.0)

    def test_specialised_services(self, pipeline: EstimationPipeline) -> None:
        state = _state(
            specialized_services=[
                SpecializedService(
                    id="svc-1",
                    pricing_mode=PricingMode.PER_ASSET,
                    qty=10,
                    frequency=Frequency.QUARTERLY,
                    unit_cost=50,
                ),
                SpecializedService(id="svc-2", pricing_mode=PricingMode.LUMP_SUM, annual_cost=3000),
            ]
        )
        result = _estimate(pipeline, state)
        assert result.specialized_services_annual == pytest.approx(2000 + 3000)
        assert result.subcontract.direct_cost == pytest.approx(5000.0)
        # 5% overheads then 10% markup
        assert result.subcontract.selling_annual == pytest.approx(5000 * 1.05 * 1.10)

    def test_paths_are_priced_separately(self, pipeline: EstimationPipeline) -> None:
        state = _state(
            specialized_services=[
                SpecializedService(id="svc", pricing_mode=PricingMode.LUMP_SUM, annual_cost=10_000)
            ]
        )
        result = _estimate(pipeline, state)
        assert result.in_house.selling_annual == pytest.approx(
            result.in_house.direct_cost * 1.10 * 1.15
        )
        assert result.final_price_annual == pytest.approx(
            result.in_house.selling_annual + result.subcontract.selling_annual
        )
        assert result.final_price_monthly == pytest.approx(result.final_price_annual / 12)

    def test_empty_state_prices_to_zero(self, pipeline: EstimationPipeline) -> None:
        result = _estimate(pipeline, default_facilities_state())
        assert result.final_price_annual == 0.0
        assert result.warnings == ()

    def test_idempotent(self, pipeline: EstimationPipeline) -> None:
        state = _state()
        assert pipeline.estimate(state) == pipeline.estimate(state)
