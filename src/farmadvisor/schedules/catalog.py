"""
Static catalog of per-species health and production schedules.

The catalog is built and validated once at import time and is read-only
afterwards. Animal names typed by farmers ("Layer Chicken", "local goat",
"CATTLE") are resolved to a catalog key by a fixed matching chain; anything
that does not match gets the default schedule.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TypeVar

from farmadvisor.logging_config import get_logger
from farmadvisor.schedules.milestones import (
    HealthEventKind,
    HealthMilestone,
    Priority,
    ProductionKind,
    ProductionMilestone,
)

logger = get_logger(__name__)

VACCINATION = HealthEventKind.VACCINATION
DEWORMING = HealthEventKind.DEWORMING

# =============================================================================
# Health schedules
# =============================================================================
# Layer and Broiler come before Chicken so that "Layer Chicken" and
# "Broiler Chicken" match the production class rather than the generic bird.

HEALTH_TEMPLATES: dict[str, tuple[HealthMilestone, ...]] = {
    "Layer": (
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle Disease (Day 7)",
            description="First Newcastle vaccination",
            offset_days=7,
            priority=Priority.URGENT,
            dosage_info="Eye drop method",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Gumboro Disease",
            description="IBD vaccination",
            offset_days=14,
            priority=Priority.URGENT,
            dosage_info="Drinking water",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle Booster",
            description="Newcastle booster",
            offset_days=21,
            priority=Priority.HIGH,
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Fowl Pox",
            description="Fowl Pox vaccination",
            offset_days=35,
            priority=Priority.HIGH,
            dosage_info="Wing web method",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle (Pre-Lay)",
            description="Newcastle vaccination before point of lay",
            offset_days=112,
            repeat_interval_days=90,
            priority=Priority.HIGH,
            notes="Repeat every 3 months during production",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Monthly Deworming",
            description="Regular deworming schedule",
            offset_days=30,
            repeat_interval_days=30,
            priority=Priority.MEDIUM,
            dosage_info="Use layer-safe dewormers",
        ),
    ),
    "Broiler": (
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle Disease (Day 7)",
            description="First Newcastle Disease vaccination",
            offset_days=7,
            priority=Priority.URGENT,
            dosage_info="Eye drop or drinking water",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Gumboro Disease",
            description="IBD vaccination",
            offset_days=14,
            priority=Priority.URGENT,
            dosage_info="Drinking water method",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle Booster",
            description="Newcastle Disease booster",
            offset_days=21,
            priority=Priority.HIGH,
            dosage_info="Drinking water method",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Pre-Market Deworming",
            description="Deworming before market age",
            offset_days=28,
            priority=Priority.MEDIUM,
            dosage_info="Use approved dewormer with short withdrawal period",
        ),
    ),
    "Chicken": (
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle Disease (First Dose)",
            description="First Newcastle Disease vaccination - critical for poultry health",
            offset_days=7,
            priority=Priority.URGENT,
            dosage_info="Eye drop or drinking water method",
            notes="Ensure birds are healthy before vaccination",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Gumboro Disease (IBD)",
            description="Infectious Bursal Disease vaccination",
            offset_days=14,
            priority=Priority.URGENT,
            dosage_info="Drinking water method",
            notes="Critical for young birds",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle Disease (Booster)",
            description="Newcastle Disease booster vaccination",
            offset_days=21,
            priority=Priority.HIGH,
            dosage_info="Eye drop or drinking water method",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Fowl Pox",
            description="Fowl Pox vaccination - wing web method",
            offset_days=28,
            priority=Priority.HIGH,
            dosage_info="Wing web scarification",
            notes="Check for take after 7-10 days",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Fowl Typhoid",
            description="Fowl Typhoid vaccination",
            offset_days=42,
            priority=Priority.MEDIUM,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="First Deworming",
            description="Initial deworming treatment",
            offset_days=21,
            repeat_interval_days=30,
            priority=Priority.MEDIUM,
            dosage_info="Piperazine or Levamisole in drinking water",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Monthly Deworming",
            description="Regular monthly deworming",
            offset_days=51,
            repeat_interval_days=30,
            priority=Priority.MEDIUM,
            dosage_info="Rotate dewormers to prevent resistance",
        ),
    ),
    "Cattle": (
        HealthMilestone(
            kind=VACCINATION,
            name="Foot and Mouth Disease (FMD)",
            description="FMD vaccination - mandatory in endemic areas",
            offset_days=14,
            repeat_interval_days=180,
            priority=Priority.URGENT,
            dosage_info="Intramuscular injection",
            notes="Repeat every 6 months",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Anthrax",
            description="Anthrax vaccination",
            offset_days=30,
            repeat_interval_days=365,
            priority=Priority.URGENT,
            dosage_info="Subcutaneous injection",
            notes="Annual vaccination required",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Black Quarter (BQ)",
            description="Blackleg vaccination",
            offset_days=45,
            repeat_interval_days=365,
            priority=Priority.HIGH,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Hemorrhagic Septicemia (HS)",
            description="HS vaccination",
            offset_days=60,
            repeat_interval_days=365,
            priority=Priority.HIGH,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Brucellosis",
            description="Brucellosis vaccination for heifers",
            offset_days=90,
            priority=Priority.HIGH,
            dosage_info="Single dose for female calves 3-8 months",
            notes="One-time vaccination for heifers only",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Quarterly Deworming",
            description="Regular deworming treatment",
            offset_days=30,
            repeat_interval_days=90,
            priority=Priority.HIGH,
            dosage_info="Ivermectin or Albendazole based on weight",
        ),
    ),
    "Goat": (
        HealthMilestone(
            kind=VACCINATION,
            name="PPR (Peste des Petits Ruminants)",
            description="PPR vaccination - essential for goats",
            offset_days=14,
            repeat_interval_days=365,
            priority=Priority.URGENT,
            dosage_info="Subcutaneous injection",
            notes="Annual vaccination",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Goat Pox",
            description="Goat Pox vaccination",
            offset_days=30,
            repeat_interval_days=365,
            priority=Priority.HIGH,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Enterotoxemia",
            description="Clostridial vaccination",
            offset_days=45,
            repeat_interval_days=180,
            priority=Priority.HIGH,
            dosage_info="Subcutaneous injection",
            notes="Repeat every 6 months",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Foot Rot",
            description="Foot rot vaccination if endemic",
            offset_days=60,
            repeat_interval_days=180,
            priority=Priority.MEDIUM,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="First Deworming",
            description="Initial deworming after acquisition",
            offset_days=14,
            priority=Priority.HIGH,
            dosage_info="Albendazole or Ivermectin",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Quarterly Deworming",
            description="Regular deworming schedule",
            offset_days=90,
            repeat_interval_days=90,
            priority=Priority.HIGH,
            dosage_info="Rotate dewormers",
        ),
    ),
    "Sheep": (
        HealthMilestone(
            kind=VACCINATION,
            name="PPR",
            description="Peste des Petits Ruminants vaccination",
            offset_days=14,
            repeat_interval_days=365,
            priority=Priority.URGENT,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Sheep Pox",
            description="Sheep Pox vaccination",
            offset_days=30,
            repeat_interval_days=365,
            priority=Priority.HIGH,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Enterotoxemia",
            description="Clostridial diseases vaccination",
            offset_days=45,
            repeat_interval_days=180,
            priority=Priority.HIGH,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Foot Rot",
            description="Foot rot prevention",
            offset_days=60,
            repeat_interval_days=180,
            priority=Priority.MEDIUM,
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Initial Deworming",
            description="First deworming treatment",
            offset_days=14,
            priority=Priority.HIGH,
            dosage_info="Albendazole or Fenbendazole",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Quarterly Deworming",
            description="Regular deworming",
            offset_days=90,
            repeat_interval_days=90,
            priority=Priority.HIGH,
        ),
    ),
    "Pig": (
        HealthMilestone(
            kind=VACCINATION,
            name="African Swine Fever Awareness",
            description="No vaccine available - focus on biosecurity",
            offset_days=1,
            priority=Priority.URGENT,
            notes="Implement strict biosecurity measures",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Classical Swine Fever",
            description="CSF vaccination if available in region",
            offset_days=21,
            repeat_interval_days=180,
            priority=Priority.HIGH,
            dosage_info="Intramuscular injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Erysipelas",
            description="Swine Erysipelas vaccination",
            offset_days=56,
            repeat_interval_days=180,
            priority=Priority.HIGH,
            dosage_info="Intramuscular injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Porcine Parvovirus",
            description="PPV vaccination for breeding stock",
            offset_days=120,
            repeat_interval_days=180,
            priority=Priority.MEDIUM,
            notes="Important for breeding sows",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Initial Deworming",
            description="First deworming treatment",
            offset_days=21,
            priority=Priority.HIGH,
            dosage_info="Ivermectin or Fenbendazole",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Monthly Deworming",
            description="Regular deworming schedule",
            offset_days=60,
            repeat_interval_days=30,
            priority=Priority.MEDIUM,
        ),
    ),
    "Rabbit": (
        HealthMilestone(
            kind=VACCINATION,
            name="Rabbit Hemorrhagic Disease (RHD)",
            description="RHD vaccination if available",
            offset_days=42,
            repeat_interval_days=365,
            priority=Priority.HIGH,
            dosage_info="Subcutaneous injection",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Myxomatosis",
            description="Myxomatosis vaccination if endemic",
            offset_days=56,
            repeat_interval_days=180,
            priority=Priority.MEDIUM,
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Initial Deworming",
            description="First deworming",
            offset_days=28,
            priority=Priority.MEDIUM,
            dosage_info="Piperazine or Fenbendazole",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Quarterly Deworming",
            description="Regular deworming",
            offset_days=90,
            repeat_interval_days=90,
            priority=Priority.MEDIUM,
        ),
    ),
    "Guinea Fowl": (
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle Disease",
            description="Newcastle vaccination",
            offset_days=14,
            repeat_interval_days=90,
            priority=Priority.HIGH,
            dosage_info="Eye drop or drinking water",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Fowl Pox",
            description="Fowl Pox vaccination",
            offset_days=42,
            priority=Priority.MEDIUM,
            dosage_info="Wing web method",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Monthly Deworming",
            description="Regular deworming",
            offset_days=30,
            repeat_interval_days=30,
            priority=Priority.MEDIUM,
        ),
    ),
    "Turkey": (
        HealthMilestone(
            kind=VACCINATION,
            name="Newcastle Disease",
            description="Newcastle vaccination",
            offset_days=7,
            priority=Priority.URGENT,
            dosage_info="Eye drop method",
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Fowl Cholera",
            description="Pasteurella vaccination",
            offset_days=56,
            repeat_interval_days=180,
            priority=Priority.HIGH,
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Fowl Pox",
            description="Fowl Pox vaccination",
            offset_days=42,
            priority=Priority.MEDIUM,
            dosage_info="Wing web or thigh stick",
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Monthly Deworming",
            description="Regular deworming",
            offset_days=30,
            repeat_interval_days=30,
            priority=Priority.MEDIUM,
        ),
    ),
    "Duck": (
        HealthMilestone(
            kind=VACCINATION,
            name="Duck Plague",
            description="Duck viral enteritis vaccination",
            offset_days=14,
            repeat_interval_days=365,
            priority=Priority.HIGH,
        ),
        HealthMilestone(
            kind=VACCINATION,
            name="Duck Cholera",
            description="Pasteurella vaccination",
            offset_days=42,
            repeat_interval_days=180,
            priority=Priority.MEDIUM,
        ),
        HealthMilestone(
            kind=DEWORMING,
            name="Monthly Deworming",
            description="Regular deworming",
            offset_days=30,
            repeat_interval_days=30,
            priority=Priority.MEDIUM,
        ),
    ),
}

DEFAULT_HEALTH_SCHEDULE: tuple[HealthMilestone, ...] = (
    HealthMilestone(
        kind=VACCINATION,
        name="Initial Health Check",
        description="Veterinary health assessment after acquisition",
        offset_days=7,
        priority=Priority.HIGH,
        notes="Consult veterinarian for species-specific vaccination schedule",
    ),
    HealthMilestone(
        kind=DEWORMING,
        name="Initial Deworming",
        description="First deworming treatment",
        offset_days=14,
        priority=Priority.MEDIUM,
        notes="Consult veterinarian for appropriate dewormer",
    ),
    HealthMilestone(
        kind=DEWORMING,
        name="Quarterly Deworming",
        description="Regular deworming schedule",
        offset_days=90,
        repeat_interval_days=90,
        priority=Priority.MEDIUM,
    ),
)

# =============================================================================
# Production schedules
# =============================================================================
# Milestones are listed in non-decreasing offset order per animal type.
# Revenue figures are in the farm's local currency (GHS).

PRODUCTION_TEMPLATES: dict[str, tuple[ProductionMilestone, ...]] = {
    "Layer": (
        ProductionMilestone(
            kind=ProductionKind.EGGS,
            name="Point of Lay",
            description="Layers begin egg production (18-20 weeks of age)",
            offset_days=126,  # ~18 weeks if acquired as day-old chicks
            expected_daily_output=0.5,
            unit="eggs per bird",
            expected_revenue_per_unit=1.5,
            duration_days=14,
            notes="Production starts slowly, expect 50% lay rate",
        ),
        ProductionMilestone(
            kind=ProductionKind.EGGS,
            name="Peak Production Phase",
            description="Peak egg production period (22-45 weeks)",
            offset_days=154,
            expected_daily_output=0.85,
            unit="eggs per bird",
            expected_revenue_per_unit=1.5,
            duration_days=161,
            notes="Peak production - expect 80-90% lay rate",
        ),
        ProductionMilestone(
            kind=ProductionKind.EGGS,
            name="Sustained Production",
            description="Sustained production phase (45-72 weeks)",
            offset_days=315,
            expected_daily_output=0.75,
            unit="eggs per bird",
            expected_revenue_per_unit=1.5,
            duration_days=189,
            notes="Production gradually declines to 70-75%",
        ),
        ProductionMilestone(
            kind=ProductionKind.EGGS,
            name="Late Production",
            description="Late production phase (72+ weeks)",
            offset_days=504,
            expected_daily_output=0.6,
            unit="eggs per bird",
            expected_revenue_per_unit=1.5,
            duration_days=84,  # ~12 weeks before culling
            notes="Consider culling or molting at this stage",
        ),
    ),
    "Broiler": (
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Week 1 Weight Check",
            description="First week weight monitoring",
            offset_days=7,
            expected_daily_output=0.18,
            unit="kg per bird",
            notes="Target: 180g average weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Week 2 Weight Check",
            description="Second week weight monitoring",
            offset_days=14,
            expected_daily_output=0.45,
            unit="kg per bird",
            notes="Target: 450g average weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Week 3 Weight Check",
            description="Third week weight monitoring",
            offset_days=21,
            expected_daily_output=0.85,
            unit="kg per bird",
            notes="Target: 850g average weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Week 4 Weight Check",
            description="Fourth week weight monitoring",
            offset_days=28,
            expected_daily_output=1.4,
            unit="kg per bird",
            notes="Target: 1.4kg average weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Week 5 Weight Check",
            description="Fifth week weight monitoring",
            offset_days=35,
            expected_daily_output=1.9,
            unit="kg per bird",
            notes="Target: 1.9kg average weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Market Weight (Week 6)",
            description="Ready for market - optimal weight reached",
            offset_days=42,
            expected_daily_output=2.3,
            unit="kg per bird",
            expected_revenue_per_unit=35,  # per kg live weight
            notes="Target: 2.3kg - Ready for sale",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Extended Growth (Week 7)",
            description="Extended growth for larger birds",
            offset_days=49,
            expected_daily_output=2.7,
            unit="kg per bird",
            expected_revenue_per_unit=35,
            notes="Target: 2.7kg - Premium size",
        ),
    ),
    "Cattle": (
        ProductionMilestone(
            kind=ProductionKind.MILK,
            name="Early Lactation",
            description="First 100 days after calving - peak milk production",
            offset_days=0,
            expected_daily_output=20,
            unit="liters per cow",
            expected_revenue_per_unit=8,
            duration_days=100,
            notes="Peak production period - ensure adequate nutrition",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Weight Monitoring",
            description="Monthly weight check for beef cattle",
            offset_days=30,
            expected_daily_output=0.8,
            unit="kg daily gain",
            notes="Target 0.8-1.2 kg daily weight gain",
        ),
        ProductionMilestone(
            kind=ProductionKind.MILK,
            name="Mid Lactation",
            description="Days 100-200 - sustained production",
            offset_days=100,
            expected_daily_output=15,
            unit="liters per cow",
            expected_revenue_per_unit=8,
            duration_days=100,
            notes="Maintain body condition for next breeding",
        ),
        ProductionMilestone(
            kind=ProductionKind.MILK,
            name="Late Lactation",
            description="Days 200-305 - declining production",
            offset_days=200,
            expected_daily_output=10,
            unit="liters per cow",
            expected_revenue_per_unit=8,
            duration_days=105,
            notes="Prepare for dry period",
        ),
    ),
    "Goat": (
        ProductionMilestone(
            kind=ProductionKind.MILK,
            name="Peak Lactation",
            description="First 2 months after kidding",
            offset_days=0,
            expected_daily_output=2.5,
            unit="liters per goat",
            expected_revenue_per_unit=12,
            duration_days=60,
            notes="Peak milk production for dairy breeds",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Growth Monitoring",
            description="Monthly weight check for meat goats",
            offset_days=30,
            expected_daily_output=0.1,
            unit="kg daily gain",
            notes="Target 100g daily weight gain",
        ),
        ProductionMilestone(
            kind=ProductionKind.MILK,
            name="Mid Lactation",
            description="Months 2-5 after kidding",
            offset_days=60,
            expected_daily_output=1.5,
            unit="liters per goat",
            expected_revenue_per_unit=12,
            duration_days=90,
            notes="Sustained production phase",
        ),
    ),
    "Sheep": (
        ProductionMilestone(
            kind=ProductionKind.MILK,
            name="Lactation Period",
            description="Milk production for dairy sheep",
            offset_days=0,
            expected_daily_output=1.5,
            unit="liters per ewe",
            expected_revenue_per_unit=15,
            duration_days=150,
            notes="For dairy sheep breeds",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Lamb Growth",
            description="Weight monitoring for meat production",
            offset_days=30,
            expected_daily_output=0.25,
            unit="kg daily gain",
            notes="Target 200-300g daily gain for lambs",
        ),
        ProductionMilestone(
            kind=ProductionKind.OTHER,
            name="Wool Production",
            description="Annual wool shearing",
            offset_days=180,
            expected_daily_output=4,  # kg per year, recorded once at shearing
            unit="kg wool per sheep",
            expected_revenue_per_unit=20,
            notes="Annual shearing - varies by breed",
        ),
    ),
    "Pig": (
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Weaner Stage",
            description="Post-weaning growth (8-12 weeks)",
            offset_days=0,
            expected_daily_output=0.4,
            unit="kg daily gain",
            duration_days=28,
            notes="Target 400g daily gain",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Grower Stage",
            description="Growing phase (12-20 weeks)",
            offset_days=28,
            expected_daily_output=0.7,
            unit="kg daily gain",
            duration_days=56,
            notes="Target 700g daily gain",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Finisher Stage",
            description="Finishing phase (20-24 weeks)",
            offset_days=84,
            expected_daily_output=0.9,
            unit="kg daily gain",
            duration_days=28,
            notes="Target 900g daily gain",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Market Weight",
            description="Ready for market (90-110 kg)",
            offset_days=112,
            expected_daily_output=100,  # target live weight, not a daily gain
            unit="kg live weight",
            expected_revenue_per_unit=25,
            notes="Target 90-110kg live weight for market",
        ),
    ),
    "Guinea Fowl": (
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Market Weight",
            description="Ready for meat market (14-16 weeks)",
            offset_days=98,
            expected_daily_output=1.5,
            unit="kg per bird",
            expected_revenue_per_unit=45,
            notes="Target 1.3-1.8kg live weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.EGGS,
            name="Egg Production Start",
            description="Guinea fowl begin laying (26-28 weeks)",
            offset_days=182,
            expected_daily_output=0.4,
            unit="eggs per bird",
            expected_revenue_per_unit=3,
            duration_days=180,
            notes="Seasonal layers - peak in rainy season",
        ),
    ),
    "Turkey": (
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Week 8 Weight",
            description="Early growth monitoring",
            offset_days=56,
            expected_daily_output=2.5,
            unit="kg per bird",
            notes="Target 2.5kg at 8 weeks",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Week 12 Weight",
            description="Mid-growth monitoring",
            offset_days=84,
            expected_daily_output=5,
            unit="kg per bird",
            notes="Target 5kg at 12 weeks",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Market Weight (Hens)",
            description="Female turkeys ready for market",
            offset_days=112,
            expected_daily_output=7,
            unit="kg per bird",
            expected_revenue_per_unit=40,
            notes="Hens: 6-8kg live weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Market Weight (Toms)",
            description="Male turkeys ready for market",
            offset_days=140,
            expected_daily_output=12,
            unit="kg per bird",
            expected_revenue_per_unit=40,
            notes="Toms: 10-15kg live weight",
        ),
    ),
    "Duck": (
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Market Weight",
            description="Ready for meat market (7-8 weeks)",
            offset_days=49,
            expected_daily_output=2.5,
            unit="kg per bird",
            expected_revenue_per_unit=35,
            notes="Target 2.5-3kg live weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.EGGS,
            name="Egg Production",
            description="Duck egg production (20+ weeks)",
            offset_days=140,
            expected_daily_output=0.7,
            unit="eggs per bird",
            expected_revenue_per_unit=2.5,
            duration_days=365,
            notes="Ducks can lay 200-300 eggs per year",
        ),
    ),
    "Rabbit": (
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Weaning Weight",
            description="Weight at weaning (8 weeks)",
            offset_days=56,
            expected_daily_output=1.5,
            unit="kg per rabbit",
            notes="Target 1.5kg at weaning",
        ),
        ProductionMilestone(
            kind=ProductionKind.WEIGHT,
            name="Market Weight",
            description="Ready for market (12-14 weeks)",
            offset_days=84,
            expected_daily_output=2.5,
            unit="kg per rabbit",
            expected_revenue_per_unit=50,
            notes="Target 2-3kg live weight",
        ),
        ProductionMilestone(
            kind=ProductionKind.OTHER,
            name="Breeding Cycle",
            description="Does can breed every 6-8 weeks",
            offset_days=120,
            expected_daily_output=6,  # kits per litter
            unit="kits per litter",
            notes="4-5 litters per year possible",
        ),
    ),
}

DEFAULT_PRODUCTION_SCHEDULE: tuple[ProductionMilestone, ...] = (
    ProductionMilestone(
        kind=ProductionKind.WEIGHT,
        name="Initial Weight Recording",
        description="Record baseline weight at acquisition",
        offset_days=0,
        unit="kg",
        notes="Record initial weight for growth tracking",
    ),
    ProductionMilestone(
        kind=ProductionKind.WEIGHT,
        name="Monthly Weight Check",
        description="Regular weight monitoring",
        offset_days=30,
        unit="kg",
        notes="Monthly weight recording for growth analysis",
    ),
)

# Common names farmers use for catalog entries
ANIMAL_TYPE_SYNONYMS: dict[str, str] = {
    "local chicken": "Chicken",
    "broiler chicken": "Broiler",
    "layer chicken": "Layer",
    "guinea fowl": "Guinea Fowl",
    "local goat": "Goat",
    "local sheep": "Sheep",
    "local cattle": "Cattle",
    "local pig": "Pig",
}


# =============================================================================
# Catalog
# =============================================================================


class CatalogValidationError(ValueError):
    """Raised when static schedule data violates a milestone invariant."""


M = TypeVar("M", HealthMilestone, ProductionMilestone)


def _validate_health(animal_type: str, milestones: Sequence[HealthMilestone]) -> None:
    if not milestones:
        raise CatalogValidationError(f"{animal_type}: health schedule is empty")
    for milestone in milestones:
        where = f"{animal_type} / {milestone.name}"
        if milestone.offset_days < 0:
            raise CatalogValidationError(f"{where}: offset_days must be >= 0")
        if milestone.repeat_interval_days is not None and milestone.repeat_interval_days <= 0:
            raise CatalogValidationError(f"{where}: repeat_interval_days must be > 0")


def _validate_production(animal_type: str, milestones: Sequence[ProductionMilestone]) -> None:
    if not milestones:
        raise CatalogValidationError(f"{animal_type}: production schedule is empty")
    previous_offset = 0
    for milestone in milestones:
        where = f"{animal_type} / {milestone.name}"
        if milestone.offset_days < 0:
            raise CatalogValidationError(f"{where}: offset_days must be >= 0")
        if milestone.offset_days < previous_offset:
            raise CatalogValidationError(f"{where}: milestones must be ordered by offset_days")
        if milestone.duration_days is not None and milestone.duration_days <= 0:
            raise CatalogValidationError(f"{where}: duration_days must be > 0")
        if milestone.expected_daily_output is not None and milestone.expected_daily_output < 0:
            raise CatalogValidationError(f"{where}: expected_daily_output must be >= 0")
        if (
            milestone.expected_revenue_per_unit is not None
            and milestone.expected_revenue_per_unit < 0
        ):
            raise CatalogValidationError(f"{where}: expected_revenue_per_unit must be >= 0")
        previous_offset = milestone.offset_days


class ScheduleCatalog:
    """
    Read-only lookup of health and production schedules by animal type.

    Resolution chain, applied separately to the health and production tables:
    exact key, case-insensitive key, input containing a key, key containing
    the input, synonym table, default schedule. Ties go to the first key in
    catalog order.
    """

    def __init__(
        self,
        health: Mapping[str, Sequence[HealthMilestone]],
        production: Mapping[str, Sequence[ProductionMilestone]],
        default_health: Sequence[HealthMilestone],
        default_production: Sequence[ProductionMilestone],
        synonyms: Mapping[str, str] | None = None,
    ):
        for animal_type, milestones in health.items():
            _validate_health(animal_type, milestones)
        for animal_type, milestones in production.items():
            _validate_production(animal_type, milestones)
        _validate_health("default", default_health)
        _validate_production("default", default_production)

        synonyms = synonyms or {}
        known = set(health) | set(production)
        for alias, target in synonyms.items():
            if target not in known:
                raise CatalogValidationError(f"Synonym {alias!r} points to unknown type {target!r}")

        self._health = MappingProxyType({k: tuple(v) for k, v in health.items()})
        self._production = MappingProxyType({k: tuple(v) for k, v in production.items()})
        self._default_health = tuple(default_health)
        self._default_production = tuple(default_production)
        self._synonyms = MappingProxyType({k.lower(): v for k, v in synonyms.items()})

    @property
    def animal_types(self) -> list[str]:
        """All catalog keys, health table first, in catalog order."""
        return list(dict.fromkeys([*self._health, *self._production]))

    @property
    def default_health(self) -> tuple[HealthMilestone, ...]:
        return self._default_health

    @property
    def default_production(self) -> tuple[ProductionMilestone, ...]:
        return self._default_production

    def _resolve(self, animal_type: str, table: Mapping[str, tuple[M, ...]]) -> str | None:
        if animal_type in table:
            return animal_type

        normalized = animal_type.strip().lower()
        if not normalized:
            return None

        for key in table:
            if key.lower() == normalized:
                return key

        # "Layer Chicken" contains "layer"
        for key in table:
            if key.lower() in normalized:
                return key

        # "fowl" is contained in "guinea fowl"
        for key in table:
            if normalized in key.lower():
                return key

        mapped = self._synonyms.get(normalized)
        if mapped is not None and mapped in table:
            return mapped

        return None

    def resolve_key(self, animal_type: str) -> str | None:
        """Catalog key matched by either table, health first."""
        return self.resolve_health_key(animal_type) or self.resolve_production_key(animal_type)

    def resolve_health_key(self, animal_type: str) -> str | None:
        """Catalog key whose health schedule applies, or None for the default."""
        return self._resolve(animal_type, self._health)

    def resolve_production_key(self, animal_type: str) -> str | None:
        """Catalog key whose production schedule applies, or None for the default."""
        return self._resolve(animal_type, self._production)

    def health_schedule(self, animal_type: str) -> tuple[HealthMilestone, ...]:
        """Health milestones for an animal type; never empty."""
        key = self.resolve_health_key(animal_type)
        if key is None:
            logger.debug(f"No health schedule for {animal_type!r}, using default")
            return self._default_health
        return self._health[key]

    def production_schedule(self, animal_type: str) -> tuple[ProductionMilestone, ...]:
        """Production milestones for an animal type; never empty."""
        key = self.resolve_production_key(animal_type)
        if key is None:
            logger.debug(f"No production schedule for {animal_type!r}, using default")
            return self._default_production
        return self._production[key]


DEFAULT_CATALOG = ScheduleCatalog(
    health=HEALTH_TEMPLATES,
    production=PRODUCTION_TEMPLATES,
    default_health=DEFAULT_HEALTH_SCHEDULE,
    default_production=DEFAULT_PRODUCTION_SCHEDULE,
    synonyms=ANIMAL_TYPE_SYNONYMS,
)


def get_catalog() -> ScheduleCatalog:
    """Process-wide schedule catalog (FastAPI dependency)."""
    return DEFAULT_CATALOG


def resolve_health_schedule(animal_type: str) -> tuple[HealthMilestone, ...]:
    """Health milestones for an animal type from the default catalog."""
    return DEFAULT_CATALOG.health_schedule(animal_type)


def resolve_production_schedule(animal_type: str) -> tuple[ProductionMilestone, ...]:
    """Production milestones for an animal type from the default catalog."""
    return DEFAULT_CATALOG.production_schedule(animal_type)
