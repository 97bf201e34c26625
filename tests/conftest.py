"""Canonical listings used across engine and API tests.

Fixture: $1.25M two-bedroom, 1,000 sqft, $1,200/mo common charges, 30 days on market.
Everything else left at defaults (neutral location, unrated district, no amenities).
"""

from decimal import Decimal

import pytest

from src.models.property import PropertyData


@pytest.fixture
def canonical_listing() -> PropertyData:
    return PropertyData(
        address="245 E 63rd St #12B, New York, NY",
        price=Decimal("1250000"),
        monthly_fees=Decimal("1200"),
        square_feet=1000,
        bedrooms=2,
        days_on_market=30,
    )


@pytest.fixture
def no_sqft_listing() -> PropertyData:
    """One-bedroom at $900K with unknown floor area."""
    return PropertyData(
        address="10 Jay St #5, Brooklyn, NY",
        price=Decimal("900000"),
        square_feet=0,
        bedrooms=1,
    )


@pytest.fixture
def premium_listing() -> PropertyData:
    """Well-located prewar with amenities, quiet, pet friendly."""
    return PropertyData(
        address="1 Central Park W #20A, New York, NY",
        price=Decimal("2400000"),
        monthly_fees=Decimal("900"),
        property_taxes=Decimal("6000"),
        square_feet=2000,
        bedrooms=3,
        bathrooms=Decimal("2.5"),
        floor=10,
        total_floors=20,
        building_age=30,
        school_district="District 2",
        walk_score=95,
        transit_score=90,
        bike_score=80,
        proximity_to_park=Decimal("2"),
        proximity_to_subway=Decimal("3"),
        safety_score=Decimal("8"),
        amenities=("Doorman", "Gym", "Elevator", "Storage"),
        home_features=("Fireplace", "Washer/dryer"),
        days_on_market=60,
        noise_level=2,
        pet_friendly=True,
    )
