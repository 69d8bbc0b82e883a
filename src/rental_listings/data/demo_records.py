"""The fixed demo record set, loaded once at import time."""

from datetime import date
from typing import Final

from rental_listings.models import PropertyRecord

_PLACEHOLDER_IMAGE: Final = "/api/placeholder/400/300"

DEMO_PROPERTIES: Final[tuple[PropertyRecord, ...]] = (
    PropertyRecord(
        id="1",
        title="Modern City Centre Apartment",
        description=(
            "A stunning modern apartment in the heart of Manchester city centre "
            "with excellent transport links and amenities nearby."
        ),
        city="Manchester",
        bedrooms=2,
        bathrooms=1,
        price=1200,
        image_url=_PLACEHOLDER_IMAGE,
        address="15 Deansgate, Manchester M1 5QG",
        features=("City Centre", "Modern", "Transport Links", "Balcony"),
        available_from=date(2024, 2, 1),
    ),
    PropertyRecord(
        id="2",
        title="Victorian House with Garden",
        description=(
            "Beautiful Victorian terraced house in Birmingham with original "
            "features and a lovely garden."
        ),
        city="Birmingham",
        bedrooms=3,
        bathrooms=2,
        price=950,
        image_url=_PLACEHOLDER_IMAGE,
        address="42 Moseley Road, Birmingham B12 9AD",
        features=("Garden", "Victorian", "Original Features", "Parking"),
        available_from=date(2024, 1, 15),
    ),
    PropertyRecord(
        id="3",
        title="Student-Friendly Flat",
        description=(
            "Perfect for students or young professionals, close to University "
            "of Nottingham with all bills included."
        ),
        city="Nottingham",
        bedrooms=1,
        bathrooms=1,
        price=650,
        image_url=_PLACEHOLDER_IMAGE,
        address="88 University Boulevard, Nottingham NG7 2RD",
        features=("Bills Included", "University Area", "Furnished", "WiFi"),
        available_from=date(2024, 3, 1),
    ),
    PropertyRecord(
        id="4",
        title="Luxury Penthouse",
        description=(
            "Exclusive penthouse apartment in Leeds with panoramic city views "
            "and premium finishes throughout."
        ),
        city="Leeds",
        bedrooms=3,
        bathrooms=3,
        price=1800,
        image_url=_PLACEHOLDER_IMAGE,
        address="The Sky, 1 Aire Street, Leeds LS1 4PR",
        features=("Penthouse", "City Views", "Luxury", "Concierge"),
        available_from=date(2024, 1, 20),
    ),
    PropertyRecord(
        id="5",
        title="Family Home with Parking",
        description=(
            "Spacious family home in a quiet residential area of Manchester "
            "with driveway parking and garden."
        ),
        city="Manchester",
        bedrooms=4,
        bathrooms=2,
        price=1400,
        image_url=_PLACEHOLDER_IMAGE,
        address="23 Oak Avenue, Manchester M20 4WX",
        features=("Family Home", "Parking", "Garden", "Quiet Area"),
        available_from=date(2024, 2, 15),
    ),
    PropertyRecord(
        id="6",
        title="Canal-Side Apartment",
        description=(
            "Contemporary apartment overlooking the historic canals of "
            "Birmingham with waterside walks."
        ),
        city="Birmingham",
        bedrooms=2,
        bathrooms=2,
        price=1100,
        image_url=_PLACEHOLDER_IMAGE,
        address="Canal Wharf, Birmingham B1 2JB",
        features=("Canal Views", "Contemporary", "Waterside", "Historic Area"),
        available_from=date(2024, 1, 10),
    ),
    PropertyRecord(
        id="7",
        title="City Centre Studio",
        description=(
            "Compact but perfectly formed studio apartment in the heart of "
            "Nottingham's shopping district."
        ),
        city="Nottingham",
        bedrooms=0,
        bathrooms=1,
        price=550,
        image_url=_PLACEHOLDER_IMAGE,
        address="Central Square, Nottingham NG1 5FS",
        features=("Studio", "City Centre", "Shopping District", "Compact"),
        available_from=date(2024, 2, 20),
    ),
    PropertyRecord(
        id="8",
        title="Georgian Townhouse",
        description=(
            "Elegant Georgian townhouse in Leeds with period features and "
            "modern conveniences."
        ),
        city="Leeds",
        bedrooms=4,
        bathrooms=3,
        price=1600,
        image_url=_PLACEHOLDER_IMAGE,
        address="Park Square, Leeds LS1 2NE",
        features=("Georgian", "Period Features", "Townhouse", "Historic"),
        available_from=date(2024, 3, 10),
    ),
)

# City listing pages advertised in the sitemap
SITEMAP_CITIES: Final[tuple[str, ...]] = ("manchester", "birmingham", "nottingham", "leeds")
