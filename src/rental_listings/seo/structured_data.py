"""schema.org JSON-LD for listing detail pages."""

import json
from typing import Any

from rental_listings.models import CURRENCY, PropertyRecord


def property_json_ld(record: PropertyRecord) -> dict[str, Any]:
    """Describe a listing as a schema.org RentAction on an Accommodation."""
    return {
        "@context": "https://schema.org",
        "@type": "RentAction",
        "object": {
            "@type": "Accommodation",
            "name": record.title,
            "description": record.description,
            "address": {
                "@type": "PostalAddress",
                "streetAddress": record.address,
                "addressLocality": record.city,
                "addressCountry": "GB",
            },
            "numberOfBedrooms": record.bedrooms,
            "numberOfBathroomsTotal": record.bathrooms,
            "amenityFeature": [
                {"@type": "LocationFeatureSpecification", "name": feature}
                for feature in record.features
            ],
        },
        "price": record.price,
        "priceCurrency": CURRENCY,
        "priceSpecification": {
            "@type": "UnitPriceSpecification",
            "price": record.price,
            "priceCurrency": CURRENCY,
            "unitCode": "MON",
        },
    }


def dump_json_ld(data: dict[str, Any]) -> str:
    """Serialize JSON-LD for embedding in a <script> tag.

    "</" is escaped so a description can never close the script element.
    """
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")
