"""
Reference data seeding.

Each record is looked up by its unique slug and created only when missing,
so running the seed repeatedly is safe. Records are committed one at a time;
a failure on one record is logged and the rest are still attempted.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Sequence
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.models.content import ContentPriority
from noticeboard.models.neighborhood import CameroonRegion
from noticeboard.repositories.content import FAQRepository, PropertyTypeRepository, SlugRepository
from noticeboard.repositories.neighborhood import NeighborhoodRepository
import logging

logger = logging.getLogger(__name__)


PROPERTY_TYPES: List[Dict[str, Any]] = [
    {
        "name": "Land",
        "description": "Undeveloped land plots suitable for various development purposes",
        "slug": "land",
    },
    {
        "name": "Residential",
        "description": "Properties designed for living purposes including houses, apartments, and condos",
        "slug": "residential",
    },
    {
        "name": "Commercial",
        "description": "Properties used for business purposes such as offices, retail spaces, and warehouses",
        "slug": "commercial",
    },
    {
        "name": "Industrial",
        "description": "Properties designed for manufacturing, production, and heavy industrial use",
        "slug": "industrial",
    },
]


def _neighborhood(name: str, city: str, region: CameroonRegion, description: str, lat: str, lng: str, slug: str):
    return {
        "name": name,
        "city": city,
        "region": region,
        "description": description,
        "latitude": Decimal(lat),
        "longitude": Decimal(lng),
        "slug": slug,
    }


NEIGHBORHOODS: List[Dict[str, Any]] = [
    # Douala
    _neighborhood(
        "Akwa", "Douala", CameroonRegion.LITTORAL,
        "Central business district of Douala with modern offices and commercial centers",
        "4.0511", "9.7679", "akwa-douala"
    ),
    _neighborhood(
        "Bonanjo", "Douala", CameroonRegion.LITTORAL,
        "Historic administrative and commercial quarter of Douala",
        "4.0483", "9.7006", "bonanjo-douala"
    ),
    _neighborhood(
        "Bonapriso", "Douala", CameroonRegion.LITTORAL,
        "Upscale residential area with embassies and luxury accommodations",
        "4.0614", "9.7089", "bonapriso-douala"
    ),
    # Yaoundé
    _neighborhood(
        "Centre Ville", "Yaoundé", CameroonRegion.CENTRE,
        "Downtown Yaoundé with government buildings and commercial activities",
        "3.848", "11.5021", "centre-ville-yaounde"
    ),
    _neighborhood(
        "Bastos", "Yaoundé", CameroonRegion.CENTRE,
        "Diplomatic quarter with embassies and upscale residences",
        "3.8691", "11.5174", "bastos-yaounde"
    ),
    _neighborhood(
        "Nlongkak", "Yaoundé", CameroonRegion.CENTRE,
        "Residential area popular with expatriates and professionals",
        "3.8756", "11.5156", "nlongkak-yaounde"
    ),
    # Other regional capitals
    _neighborhood(
        "Centre Ville", "Bamenda", CameroonRegion.NORTHWEST,
        "Commercial center of Bamenda with markets and business districts",
        "5.9597", "10.1494", "centre-ville-bamenda"
    ),
    _neighborhood(
        "Centre Ville", "Bafoussam", CameroonRegion.WEST,
        "Central business area of Bafoussam",
        "5.4781", "10.4199", "centre-ville-bafoussam"
    ),
    _neighborhood(
        "Centre Ville", "Garoua", CameroonRegion.NORTH,
        "Commercial hub of northern Cameroon",
        "9.3265", "13.3958", "centre-ville-garoua"
    ),
    _neighborhood(
        "Centre Ville", "Maroua", CameroonRegion.FAR_NORTH,
        "Administrative and commercial center of Far North region",
        "10.5913", "14.3153", "centre-ville-maroua"
    ),
]


FAQS: List[Dict[str, Any]] = [
    {
        "question": "How do I get verified to list properties?",
        "answer": (
            "To get verified and start listing properties, you need to:\n"
            "1. Create an account and complete your profile\n"
            "2. Upload a clear photo of your identification document "
            "(National ID, Passport, or Driver's License)\n"
            "3. Take and upload a selfie while holding your ID document\n"
            "4. Wait for admin approval (usually takes 1-3 business days)"
        ),
        "category": "user-verification",
        "priority": ContentPriority.HIGH,
        "published": True,
        "slug": "how-do-i-get-verified-to-list-properties",
    },
    {
        "question": "What types of properties can I list?",
        "answer": (
            "You can list four main types of properties:\n"
            "- Land - Undeveloped plots for various purposes\n"
            "- Residential - Houses, apartments, condos for living\n"
            "- Commercial - Offices, retail spaces, warehouses\n"
            "- Industrial - Manufacturing and production facilities\n"
            "Each property can be listed for sale or rent."
        ),
        "category": "property-listings",
        "priority": ContentPriority.HIGH,
        "published": True,
        "slug": "what-types-of-properties-can-i-list",
    },
    {
        "question": "How do I contact a property owner?",
        "answer": (
            "To contact a property owner, you can use our inquiry system:\n"
            "1. Click on the property you're interested in\n"
            "2. Use the \"Contact Owner\" or \"Send Inquiry\" button\n"
            "3. Fill out the inquiry form with your message\n"
            "4. Choose your preferred contact method (email, phone, WhatsApp)\n"
            "The owner will receive your inquiry and can respond directly."
        ),
        "category": "buying-process",
        "priority": ContentPriority.MEDIUM,
        "published": True,
        "slug": "how-do-i-contact-a-property-owner",
    },
    {
        "question": "Are all properties on the platform verified?",
        "answer": (
            "Yes, all properties visible to the public have been reviewed and approved by our "
            "administrators. Only verified users can list properties, and each listing goes through "
            "an approval process before being published.\n"
            "This ensures that:\n"
            "- Property information is accurate and complete\n"
            "- Images and descriptions are legitimate\n"
            "- Contact information is valid"
        ),
        "category": "property-listings",
        "priority": ContentPriority.MEDIUM,
        "published": True,
        "slug": "are-all-properties-on-the-platform-verified",
    },
]


@dataclass
class SeedResult:
    created: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


async def seed_records(repository: SlugRepository, records: Sequence[Dict[str, Any]], label: str) -> SeedResult:
    """
    Create every record whose slug is not stored yet.

    Args:
        repository: Repository of the collection being seeded
        records: Records to seed, each with a unique ``slug``
        label: Collection name used in log messages

    Returns:
        Slugs created, skipped and failed
    """
    result = SeedResult()

    for record in records:
        slug = record["slug"]
        try:
            if await repository.get_by_slug(slug) is not None:
                logger.info(f"{label} already exists: {slug}")
                result.skipped.append(slug)
                continue

            await repository.create(dict(record))
            logger.info(f"Created {label}: {slug}")
            result.created.append(slug)
        except Exception as e:
            logger.error(f"Failed to seed {label} {slug}: {e}")
            result.failed.append(slug)

    logger.info(
        f"{label} seed finished: {len(result.created)} created, "
        f"{len(result.skipped)} skipped, {len(result.failed)} failed"
    )
    return result


async def seed_property_types(
    db: AsyncSession,
    property_types: Sequence[Dict[str, Any]] = PROPERTY_TYPES
) -> SeedResult:
    return await seed_records(PropertyTypeRepository(db), property_types, "Property type")


async def seed_neighborhoods(
    db: AsyncSession,
    neighborhoods: Sequence[Dict[str, Any]] = NEIGHBORHOODS
) -> SeedResult:
    return await seed_records(NeighborhoodRepository(db), neighborhoods, "Neighborhood")


async def seed_faqs(db: AsyncSession, faqs: Sequence[Dict[str, Any]] = FAQS) -> SeedResult:
    return await seed_records(FAQRepository(db), faqs, "FAQ")


async def seed_all(db: AsyncSession) -> Dict[str, SeedResult]:
    return {
        "property_types": await seed_property_types(db),
        "neighborhoods": await seed_neighborhoods(db),
        "faqs": await seed_faqs(db),
    }
