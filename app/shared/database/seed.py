import logging

from app.domains.artist.schemas import ArtistCreate
from app.domains.artwork.schemas import ArtworkCreate
from app.shared.database.store import MemoryStore
from app.shared.errors import SampleDataAlreadySeededError

logger = logging.getLogger(__name__)

SAMPLE_ARTISTS = [
    ArtistCreate(
        name="Elena Kroft",
        biography="Abstract Digital Artist specializing in geometric forms and vibrant colors.",
        profile_image="https://images.unsplash.com/photo-1494790108377-be9c29b29330",
        cover_image="https://images.unsplash.com/photo-1579546929518-9e396f3cc809",
        wallet_address="0x1234567890abcdef1234567890abcdef12345678",
    ),
    ArtistCreate(
        name="Michael Chen",
        biography="Landscape Digital Artist creating immersive digital environments.",
        profile_image="https://images.unsplash.com/photo-1500648767791-00dcc994a43e",
        cover_image="https://images.unsplash.com/photo-1550745165-9bc0b252726f",
        wallet_address="0xabcdef1234567890abcdef1234567890abcdef12",
    ),
    ArtistCreate(
        name="Sarah Lee",
        biography="Portrait Artist specializing in digital character art and emotional expressions.",
        profile_image="https://images.unsplash.com/photo-1580489944761-15a19d654956",
        cover_image="https://images.unsplash.com/photo-1518640467707-6811f4a6ab73",
        wallet_address="0x7890abcdef1234567890abcdef1234567890abcd",
    ),
    ArtistCreate(
        name="James Wilson",
        biography="3D Artist creating immersive sculptures and environments with a focus on realism.",
        profile_image="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d",
        cover_image="https://images.unsplash.com/photo-1506252374453-ef5237291d83",
        wallet_address="0xdef1234567890abcdef1234567890abcdef123456",
    ),
]

# (index into SAMPLE_ARTISTS, artwork fields)
SAMPLE_ARTWORKS = [
    (
        0,
        dict(
            title="Transcendent Shapes",
            description="An exploration of geometric forms and vibrant colors in the digital space.",
            image_url="https://images.unsplash.com/photo-1618005182384-a83a8bd57fbe",
            category="abstract",
            price=3.5,
            token_id="34829",
        ),
    ),
    (
        1,
        dict(
            title="Digital Horizon",
            description="A digital landscape portraying the boundary between technology and nature.",
            image_url="https://images.unsplash.com/photo-1633532482485-b3cb5a9a4135",
            category="landscape",
            price=5.2,
            token_id="27156",
        ),
    ),
    (
        2,
        dict(
            title="Neon Dreams",
            description="A portrait exploring human emotion through digital manipulation and vibrant colors.",
            image_url="https://images.unsplash.com/photo-1614107096292-b2b312de0c34",
            category="portrait",
            price=7.8,
            token_id="18973",
        ),
    ),
]


def seed_sample_data(store: MemoryStore) -> None:
    """
    Populate ``store`` with the demo artists and artworks.

    Goes through the regular create operations so artwork counters stay in
    step. May run once per store.
    """
    if store.seeded:
        raise SampleDataAlreadySeededError()
    store.seeded = True

    artists = [store.create_artist(data) for data in SAMPLE_ARTISTS]
    for artist_index, fields in SAMPLE_ARTWORKS:
        store.create_artwork(
            ArtworkCreate(artist_id=artists[artist_index].id, is_approved=True, **fields)
        )

    logger.info(
        "Seeded %d sample artists and %d sample artworks",
        len(SAMPLE_ARTISTS),
        len(SAMPLE_ARTWORKS),
    )
