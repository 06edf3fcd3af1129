from typing import Annotated, Literal, Optional, Union

from pydantic import AfterValidator, EmailStr, Field, HttpUrl, RootModel, TypeAdapter
from pydantic import ValidationError

from app.domains.submissions.models import SubmissionStatus
from app.shared.utils.schema import CamelModel

_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    # Validate only; the link is stored exactly as submitted
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid http or https URL")
    return value


HttpUrlString = Annotated[str, AfterValidator(_check_http_url)]


class ArtworkSubmissionRequest(CamelModel):
    """A new piece proposed by an artist, awaiting review"""
    kind: Literal["artwork"]
    title: str = Field(..., min_length=1, description="Artwork title")
    description: Optional[str] = Field(None, description="Artwork description")
    category: str = Field(..., min_length=1, description="Category tag")
    price: Optional[float] = Field(None, ge=0, description="Asking price")
    artist_name: str = Field(..., min_length=1, max_length=100)
    artist_email: EmailStr
    wallet_address: Optional[str] = Field(None, description="Artist's wallet address")
    image_file_name: Optional[str] = Field(None, description="Uploaded image file name")


class NftSubmissionRequest(CamelModel):
    """A collector's claim on an externally minted NFT, awaiting verification"""
    kind: Literal["nft"]
    world_of_v_link: HttpUrlString = Field(..., description="Link to the NFT on World of V")
    wallet_address: str = Field(..., min_length=1, description="Collector's wallet address")
    token_id: Optional[str] = Field(None, description="Token id, if known")


class SubmitRequest(RootModel):
    root: Annotated[
        Union[ArtworkSubmissionRequest, NftSubmissionRequest],
        Field(discriminator="kind"),
    ]


class SubmitResponse(CamelModel):
    message: str
    submission_id: int
    kind: Literal["artwork", "nft"]


class StatusUpdateRequest(CamelModel):
    status: SubmissionStatus
