from pydantic import BaseModel, ConfigDict, Field


class Mapping(BaseModel):
    """A stored association between a short key and its destination URL.

    This is also the document shape kept in MongoDB: {key, url}.
    """
    key: str = Field(..., description="Generated short key")
    url: str = Field(..., description="Destination URL, stored as given")

    model_config = ConfigDict(from_attributes=True)
