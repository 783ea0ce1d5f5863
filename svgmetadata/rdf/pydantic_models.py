from typing import List

from pydantic import BaseModel, Field

from svgmetadata.rdf.models import MetadataRecord


class MetadataSummary(BaseModel):
    title: str = Field("", description="dc:title of the Work")
    description: str = ""
    subject: str = ""
    creator: str = Field("", description="Name of the creating agent")
    creator_url: str = ""
    owner: str = Field("", description="Rights holder (dc:rights)")
    owner_url: str = ""
    publisher: str = ""
    publisher_url: str = ""
    license: str = Field("", description="License URI or 'Public Domain'")
    license_date: str = ""
    language: str = "en"
    date: str = ""
    about_url: str = ""
    keywords: List[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: MetadataRecord) -> "MetadataSummary":
        return cls(**record.to_dict())
