"""
Pydantic models for Learning Drop generation.

Provides type-safe models for the user profile, generation requests/results,
parsed output blocks and catalog resources.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LearningFormat(str, Enum):
    """Learning formats a user can prefer."""
    PODCASTS = "Podcasts"
    BOOKS = "Books"
    COURSES = "Courses"
    ARTICLES = "Articles"
    VIDEOS = "Videos"

    @property
    def emoji(self) -> str:
        return FORMAT_EMOJIS[self]


FORMAT_EMOJIS = {
    LearningFormat.PODCASTS: "🎧",
    LearningFormat.BOOKS: "📚",
    LearningFormat.COURSES: "🎓",
    LearningFormat.ARTICLES: "📰",
    LearningFormat.VIDEOS: "🎬",
}


class PricePreference(str, Enum):
    ANY = "Any"
    FREE = "Free"
    PAID = "Paid"


class Profile(BaseModel):
    """Career-development profile collected by the form."""
    name: str = ""
    email: str = ""
    country: str = ""
    area: str = ""
    current_position: str = ""
    time_in_current_role: str = ""
    time_available_per_week: str = ""
    short_term_goals: str = ""
    long_term_goals: str = ""
    hard_skills: str = ""  # Up to 3, comma-separated
    soft_skills: str = ""  # Up to 3, comma-separated
    learning_preferences: List[LearningFormat] = Field(default_factory=list)
    price_preference: PricePreference = PricePreference.ANY
    additional_comments: str = ""

    @field_validator("learning_preferences")
    @classmethod
    def _dedupe_preferences(cls, value: List[LearningFormat]) -> List[LearningFormat]:
        # Set semantics; keep first-seen order for display only
        return list(dict.fromkeys(value))

    def with_field(self, name: str, value) -> "Profile":
        """Return a validated copy with one field replaced."""
        if name not in type(self).model_fields:
            raise ValueError(f"Unknown profile field: {name}")
        return type(self).model_validate({**self.model_dump(), name: value})


class GenerationRequest(BaseModel):
    profile: Profile
    previous_message: Optional[str] = None

    @property
    def is_regeneration(self) -> bool:
        return bool(self.previous_message)


class Citation(BaseModel):
    """Grounding source reported by the model."""
    model_config = ConfigDict(frozen=True)

    title: str = ""
    uri: str


class GenerationResult(BaseModel):
    """Raw model message plus its grounding citations."""
    model_config = ConfigDict(frozen=True)

    message: str
    sources: List[Citation] = Field(default_factory=list)

    @field_validator("sources")
    @classmethod
    def _drop_empty_sources(cls, value: List[Citation]) -> List[Citation]:
        return [source for source in value if source.uri]


class Heading(BaseModel):
    kind: Literal["heading"] = "heading"
    text: str


class SubHeading(BaseModel):
    kind: Literal["subheading"] = "subheading"
    text: str


class ResourceEntry(BaseModel):
    """One recommended resource; price is empty when it could not be parsed."""
    kind: Literal["resource"] = "resource"
    title: str
    url: str
    price: str = ""
    type: str = "Link"


class PlainLine(BaseModel):
    kind: Literal["plain"] = "plain"
    text: str


ParsedBlock = Annotated[
    Union[Heading, SubHeading, ResourceEntry, PlainLine],
    Field(discriminator="kind"),
]


class LearningResource(BaseModel):
    """Row of the CSV resource catalog."""
    title: str = ""
    type: str = "Article"
    url: str = ""
    price: str = "Free"
    description: str = ""
    keywords: List[str] = Field(default_factory=list)
