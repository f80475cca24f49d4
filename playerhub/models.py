from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union

# Profiles arrive from the platform API in camelCase; attributes stay snake_case.
# Request shapes are loose: a half-filled or odd sub-object is scored, never rejected.

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class Location(CamelModel):
    country: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    show_exact_location: Optional[bool] = None

class SocialMedia(CamelModel):
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    twitter: Optional[str] = None

class Height(CamelModel):
    value: Optional[Union[float, str]] = None
    unit: Optional[str] = None  # cm | ft

class Weight(CamelModel):
    value: Optional[Union[float, str]] = None
    unit: Optional[str] = None  # kg | lbs

class Club(CamelModel):
    club_name: Optional[str] = None
    joined_date: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    position: Optional[str] = None
    achievements: Optional[str] = None

class Achievement(CamelModel):
    title: Optional[str] = None
    title_ar: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    type: Optional[str] = None  # award | championship | milestone | other

class Certificate(CamelModel):
    name: Optional[str] = None
    issued_by: Optional[str] = None
    issued_date: Optional[str] = None
    certificate_url: Optional[str] = None

class Photo(CamelModel):
    url: Optional[str] = None
    caption: Optional[str] = None
    caption_ar: Optional[str] = None
    uploaded_at: Optional[str] = None

class Video(CamelModel):
    url: Optional[str] = None
    thumbnail: Optional[str] = None
    title: Optional[str] = None
    title_ar: Optional[str] = None
    duration: Optional[float] = None
    uploaded_at: Optional[str] = None

class TrainingSlot(CamelModel):
    start_time: Optional[str] = None
    end_time: Optional[str] = None

class TrainingAvailability(CamelModel):
    day: Optional[str] = None  # monday .. sunday
    slots: List[TrainingSlot] = []

class PlayerProfile(CamelModel):
    """Player profile as owned by the platform data layer. Every field may be absent."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    # Core
    primary_sport: Optional[str] = None
    position: Optional[str] = None
    position_ar: Optional[str] = None
    level: Optional[str] = None  # beginner | amateur | semi-pro | professional
    status: Optional[str] = None  # active | looking_for_club | open_to_offers | not_available
    location: Optional[Location] = None
    # Personal
    bio: Optional[str] = None
    bio_ar: Optional[str] = None
    birth_date: Optional[str] = None
    nationality: Optional[str] = None
    languages: Optional[List[str]] = None
    # Physical
    height: Optional[Height] = None
    weight: Optional[Weight] = None
    preferred_foot: Optional[str] = None  # left | right | both
    # Career
    years_of_experience: Optional[int] = None
    current_club: Optional[Club] = None
    previous_clubs: Optional[List[Club]] = None
    achievements: Optional[List[Achievement]] = None
    certificates: Optional[List[Certificate]] = None
    # Media
    avatar: Optional[str] = None
    banner_image: Optional[str] = None
    photos: Optional[List[Photo]] = None
    videos: Optional[List[Video]] = None
    highlight_video_url: Optional[str] = None
    # Extras
    goals: Optional[str] = None
    goals_ar: Optional[str] = None
    additional_sports: Optional[List[str]] = None
    social_media: Optional[SocialMedia] = None
    training_availability: Optional[List[TrainingAvailability]] = None
    open_to_relocation: Optional[bool] = None

# Completion output

class FieldStatus(CamelModel):
    label: str
    completed: bool

class CompletionResult(CamelModel):
    """Response for POST /api/v1/profile/completion"""
    percentage: int
    completed_fields: List[str]
    missing_fields: List[str]
    total_fields: int
    completed_count: int

class CategoryBreakdownEntry(CamelModel):
    key: str
    name: str
    weight: int
    completed: int
    total: int
    percentage: int  # points contributed to the overall score
    fields: List[FieldStatus]

class BreakdownResponse(CamelModel):
    """Response for POST /api/v1/profile/completion/breakdown"""
    percentage: int
    categories: List[CategoryBreakdownEntry]
    next_category: Optional[CategoryBreakdownEntry] = None
    bonus_fields: List[FieldStatus] = []

class FieldDescription(CamelModel):
    key: str
    label: str
    kind: str

class CategoryDescription(CamelModel):
    key: str
    name: str
    weight: int
    fields: List[FieldDescription]

class CategoryTableResponse(CamelModel):
    """Response for GET /api/v1/completion/categories"""
    total_fields: int
    categories: List[CategoryDescription]

class HealthResponse(BaseModel):
    status: str
    categories: int
